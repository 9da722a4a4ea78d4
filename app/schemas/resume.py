"""
Resume tailoring Pydantic schemas.
"""

from typing import Optional

from pydantic import BaseModel


class TailoredResumeResponse(BaseModel):
    success: bool
    tailoredResume: Optional[str] = None
    error: Optional[str] = None
    message: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
    message: str


class HealthResponse(BaseModel):
    status: str
    message: str


__all__ = ["TailoredResumeResponse", "ErrorResponse", "HealthResponse"]
