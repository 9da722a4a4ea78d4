"""
Application exceptions.

`TailorError` subclasses are the tagged errors of the tailoring flow.
Each one knows its HTTP status and the short summary sent back as the
`error` field; the exception message becomes the `message` field.
"""

from typing import Optional


class AgentError(Exception):
    """Base error raised by services, tagged with the component that failed."""

    def __init__(self, message: str, component: str = "unknown"):
        self.message = message
        self.component = component
        super().__init__(message)


class TailorError(AgentError):
    kind = "TailorError"
    status_code = 500
    summary = "Failed to tailor resume"

    def __init__(self, message: Optional[str] = None, component: str = "tailor"):
        super().__init__(message or self.summary, component)

    def to_body(self) -> dict:
        return {"error": self.summary, "message": self.message}


class MissingResume(TailorError):
    kind = "MissingResume"
    status_code = 400
    summary = "Resume file is required"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "Upload a resume in the 'resume' form field", "upload")


class MissingJobDescription(TailorError):
    kind = "MissingJobDescription"
    status_code = 400
    summary = "Job description is required"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "Provide a non-empty 'jobDescription' form field", "upload")


class UnsupportedFileType(TailorError):
    kind = "UnsupportedFileType"
    status_code = 400
    summary = "Invalid file type. Only PDF, DOC, DOCX, and TXT allowed."

    def __init__(self, extension: str, component: str = "upload"):
        self.extension = extension
        super().__init__(f"Unsupported file type: {extension or '(none)'}", component)


class PayloadTooLarge(TailorError):
    kind = "PayloadTooLarge"
    status_code = 400
    summary = "File too large"

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(
            f"File size {size} bytes exceeds maximum of {limit / 1024 / 1024:g}MB", "upload"
        )


class EmptyExtraction(TailorError):
    kind = "EmptyExtraction"
    status_code = 500
    summary = "Could not extract text from resume"

    def __init__(self, filename: str):
        super().__init__(f"No text content found in {filename}", "extraction")


class ExtractionFailed(TailorError):
    kind = "ExtractionFailed"
    status_code = 500
    summary = "Failed to extract text from resume"

    def __init__(self, message: str):
        super().__init__(message, "extraction")


class CompletionFailed(TailorError):
    kind = "CompletionFailed"
    status_code = 500
    summary = "Failed to tailor resume"

    def __init__(self, message: str):
        super().__init__(message, "completion")


class MethodNotAllowed(TailorError):
    kind = "MethodNotAllowed"
    status_code = 405
    summary = "Method not allowed"

    def __init__(self, method: str, path: str):
        super().__init__(f"{method} is not supported on {path}", "api")
