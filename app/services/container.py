from dataclasses import dataclass
from typing import Optional

import httpx

from app.config import Config
from app.services.resume_service import ResumeService
from app.services.completion_service import CompletionService


@dataclass(frozen=True)
class ServiceContainer:
    config: Config
    resume_service: ResumeService
    completion_service: CompletionService


def build_services(config: Config, completion_transport: Optional[httpx.AsyncBaseTransport] = None) -> ServiceContainer:
    # Initialize services
    return ServiceContainer(
        config=config,
        resume_service=ResumeService(config),
        completion_service=CompletionService(config, transport=completion_transport),
    )
