"""
Configuration Management

Centralized configuration management using environment variables
with proper validation and type safety.
"""

import os
from typing import Tuple
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv


# Load environment variables from .env in project root (resolve to absolute path)
_backend_root = Path(__file__).resolve().parent.parent
_env_path = _backend_root / ".env"
if _env_path.exists():
    load_dotenv(dotenv_path=str(_env_path))
# Also load from current working directory so "python backend_server.py" picks up .env
load_dotenv()


DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:5173",
    "http://localhost:3000",
    "https://resume-tailor-frontend-dun.vercel.app",
)

MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10MB


@dataclass(frozen=True)
class OpenAIConfig:
    """Chat-completion service configuration"""
    api_key: str
    base_url: str = "https://api.openai.com/v1"
    model: str = "gpt-4o-mini"
    temperature: float = 0.4
    system_prompt: str = "You are a professional ATS resume writer."
    timeout: float = 60.0


@dataclass(frozen=True)
class ServerConfig:
    """HTTP server configuration"""
    host: str = "0.0.0.0"
    port: int = 3001


@dataclass(frozen=True)
class CorsConfig:
    """CORS allow-list. Requests without an Origin header are always let through."""
    allowed_origins: Tuple[str, ...] = DEFAULT_ALLOWED_ORIGINS
    allow_credentials: bool = True
    allow_methods: Tuple[str, ...] = ("GET", "POST", "PUT", "DELETE", "OPTIONS")
    allow_headers: Tuple[str, ...] = ("Content-Type", "Authorization")


@dataclass(frozen=True)
class UploadConfig:
    """Resume upload limits and storage"""
    max_file_size: int = MAX_UPLOAD_BYTES
    allowed_extensions: Tuple[str, ...] = (".pdf", ".doc", ".docx", ".txt")
    # "disk" writes each upload to a request-scoped temp file, "memory" keeps the bytes only
    storage: str = "disk"
    upload_dir: Path = _backend_root / "uploads"


@dataclass(frozen=True)
class Config:
    """Main application configuration"""

    # Completion service
    openai: OpenAIConfig

    # Server configuration
    server: ServerConfig = field(default_factory=ServerConfig)

    # CORS configuration
    cors: CorsConfig = field(default_factory=CorsConfig)

    # Upload gate and storage
    upload: UploadConfig = field(default_factory=UploadConfig)

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create configuration from environment variables.

        Returns:
            Configured Config instance

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        openai_api_key = os.getenv("OPENAI_API_KEY")
        if not openai_api_key:
            raise ValueError("OPENAI_API_KEY environment variable is required")

        # Client posts to {base_url}/chat/completions; most proxies expect .../v1/chat/completions
        openai_base_url = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1").rstrip("/")
        if not openai_base_url.endswith("/v1"):
            openai_base_url = f"{openai_base_url}/v1"

        # Extra origins from env (comma-separated), e.g. CORS_ORIGINS=https://staging.example.com
        origins = list(DEFAULT_ALLOWED_ORIGINS)
        for o in os.getenv("CORS_ORIGINS", "").split(","):
            o = o.strip().rstrip("/")
            if o and o not in origins:
                origins.append(o)

        storage = os.getenv("UPLOAD_STORAGE", "disk").strip().lower()
        if storage not in ("disk", "memory"):
            raise ValueError(f"UPLOAD_STORAGE must be 'disk' or 'memory', got '{storage}'")

        upload_dir = os.getenv("UPLOAD_DIR")

        return cls(
            openai=OpenAIConfig(
                api_key=openai_api_key,
                base_url=openai_base_url,
                model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
                timeout=float(os.getenv("OPENAI_TIMEOUT", "60")),
            ),
            server=ServerConfig(
                host=os.getenv("SERVER_HOST", "0.0.0.0"),
                # Hosting platforms provide PORT; fall back to SERVER_PORT
                port=int(os.getenv("PORT") or os.getenv("SERVER_PORT", "3001")),
            ),
            cors=CorsConfig(allowed_origins=tuple(origins)),
            upload=UploadConfig(
                max_file_size=int(os.getenv("MAX_UPLOAD_BYTES", str(MAX_UPLOAD_BYTES))),
                storage=storage,
                upload_dir=Path(upload_dir) if upload_dir else UploadConfig.upload_dir,
            ),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
            LOG_FORMAT=os.getenv(
                "LOG_FORMAT",
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            ),
        )


def get_config() -> Config:
    """
    Get configuration from environment variables.

    Returns:
        Configuration instance
    """
    return Config.from_env()
