"""
FastAPI Application

HTTP API server for resume tailoring.
"""

from typing import Optional

import httpx
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.datastructures import Headers
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import resume as resume_api
from app.config import Config, get_config
from app.services.container import build_services
from app.utils.exceptions import MethodNotAllowed, TailorError
from app.utils.logger import get_logger

logger = get_logger(__name__)


class PreflightCORSMiddleware(CORSMiddleware):
    """CORSMiddleware whose preflight answers are always 200 with an empty body.

    Origins outside the allow-list still get no Access-Control-Allow-Origin
    header, so browsers reject them.
    """

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        headers = {
            k: v for k, v in response.headers.items()
            if k.lower() not in ("content-length", "content-type")
        }
        return Response(status_code=status.HTTP_200_OK, headers=headers)


async def tailor_error_handler(request: Request, exc: TailorError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"[API] {exc.kind} on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.warning(f"[API] {exc.kind} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        error = MethodNotAllowed(request.method, request.url.path)
        logger.warning(f"[API] {error.kind}: {error.message}")
        return JSONResponse(status_code=error.status_code, content=error.to_body(), headers=exc.headers)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail), "message": f"{request.method} {request.url.path}"},
        headers=exc.headers,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    logger.warning(f"[API] Invalid request on {request.url.path}: {details}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request", "message": details},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"[API] Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "message": str(exc)},
    )


def create_app(
    config: Optional[Config] = None,
    completion_transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Configuration; read from the environment when omitted
        completion_transport: Optional httpx transport for the completion client

    Returns:
        Configured FastAPI app
    """
    config = config or get_config()

    app = FastAPI(
        title="Resume Tailor API",
        description="API for tailoring resumes to job descriptions",
        version="1.0.0",
    )
    app.state.config = config
    app.state.services = build_services(config, completion_transport=completion_transport)

    # With allow_credentials=True, origins cannot be "*" (must be explicit).
    app.add_middleware(
        PreflightCORSMiddleware,
        allow_origins=list(config.cors.allowed_origins),
        allow_credentials=config.cors.allow_credentials,
        allow_methods=list(config.cors.allow_methods),
        allow_headers=list(config.cors.allow_headers),
    )

    app.add_exception_handler(TailorError, tailor_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(resume_api.router)

    @app.on_event("startup")
    async def startup_log():
        logger.info(
            f"[API] Resume tailor ready: model={config.openai.model}, "
            f"storage={config.upload.storage}, max_upload={config.upload.max_file_size} bytes, "
            f"origins={len(config.cors.allowed_origins)}"
        )

    return app
