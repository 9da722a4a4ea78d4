from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, Response, UploadFile, status
from starlette.concurrency import run_in_threadpool

from app.schemas.resume import ErrorResponse, HealthResponse, TailoredResumeResponse
from app.services.container import ServiceContainer
from app.services.prompt_service import build_prompt
from app.services.resume_service import ResumeService, TailorRequest
from app.services.upload_storage import StoredUpload, scoped_upload
from app.utils.exceptions import TailorError
from app.utils.logger import get_logger

logger = get_logger(__name__)

# Resume tailoring endpoints
router = APIRouter(prefix="/api", tags=["Resume"])


def get_services(request: Request) -> ServiceContainer:
    return request.app.state.services


def _extract(resume_service: ResumeService, stored: StoredUpload) -> str:
    # Runs in the thread pool: disk reads and document parsing both block
    return resume_service.extract_text(stored.read(), stored.document.original_filename)


@router.get("/health", response_model=HealthResponse)
async def health():
    """Liveness probe: returns 200 if the process is running."""
    return {"status": "ok", "message": "Server is running"}


@router.options("/tailor-resume", include_in_schema=False)
async def tailor_resume_options():
    return Response(status_code=status.HTTP_200_OK)


@router.post(
    "/tailor-resume",
    response_model=TailoredResumeResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def tailor_resume(
    resume: Optional[UploadFile] = File(None),
    jobDescription: Optional[str] = Form(None),
    services: ServiceContainer = Depends(get_services),
):
    """
    Rewrite an uploaded resume to match a job description.

    Accepts PDF, DOC/DOCX or TXT files up to the configured size limit.
    """
    resume_service = services.resume_service
    try:
        file_content = None
        filename = None
        declared_size = None
        if resume is not None:
            filename = resume.filename
            declared_size = resume.size
            logger.info(f"[TailorAPI] Received resume upload: {filename} ({resume.content_type}, {declared_size} bytes)")
            # Never buffer more than one byte past the limit; the gate rejects anything longer
            file_content = await resume.read(resume_service.max_file_size + 1)

        document = resume_service.validate_upload(
            file_content, filename, jobDescription, declared_size=declared_size
        )

        with scoped_upload(document, services.config.upload) as stored:
            resume_text = await run_in_threadpool(_extract, resume_service, stored)

            tailor_request = TailorRequest(resume_text=resume_text, job_description=jobDescription)
            prompt = build_prompt(tailor_request.resume_text, tailor_request.job_description)

            tailored_resume = await services.completion_service.complete(prompt)

        logger.info(f"[TailorAPI] ✅ Tailored resume for {filename}: {len(tailored_resume)} characters")
        return TailoredResumeResponse(success=True, tailoredResume=tailored_resume)

    except TailorError:
        raise
    except Exception as e:
        logger.error(f"[TailorAPI] Unexpected error tailoring resume: {str(e)}", exc_info=True)
        raise TailorError(str(e)) from e
    finally:
        if resume is not None:
            await resume.close()
