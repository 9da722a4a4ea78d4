"""
Resume Processing Service

Validates resume uploads and extracts plain text from them.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from app.config import Config
from app.services.extractors import get_extractor
from app.utils.logger import get_logger
from app.utils.exceptions import (
    EmptyExtraction,
    ExtractionFailed,
    MissingJobDescription,
    MissingResume,
    PayloadTooLarge,
    UnsupportedFileType,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class UploadedDocument:
    raw_bytes: bytes
    original_filename: str
    size_bytes: int


@dataclass(frozen=True)
class TailorRequest:
    resume_text: str
    job_description: str


class ResumeService:
    """Service for validating resume uploads and extracting their text"""

    def __init__(self, config: Config):
        self.config = config
        self.max_file_size = config.upload.max_file_size
        self.allowed_extensions = {ext.lower() for ext in config.upload.allowed_extensions}

    def validate_upload(
        self,
        file_content: Optional[bytes],
        filename: Optional[str],
        job_description: Optional[str],
        declared_size: Optional[int] = None,
    ) -> UploadedDocument:
        """
        Run the upload gate over an incoming resume and job description.

        Args:
            file_content: File content as bytes, None when no file was sent
            filename: Original filename
            job_description: Job description form field
            declared_size: Size reported by the transport; file_content may be
                truncated to max_file_size + 1 bytes when it is given

        Returns:
            The validated UploadedDocument

        Raises:
            MissingResume, UnsupportedFileType, PayloadTooLarge, MissingJobDescription
        """
        if file_content is None or not filename:
            raise MissingResume()

        file_ext = Path(filename).suffix.lower()
        if file_ext not in self.allowed_extensions:
            raise UnsupportedFileType(file_ext)

        size = max(len(file_content), declared_size or 0)
        if size > self.max_file_size:
            raise PayloadTooLarge(size, self.max_file_size)

        if not job_description or not job_description.strip():
            raise MissingJobDescription()

        return UploadedDocument(raw_bytes=file_content, original_filename=filename, size_bytes=size)

    def extract_text(self, file_content: bytes, filename: str) -> str:
        """
        Extract plain text from a resume file, dispatching on its extension.

        Raises:
            UnsupportedFileType: No extractor is registered for the extension
            ExtractionFailed: The underlying parser raised
            EmptyExtraction: The document holds no text
        """
        file_ext = Path(filename).suffix.lower()
        try:
            extractor = get_extractor(file_ext)
        except KeyError:
            raise UnsupportedFileType(file_ext, component="extraction")

        try:
            text = extractor(file_content)
        except Exception as e:
            error_msg = f"Failed to extract text: {str(e)}"
            logger.error(f"[ResumeService] {error_msg}", exc_info=True)
            raise ExtractionFailed(error_msg) from e

        if not text or not text.strip():
            logger.warning(f"[ResumeService] ⚠️ No text extracted from {filename}")
            raise EmptyExtraction(filename)

        logger.info(f"[ResumeService] ✅ Extraction complete: {len(text)} characters from {filename}")
        if len(text.strip()) < 50:
            logger.warning(f"[ResumeService] ⚠️ Extracted text is very short ({len(text.strip())} chars)")

        return text
