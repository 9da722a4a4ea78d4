"""
Request-scoped storage for uploaded resumes.

In "disk" mode each upload is written to a uniquely named file under the
upload directory; the file is removed when the scope exits, whether the
request succeeded or failed. In "memory" mode nothing touches disk.
"""

import time
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from app.config import UploadConfig
from app.services.resume_service import UploadedDocument
from app.utils.logger import get_logger

logger = get_logger(__name__)


class StoredUpload:
    """Handle to an upload for the duration of one request."""

    def __init__(self, document: UploadedDocument, path: Optional[Path] = None):
        self.document = document
        self.path = path

    def read(self) -> bytes:
        if self.path is None:
            return self.document.raw_bytes
        return self.path.read_bytes()


def _temp_name(filename: str) -> str:
    # Client-supplied directories are dropped; prefix is unique per upload
    return f"{time.time_ns()}-{uuid.uuid4().hex[:8]}-{Path(filename).name}"


@contextmanager
def scoped_upload(document: UploadedDocument, upload_config: UploadConfig) -> Iterator[StoredUpload]:
    if upload_config.storage != "disk":
        yield StoredUpload(document)
        return

    upload_dir = Path(upload_config.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    path = upload_dir / _temp_name(document.original_filename)
    try:
        path.write_bytes(document.raw_bytes)
        logger.debug(f"[UploadStorage] Stored upload at {path}")
        yield StoredUpload(document, path)
    finally:
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        else:
            logger.debug(f"[UploadStorage] Removed {path}")
