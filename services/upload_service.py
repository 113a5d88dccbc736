import io
import logging
from typing import Optional

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool
from PIL import Image, UnidentifiedImageError

from core.config import CLOUDINARY_UPLOAD_FOLDER, MAX_UPLOAD_BYTES

logger = logging.getLogger(__name__)


class InvalidUploadError(ValueError):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UploadService:
    def __init__(self, media_client, folder: str = CLOUDINARY_UPLOAD_FOLDER,
                 max_bytes: Optional[int] = None):
        self.media_client = media_client
        self.folder = folder
        self.max_bytes = max_bytes if max_bytes is not None else MAX_UPLOAD_BYTES

    async def upload(self, file: UploadFile) -> str:
        """Reads the file up to the size limit, checks it and pushes it to the media service. Returns the public id."""
        try:
            # One byte past the limit is enough to tell the file is too large
            image_bytes = await file.read(self.max_bytes + 1)
        finally:
            await file.close()

        self.validate(image_bytes)

        result = await run_in_threadpool(self.media_client.upload, image_bytes, self.folder)
        return result["public_id"]

    def validate(self, image_bytes: bytes) -> None:
        if not image_bytes:
            raise InvalidUploadError("File is empty")
        if len(image_bytes) > self.max_bytes:
            raise InvalidUploadError("File too large", status_code=413)

        try:
            with Image.open(io.BytesIO(image_bytes)) as img:
                img.verify()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError) as e:
            logger.info(f"Rejected upload that is not an image: {e}")
            raise InvalidUploadError("Only image files are allowed")
