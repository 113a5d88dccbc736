"""
Social share preview component.

Mirrors the browser page served at ``/social-share``: the user uploads a
file, picks a social format and the media service renders the crop. The
component only tracks UI state and hands parameters to the renderer; it
never touches pixels.

States: idle -> uploading -> uploaded <-> transforming
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

import requests

from domain.enums.social_formats import SocialFormat, DEFAULT_FORMAT
from domain.schemas.rendition_schema import RenditionParams
from infrastructure.cloudinary_client import CloudinaryClient
from services.rendition_service import RenditionService

logger = logging.getLogger(__name__)


class PageState(Enum):
    IDLE = "idle"
    UPLOADING = "uploading"
    UPLOADED = "uploaded"
    TRANSFORMING = "transforming"


class UploadFailed(RuntimeError):
    pass


class HttpUploader:
    """Posts a file to the image upload endpoint and returns the public id."""

    def __init__(self, base_url: str, access_token: Optional[str] = None, timeout: int = 30):
        self.base_url = base_url.rstrip("/")
        self.access_token = access_token
        self.timeout = timeout

    def __call__(self, file_content: bytes, filename: str) -> str:
        headers = {}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"

        response = requests.post(
            f"{self.base_url}/api/image-upload",
            files={"file": (filename, file_content)},
            headers=headers,
            timeout=self.timeout
        )
        if not response.ok:
            raise UploadFailed("Failed to upload image")
        return response.json()["publicId"]


def _log_alert(message: str) -> None:
    logger.warning(message)


class SocialSharePage:
    def __init__(self, uploader: Callable[[bytes, str], str], rendition_service: RenditionService,
                 alert: Callable[[str], None] = _log_alert):
        self.uploader = uploader
        self.rendition_service = rendition_service
        self.alert = alert

        self.uploaded_image: Optional[str] = None
        self.selected_format: SocialFormat = DEFAULT_FORMAT
        self.is_uploading = False
        self.is_transforming = False

    @classmethod
    def connect(cls, base_url: str, access_token: Optional[str] = None, media_client=None,
                alert: Callable[[str], None] = _log_alert) -> "SocialSharePage":
        """Page backed by a running server: uploads over HTTP, renders through Cloudinary."""
        return cls(
            HttpUploader(base_url, access_token=access_token),
            RenditionService(media_client or CloudinaryClient()),
            alert=alert,
        )

    @property
    def state(self) -> PageState:
        if self.is_uploading:
            return PageState.UPLOADING
        if self.uploaded_image is None:
            return PageState.IDLE
        if self.is_transforming:
            return PageState.TRANSFORMING
        return PageState.UPLOADED

    def handle_file_upload(self, file_content: Optional[bytes], filename: str = "upload") -> bool:
        if file_content is None:
            return False

        self.is_uploading = True
        try:
            public_id = self.uploader(file_content, filename)
        except Exception as e:
            logger.error(f"Image upload failed: {e}")
            self.alert("Failed to upload image")
            return False
        finally:
            self.is_uploading = False

        self.uploaded_image = public_id
        self._start_transform()
        return True

    def select_format(self, fmt) -> None:
        """Accepts a SocialFormat or its name/label. Unknown names raise KeyError."""
        if not isinstance(fmt, SocialFormat):
            fmt = SocialFormat.lookup(fmt)
        if fmt is self.selected_format:
            return
        self.selected_format = fmt
        self._start_transform()

    def _start_transform(self) -> None:
        if self.uploaded_image is not None:
            self.is_transforming = True

    def on_load(self) -> None:
        """Render completion signal from the image renderer."""
        self.is_transforming = False

    def rendition(self) -> Optional[RenditionParams]:
        if self.uploaded_image is None:
            return None
        return RenditionParams.for_format(self.uploaded_image, self.selected_format)

    def rendition_url(self) -> Optional[str]:
        params = self.rendition()
        if params is None:
            return None
        return self.rendition_service.media_client.build_url(params)

    def handle_download(self, dest_dir) -> Optional[Path]:
        """Saves the current preview locally. Fetch errors are not handled here."""
        if self.uploaded_image is None:
            return None

        content, filename, _ = self.rendition_service.download(self.uploaded_image, self.selected_format)
        target = Path(dest_dir) / filename
        target.write_bytes(content)
        logger.info(f"Saved preview to {target}")
        return target
