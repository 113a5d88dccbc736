import io
import logging
from typing import List, Optional, Tuple

from PIL import Image, UnidentifiedImageError

from domain.enums.social_formats import SocialFormat
from domain.schemas.rendition_schema import RenditionParams, RenditionResponse, FormatOut

logger = logging.getLogger(__name__)

CONTENT_TYPE_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/avif": "avif",
    "image/gif": "gif",
}

PIL_FORMAT_EXTENSIONS = {
    "JPEG": "jpg",
    "PNG": "png",
    "WEBP": "webp",
    "GIF": "gif",
}

DEFAULT_EXTENSION = "png"


class RenditionService:
    def __init__(self, media_client):
        self.media_client = media_client

    @staticmethod
    def list_formats() -> List[FormatOut]:
        return [
            FormatOut(
                name=fmt.name,
                label=fmt.label,
                width=fmt.width,
                height=fmt.height,
                aspect_ratio=fmt.aspect_ratio,
            )
            for fmt in SocialFormat
        ]

    def describe(self, public_id: str, fmt: SocialFormat) -> RenditionResponse:
        params = RenditionParams.for_format(public_id, fmt)
        return RenditionResponse(
            **params.model_dump(),
            format=fmt.name,
            label=fmt.label,
            url=self.media_client.build_url(params),
        )

    def download(self, public_id: str, fmt: SocialFormat) -> Tuple[bytes, str, str]:
        """Fetches the rendered bytes. Returns (content, filename, content type)."""
        url = self.media_client.build_url(RenditionParams.for_format(public_id, fmt))
        content, content_type = self.media_client.fetch(url)
        extension = guess_extension(content, content_type)
        filename = f"{fmt.slug}.{extension}"
        logger.info(f"Fetched rendition {public_id} as {filename} ({len(content)} bytes)")
        return content, filename, content_type or "application/octet-stream"


def guess_extension(content: bytes, content_type: Optional[str]) -> str:
    """Extension of the format the service actually returned."""
    if content_type:
        mime = content_type.split(";")[0].strip().lower()
        if mime in CONTENT_TYPE_EXTENSIONS:
            return CONTENT_TYPE_EXTENSIONS[mime]

    try:
        with Image.open(io.BytesIO(content)) as img:
            return PIL_FORMAT_EXTENSIONS.get(img.format, DEFAULT_EXTENSION)
    except (UnidentifiedImageError, OSError):
        return DEFAULT_EXTENSION
