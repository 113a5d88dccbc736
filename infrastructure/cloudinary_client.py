import hashlib
import time
import logging
from typing import Optional, Tuple
from urllib.parse import quote

import requests

from core.config import CLOUDINARY_CLOUD_NAME, CLOUDINARY_API_KEY, CLOUDINARY_API_SECRET
from domain.schemas.rendition_schema import RenditionParams

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.cloudinary.com/v1_1"
DELIVERY_BASE_URL = "https://res.cloudinary.com"


class MediaServiceError(RuntimeError):
    """Raised when the media service rejects a call or cannot be reached."""


class CloudinaryClient:
    def __init__(self, cloud_name: Optional[str] = None, api_key: Optional[str] = None,
                 api_secret: Optional[str] = None, timeout: int = 30):
        self.cloud_name = cloud_name or CLOUDINARY_CLOUD_NAME
        self.api_key = api_key or CLOUDINARY_API_KEY
        self.api_secret = api_secret or CLOUDINARY_API_SECRET
        self.timeout = timeout

    def _sign(self, params: dict) -> str:
        """Firma los parámetros: sha1 de 'k=v&k=v' ordenado + secreto"""
        to_sign = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
        return hashlib.sha1(f"{to_sign}{self.api_secret}".encode("utf-8")).hexdigest()

    def upload(self, file_content: bytes, folder: str) -> dict:
        """Sube los bytes de una imagen y devuelve la respuesta del servicio (incluye public_id)"""
        url = f"{API_BASE_URL}/{self.cloud_name}/image/upload"
        params = {
            "folder": folder,
            "timestamp": str(int(time.time())),
        }
        data = dict(params)
        data["api_key"] = self.api_key
        data["signature"] = self._sign(params)

        try:
            response = requests.post(
                url,
                data=data,
                files={"file": ("upload", file_content, "application/octet-stream")},
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Connection error uploading to Cloudinary: {e}")
            raise MediaServiceError("Could not reach the media service") from e

        if not response.ok:
            logger.error(f"Cloudinary upload failed: {response.status_code} - {response.text}")
            raise MediaServiceError(f"Cloudinary error: {response.status_code}")

        result = response.json()
        if "public_id" not in result:
            raise MediaServiceError("Cloudinary response has no public_id")

        logger.info(f"Uploaded asset {result['public_id']} ({len(file_content)} bytes)")
        return result

    def build_url(self, params: RenditionParams) -> str:
        """URL de entrega con la transformación de recorte aplicada"""
        transformation = ",".join([
            f"c_{params.crop}",
            f"ar_{params.aspect_ratio}",
            f"g_{params.gravity}",
            f"w_{params.width}",
            f"h_{params.height}",
        ])
        public_id = quote(params.public_id, safe="/")
        return (
            f"{DELIVERY_BASE_URL}/{self.cloud_name}/image/upload/"
            f"{transformation}/f_auto/q_auto/{public_id}"
        )

    def fetch(self, url: str) -> Tuple[bytes, Optional[str]]:
        """Descarga una rendición ya generada; los errores se propagan"""
        response = requests.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.content, response.headers.get("Content-Type")
