from functools import lru_cache

from infrastructure.cloudinary_client import CloudinaryClient
from services.auth_service import AuthService


@lru_cache()
def get_media_client() -> CloudinaryClient:
    return CloudinaryClient()


def get_auth_service():
    return AuthService
