import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from api.dependencies import get_auth_service, get_media_client
from domain.schemas.rendition_schema import RenditionParams
from infrastructure.cloudinary_client import CloudinaryClient
from main import app

VALID_TOKEN = "valid-token"


class FakeAuthService:
    @staticmethod
    async def get_user_from_token(request, required=False):
        if request.headers.get("Authorization") == f"Bearer {VALID_TOKEN}":
            return "user-1"
        return None


class FakeMediaClient:
    """Records uploads; returns a fixed public id or raises."""

    def __init__(self, public_id="abc123", error=None, rendered=b"", content_type="image/jpeg"):
        self.public_id = public_id
        self.error = error
        self.rendered = rendered
        self.content_type = content_type
        self.uploads = []
        self.fetched = []
        self._urls = CloudinaryClient(cloud_name="demo", api_key="key", api_secret="secret")

    def upload(self, file_content: bytes, folder: str) -> dict:
        self.uploads.append((file_content, folder))
        if self.error is not None:
            raise self.error
        return {"public_id": self.public_id, "secure_url": "https://example.invalid/x"}

    def build_url(self, params: RenditionParams) -> str:
        return self._urls.build_url(params)

    def fetch(self, url: str):
        self.fetched.append(url)
        return self.rendered, self.content_type


def make_image(size=(2000, 2000), fmt="PNG", color=(200, 30, 30)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def media_client():
    return FakeMediaClient()


@pytest.fixture
def client(media_client):
    app.dependency_overrides[get_media_client] = lambda: media_client
    app.dependency_overrides[get_auth_service] = lambda: FakeAuthService
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {VALID_TOKEN}"}


@pytest.fixture
def square_png():
    return make_image()
