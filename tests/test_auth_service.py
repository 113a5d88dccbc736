import asyncio
from types import SimpleNamespace

import pytest
from fastapi import HTTPException
from starlette.requests import Request

from infrastructure.supabase_client import SupabaseClient
from services.auth_service import AuthService


def make_request(authorization=None):
    headers = []
    if authorization is not None:
        headers.append((b"authorization", authorization.encode()))
    return Request({"type": "http", "method": "POST", "path": "/", "headers": headers})


def test_missing_header_returns_none():
    assert asyncio.run(AuthService.get_user_from_token(make_request())) is None


def test_missing_header_required_raises():
    with pytest.raises(HTTPException) as exc_info:
        asyncio.run(AuthService.get_user_from_token(make_request(), required=True))

    assert exc_info.value.status_code == 401


def test_valid_token_resolves_user(monkeypatch):
    monkeypatch.setattr(
        SupabaseClient, "get_user",
        staticmethod(lambda token: SimpleNamespace(user=SimpleNamespace(id=f"user-for-{token}"))),
    )

    user_id = asyncio.run(AuthService.get_user_from_token(make_request("Bearer tok")))

    assert user_id == "user-for-tok"


def test_supabase_error_returns_none(monkeypatch):
    def reject(token):
        raise RuntimeError("invalid JWT")

    monkeypatch.setattr(SupabaseClient, "get_user", staticmethod(reject))

    assert asyncio.run(AuthService.get_user_from_token(make_request("Bearer bad"))) is None


def test_supabase_error_required_raises(monkeypatch):
    def reject(token):
        raise RuntimeError("invalid JWT")

    monkeypatch.setattr(SupabaseClient, "get_user", staticmethod(reject))

    with pytest.raises(HTTPException) as exc_info:
        asyncio.run(AuthService.get_user_from_token(make_request("Bearer bad"), required=True))

    assert exc_info.value.status_code == 401
