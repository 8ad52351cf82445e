"""Unit tests for the bearer token gate (noteful/middleware/auth.py)."""

import logging
from typing import Optional

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from noteful.config import Settings, get_settings
from noteful.main import register_exception_handlers
from noteful.middleware.auth import require_api_token


def build_app(token: str = "secret") -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)
    app.dependency_overrides[get_settings] = lambda: Settings(api_token=token)

    @app.get("/protected", dependencies=[Depends(require_api_token)])
    async def protected():
        return {"ok": True}

    @app.get("/items/{item_id}", dependencies=[Depends(require_api_token)])
    async def item(item_id: int):
        return {"item_id": item_id}

    return app


def _make_bearer(token: Optional[str]) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"} if token is not None else {}


def test_accepts_matching_token():
    client = TestClient(build_app())
    resp = client.get("/protected", headers=_make_bearer("secret"))
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


@pytest.mark.parametrize(
    "headers",
    [
        {},
        _make_bearer("wrong"),
        _make_bearer(""),
        {"Authorization": "secret"},
        {"Authorization": "Basic secret"},
    ],
)
def test_rejects_everything_else(headers):
    client = TestClient(build_app())
    resp = client.get("/protected", headers=headers)
    assert resp.status_code == 401
    assert resp.json() == {"error": "Unauthorized request"}


def test_empty_configured_token_rejects_all():
    client = TestClient(build_app(token=""))
    assert client.get("/protected", headers=_make_bearer("")).status_code == 401
    assert client.get("/protected", headers={"Authorization": "Bearer "}).status_code == 401


def test_runs_before_path_validation():
    client = TestClient(build_app())
    assert client.get("/items/abc").status_code == 401
    assert client.get("/items/abc", headers=_make_bearer("secret")).status_code == 400


def test_rejection_is_logged(caplog):
    # noteful loggers do not propagate to root
    auth_logger = logging.getLogger("noteful.auth")
    auth_logger.addHandler(caplog.handler)
    try:
        TestClient(build_app()).get("/protected", headers=_make_bearer("wrong"))
    finally:
        auth_logger.removeHandler(caplog.handler)
    assert any(r.getMessage() == "Unauthorized request" for r in caplog.records)


def _build_body_app(token: str = "secret") -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)
    app.dependency_overrides[get_settings] = lambda: Settings(api_token=token)

    class Payload(BaseModel):
        name: Optional[str] = None

    @app.post("/guarded", dependencies=[Depends(require_api_token)])
    async def guarded(payload: Payload):
        return {"name": payload.name}

    @app.post("/open")
    async def open_route(payload: Payload):
        return {"name": payload.name}

    return app


def _post_raw(client: TestClient, path: str, headers: Optional[dict] = None):
    return client.post(
        path, content=b"{not json", headers={"Content-Type": "application/json", **(headers or {})}
    )


def test_undecodable_body_still_needs_token():
    client = TestClient(_build_body_app())
    resp = _post_raw(client, "/guarded")
    assert resp.status_code == 401
    assert resp.json() == {"error": "Unauthorized request"}
    assert _post_raw(client, "/guarded", _make_bearer("wrong")).status_code == 401


def test_undecodable_body_with_token_is_400():
    client = TestClient(_build_body_app())
    resp = _post_raw(client, "/guarded", _make_bearer("secret"))
    assert resp.status_code == 400
    assert resp.json() == {"error": {"message": "Malformed request body"}}


def test_unguarded_route_reports_body_error():
    client = TestClient(_build_body_app())
    assert _post_raw(client, "/open").status_code == 400
