"""Route tests against the mocked container.

In-memory repositories live for one request, so each test checks what a
single call returns.
"""

from uuid import uuid4

import pytest
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tymer.config import AuthSettings
from tymer.domain.service import JWTService
from tymer.domain.value import UserId
from tymer.interface.api.routes import (
    friends,
    health,
    invitations,
    moments,
    profile,
    windows,
)
from tymer.interface.error import register_exception_handlers
from tests.di import build_test_container


@pytest.fixture
def client():
    app = FastAPI()
    for module in (health, profile, windows, moments, friends, invitations):
        app.include_router(module.router)
    register_exception_handlers(app)
    setup_dishka(build_test_container(with_fastapi=True), app)

    with TestClient(app) as test_client:
        yield test_client


def session_cookie() -> dict[str, str]:
    token = JWTService(AuthSettings()).create_token(UserId(uuid4()))
    return {"auth_token": token}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_window_status_without_session(client):
    response = client.get("/windows")

    assert response.status_code == 200
    body = response.json()
    assert body["is_open"] is True
    assert body["current"]["label"] == "Midi"
    assert body["can_post"] is None


def test_window_status_with_session(client):
    client.cookies.update(session_cookie())

    body = client.get("/windows").json()

    assert body["can_post"] is True
    assert body["has_posted_today"] is False


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("GET", "/profile"),
        ("GET", "/friends"),
        ("GET", "/moments/feed"),
        ("GET", "/invitations"),
        ("GET", "/invitations/AB3XQ9KZ"),
        ("POST", "/invitations/AB3XQ9KZ/accept"),
    ],
)
def test_signed_out_requests_rejected(client, method, path):
    response = client.request(method, path)

    assert response.status_code == 401
    assert response.json()["detail"] == "Connecte-toi pour continuer."


def test_tampered_token_is_signed_out(client):
    client.cookies.update({"auth_token": "not-a-jwt"})

    assert client.get("/profile").status_code == 401


def test_unknown_invitation_code(client):
    client.cookies.update(session_cookie())

    response = client.post("/invitations/AB3XQ9KZ/accept")

    assert response.status_code == 404
    assert response.json()["detail"] == "Invitation invalide ou expirée"


def test_get_invitation_mints_code(client):
    client.cookies.update(session_cookie())

    response = client.get("/invitations")

    assert response.status_code == 200
    assert len(response.json()["code"]) == 8


def test_create_moment_multipart(client):
    client.cookies.update(session_cookie())

    response = client.post(
        "/moments",
        files={"image": ("moment.jpg", b"\xff\xd8jpeg", "image/jpeg")},
        data={"description": "Au soleil"},
    )

    assert response.status_code == 201
    moment = response.json()["moment"]
    assert moment["description"] == "Au soleil"
    assert "/object/public/moments/" in moment["image_url"]


def test_voice_reaction_with_bad_waveform(client):
    client.cookies.update(session_cookie())

    response = client.post(
        f"/moments/{uuid4()}/reactions/voice",
        files={"audio": ("voice.m4a", b"m4a", "audio/m4a")},
        data={"duration": "1.2", "waveform": "not json"},
    )

    assert response.status_code == 422
    assert response.json()["detail"] == "Données invalides"


def test_schedule_reminders(client):
    response = client.post("/windows/reminders", json={"request_authorization": True})

    assert response.status_code == 200
    assert response.json() == {"authorized": True, "scheduled": 3}
