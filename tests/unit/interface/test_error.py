"""Tests for domain error to HTTP mapping."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tymer.adapter.error import StorageError
from tymer.domain.error import (
    AlreadyFriendsError,
    AlreadyPostedTodayError,
    ConflictError,
    FriendRequestExistsError,
    InvitationNotFoundError,
    NotAuthenticatedError,
    NotFoundError,
    SelfAcceptanceError,
    TransientError,
    WindowClosedError,
)
from tymer.interface.error import error_response_for, register_exception_handlers


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (NotAuthenticatedError(), (401, "Connecte-toi pour continuer.")),
        (InvitationNotFoundError(), (404, "Invitation invalide ou expirée")),
        (SelfAcceptanceError(), (400, "Tu ne peux pas accepter ta propre invitation")),
        (AlreadyFriendsError("a", "b"), (409, "Vous êtes déjà amis")),
        (FriendRequestExistsError("a", "b"), (409, "Une demande d'ami est déjà en attente")),
        (WindowClosedError(), (403, "Aucune fenêtre n'est ouverte pour le moment")),
        (AlreadyPostedTodayError("a"), (409, "Tu as déjà partagé ton moment aujourd'hui")),
        (NotFoundError("Moment", "x"), (404, "Introuvable")),
        (TransientError("timeout"), (503, "Une erreur est survenue. Réessayez.")),
        (ConflictError("code"), (409, "Une erreur est survenue. Réessayez.")),
        (StorageError("rejected", 400), (502, "Le fichier n'a pas pu être enregistré")),
        (RuntimeError("boom"), (500, "Une erreur est survenue. Réessayez.")),
    ],
)
def test_error_response_for(error, expected):
    assert error_response_for(error) == expected


def test_handlers_render_json():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    async def boom():
        raise InvitationNotFoundError()

    response = TestClient(app).get("/boom")

    assert response.status_code == 404
    assert response.json() == {
        "detail": "Invitation invalide ou expirée",
        "error": "InvitationNotFoundError",
    }
