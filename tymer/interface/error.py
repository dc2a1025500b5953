"""Mapping from domain errors to HTTP responses.

Every classified failure becomes a status code plus a short French
message the client can show as is.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from tymer.adapter.error import StorageError
from tymer.domain.error import (
    AlreadyFriendsError,
    AlreadyPostedTodayError,
    BusinessRuleViolationError,
    ConflictError,
    DomainError,
    FriendRequestExistsError,
    InvitationNotFoundError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
    SelfAcceptanceError,
    TransientError,
    ValidationError,
    WindowClosedError,
)

GENERIC_MESSAGE = "Une erreur est survenue. Réessayez."

ERROR_RESPONSES: dict[type[Exception], tuple[int, str]] = {
    NotAuthenticatedError: (status.HTTP_401_UNAUTHORIZED, "Connecte-toi pour continuer."),
    InvitationNotFoundError: (status.HTTP_404_NOT_FOUND, "Invitation invalide ou expirée"),
    SelfAcceptanceError: (
        status.HTTP_400_BAD_REQUEST,
        "Tu ne peux pas accepter ta propre invitation",
    ),
    AlreadyFriendsError: (status.HTTP_409_CONFLICT, "Vous êtes déjà amis"),
    FriendRequestExistsError: (
        status.HTTP_409_CONFLICT,
        "Une demande d'ami est déjà en attente",
    ),
    WindowClosedError: (
        status.HTTP_403_FORBIDDEN,
        "Aucune fenêtre n'est ouverte pour le moment",
    ),
    AlreadyPostedTodayError: (
        status.HTTP_409_CONFLICT,
        "Tu as déjà partagé ton moment aujourd'hui",
    ),
    NotAuthorizedError: (status.HTTP_403_FORBIDDEN, "Action non autorisée"),
    NotFoundError: (status.HTTP_404_NOT_FOUND, "Introuvable"),
    ValidationError: (status.HTTP_422_UNPROCESSABLE_ENTITY, "Données invalides"),
    TransientError: (status.HTTP_503_SERVICE_UNAVAILABLE, GENERIC_MESSAGE),
    ConflictError: (status.HTTP_409_CONFLICT, GENERIC_MESSAGE),
    BusinessRuleViolationError: (status.HTTP_400_BAD_REQUEST, "Action impossible"),
    StorageError: (status.HTTP_502_BAD_GATEWAY, "Le fichier n'a pas pu être enregistré"),
    DomainError: (status.HTTP_400_BAD_REQUEST, GENERIC_MESSAGE),
}


def error_response_for(error: Exception) -> tuple[int, str]:
    """Status and message for the most specific registered error class."""
    for cls in type(error).__mro__:
        if cls in ERROR_RESPONSES:
            return ERROR_RESPONSES[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_MESSAGE


async def handle_error(request: Request, exc: Exception) -> JSONResponse:
    status_code, message = error_response_for(exc)
    if status_code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
    else:
        logfire.info(
            "Request rejected",
            path=request.url.path,
            status_code=status_code,
            error_type=type(exc).__name__,
        )
    return JSONResponse(
        status_code=status_code,
        content={"detail": message, "error": type(exc).__name__},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register `handle_error` for domain and storage errors."""
    app.add_exception_handler(DomainError, handle_error)
    app.add_exception_handler(StorageError, handle_error)
