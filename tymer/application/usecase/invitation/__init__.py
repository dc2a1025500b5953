"""Invitation use cases."""

from .accept_invitation import (
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
)
from .get_or_create_invitation import (
    GetOrCreateInvitationRequest,
    GetOrCreateInvitationResponse,
    GetOrCreateInvitationUseCase,
)
from .validate_invitation import (
    ValidateInvitationRequest,
    ValidateInvitationResponse,
    ValidateInvitationUseCase,
)

__all__ = [
    "AcceptInvitationRequest",
    "AcceptInvitationResponse",
    "AcceptInvitationUseCase",
    "GetOrCreateInvitationRequest",
    "GetOrCreateInvitationResponse",
    "GetOrCreateInvitationUseCase",
    "ValidateInvitationRequest",
    "ValidateInvitationResponse",
    "ValidateInvitationUseCase",
]
