"""Moment use cases."""

from .add_reaction import (
    AddReactionResponse,
    AddTextReactionRequest,
    AddTextReactionUseCase,
    AddVoiceReactionRequest,
    AddVoiceReactionUseCase,
)
from .create_moment import CreateMomentRequest, CreateMomentResponse, CreateMomentUseCase
from .delete_moment import DeleteMomentRequest, DeleteMomentResponse, DeleteMomentUseCase
from .get_feed import GetFeedRequest, GetFeedResponse, GetFeedUseCase
from .get_my_moments import GetMyMomentsRequest, GetMyMomentsResponse, GetMyMomentsUseCase

__all__ = [
    "AddReactionResponse",
    "AddTextReactionRequest",
    "AddTextReactionUseCase",
    "AddVoiceReactionRequest",
    "AddVoiceReactionUseCase",
    "CreateMomentRequest",
    "CreateMomentResponse",
    "CreateMomentUseCase",
    "DeleteMomentRequest",
    "DeleteMomentResponse",
    "DeleteMomentUseCase",
    "GetFeedRequest",
    "GetFeedResponse",
    "GetFeedUseCase",
    "GetMyMomentsRequest",
    "GetMyMomentsResponse",
    "GetMyMomentsUseCase",
]
