"""Add reaction use cases."""

import logfire
from pydantic import BaseModel, Field

from tymer.application.usecase.base import parse_id, require_user
from tymer.application.usecase.common import ReactionItem
from tymer.domain.service import MediaService, MomentService
from tymer.domain.value import MomentId


class AddTextReactionRequest(BaseModel):
    """Add text reaction request."""

    moment_id: str
    user_id: str | None  # From the session
    content: str = Field(max_length=500)


class AddVoiceReactionRequest(BaseModel):
    """Add voice reaction request."""

    moment_id: str
    user_id: str | None  # From the session
    audio: bytes
    duration: float
    waveform: list[float] | None = None


class AddReactionResponse(BaseModel):
    """Add reaction response."""

    reaction: ReactionItem


class AddTextReactionUseCase:
    """Use case for reacting to a friend's moment with text."""

    def __init__(self, moment_service: MomentService, media_service: MediaService) -> None:
        """Initialize add text reaction use case.

        Args:
            moment_service: Moment domain service
            media_service: Media service (public URLs)
        """
        self.moment_service = moment_service
        self.media_service = media_service

    async def execute(self, request: AddTextReactionRequest) -> AddReactionResponse:
        """React with text.

        Raises:
            NotAuthenticatedError: If there is no session user
            NotAuthorizedError: The moment is not visible to the user
        """
        user_id = require_user(request.user_id)
        moment_id = MomentId(parse_id(request.moment_id, "moment"))

        with logfire.span("add_text_reaction.execute", moment_id=str(moment_id)):
            reaction = await self.moment_service.add_text_reaction(
                moment_id, user_id, request.content
            )
            return AddReactionResponse(
                reaction=ReactionItem.from_reaction(reaction, self.media_service)
            )


class AddVoiceReactionUseCase:
    """Use case for reacting to a friend's moment with a short recording."""

    def __init__(self, moment_service: MomentService, media_service: MediaService) -> None:
        """Initialize add voice reaction use case.

        Args:
            moment_service: Moment domain service
            media_service: Media service (uploads and public URLs)
        """
        self.moment_service = moment_service
        self.media_service = media_service

    async def execute(self, request: AddVoiceReactionRequest) -> AddReactionResponse:
        """React with a recording.

        Raises:
            NotAuthenticatedError: If there is no session user
            NotAuthorizedError: The moment is not visible to the user
            ValidationError: The recording is empty or too long
        """
        user_id = require_user(request.user_id)
        moment_id = MomentId(parse_id(request.moment_id, "moment"))

        with logfire.span("add_voice_reaction.execute", moment_id=str(moment_id)):
            reaction = await self.moment_service.add_voice_reaction(
                moment_id,
                user_id,
                request.audio,
                request.duration,
                waveform=request.waveform,
            )
            return AddReactionResponse(
                reaction=ReactionItem.from_reaction(reaction, self.media_service)
            )
