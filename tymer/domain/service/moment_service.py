"""Moment domain service."""

from uuid import uuid4

import logfire

from tymer.config import MomentSettings
from tymer.domain.error import (
    AlreadyPostedTodayError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
    WindowClosedError,
)
from tymer.domain.model.moment import Moment, Reaction, TextReaction, VoiceReaction
from tymer.domain.repository import MomentRepository, ReactionRepository
from tymer.domain.value import MomentId, ReactionId, UserId

from .base import Service
from .clock import Clock
from .friendship_service import FriendshipService
from .media_service import MediaService
from .moment_gate import MomentGate
from .window_service import WindowService


class MomentService(Service):
    """Domain service for posting, listing and reacting to moments."""

    def __init__(
        self,
        moment_repository: MomentRepository,
        reaction_repository: ReactionRepository,
        window_service: WindowService,
        friendship_service: FriendshipService,
        media_service: MediaService,
        moment_gate: MomentGate,
        clock: Clock,
        settings: MomentSettings,
    ) -> None:
        """Initialize moment service.

        Args:
            moment_repository: Moment repository
            reaction_repository: Reaction repository
            window_service: Window configuration service
            friendship_service: Friendship service (visibility)
            media_service: Media service for images and audio
            moment_gate: Posting and visibility rules
            clock: Local clock
            settings: Moment limits
        """
        self.moment_repository = moment_repository
        self.reaction_repository = reaction_repository
        self.window_service = window_service
        self.friendship_service = friendship_service
        self.media_service = media_service
        self.moment_gate = moment_gate
        self.clock = clock
        self.settings = settings

    async def latest_moment(self, user_id: UserId) -> Moment | None:
        moments = await self.moment_repository.find_by_author(user_id, limit=1)
        return moments[0] if moments else None

    async def has_posted_today(self, user_id: UserId) -> bool:
        """Whether the user already posted a moment today."""
        return self.moment_gate.has_posted_today(await self.latest_moment(user_id))

    async def can_post(self, user_id: UserId) -> bool:
        """Whether the user may post right now."""
        windows = await self.window_service.list_windows()
        return self.moment_gate.can_post(windows, await self.has_posted_today(user_id))

    async def create_moment(
        self,
        author_id: UserId,
        image: bytes | None = None,
        description: str | None = None,
    ) -> Moment:
        """Post the user's moment for today.

        Args:
            author_id: Posting user
            image: JPEG bytes of the picture, optional
            description: Short caption, optional

        Returns:
            The created moment, with its author attached

        Raises:
            WindowClosedError: If no posting window is open
            AlreadyPostedTodayError: If the user already posted today
            ValidationError: If neither an image nor a description is given
        """
        with logfire.span("moment_service.create_moment", author_id=str(author_id)):
            windows = await self.window_service.list_windows()
            if not self.moment_gate.is_window_open(windows):
                logfire.info("Posting outside windows", author_id=str(author_id))
                raise WindowClosedError()
            if await self.has_posted_today(author_id):
                logfire.info("Already posted today", author_id=str(author_id))
                raise AlreadyPostedTodayError(str(author_id))

            description = description.strip() if description else None
            if not image and not description:
                raise ValidationError("A moment needs an image or a description")

            image_path = None
            if image:
                image_path = await self.media_service.upload_moment_image(
                    author_id, image
                )

            now = self.clock.now()
            moment = Moment(
                id=MomentId(uuid4()),
                author_id=author_id,
                image_path=image_path,
                description=description,
                captured_at=now,
                created_at=now,
            )
            try:
                await self.moment_repository.save(moment)
            except Exception:
                if image_path:
                    await self._discard_image(image_path)
                raise

            logfire.info(
                "Moment created", moment_id=str(moment.id), author_id=str(author_id)
            )
            saved = await self.moment_repository.find_by_id(moment.id)
            return saved or moment

    async def get_feed(self, viewer_id: UserId) -> list[Moment]:
        """Today's moments by the viewer's friends, newest first."""
        with logfire.span("moment_service.get_feed", viewer_id=str(viewer_id)):
            friend_ids = await self.friendship_service.friend_ids(viewer_id)
            if not friend_ids:
                return []

            moments = await self.moment_repository.find_captured_since(
                friend_ids, self.clock.start_of_today(), limit=self.settings.feed_limit
            )
            visible = [
                m
                for m in moments
                if self.moment_gate.can_view(m, viewer_id, friend_ids)
            ]
            logfire.info("Feed loaded", viewer_id=str(viewer_id), count=len(visible))
            return visible

    async def get_my_moments(
        self, user_id: UserId, limit: int | None = None
    ) -> list[Moment]:
        """The user's own recent moments, newest first."""
        with logfire.span("moment_service.get_my_moments", user_id=str(user_id)):
            return await self.moment_repository.find_by_author(
                user_id, limit=limit or self.settings.history_limit
            )

    async def delete_moment(self, moment_id: MomentId, user_id: UserId) -> None:
        """Delete one of the user's moments with its media.

        Blob deletion failures are logged; the rows are removed anyway.

        Raises:
            NotFoundError: If the moment does not exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "moment_service.delete_moment",
            moment_id=str(moment_id),
            user_id=str(user_id),
        ):
            moment = await self.moment_repository.find_by_id(moment_id)
            if not moment:
                raise NotFoundError("Moment", str(moment_id))
            if moment.author_id != user_id:
                logfire.warn(
                    "Delete attempt by non-author",
                    moment_id=str(moment_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("moment", str(moment_id), str(user_id))

            if moment.image_path:
                await self._discard_image(moment.image_path)
            voice_paths = [
                r.content.audio_path
                for r in moment.reactions
                if isinstance(r.content, VoiceReaction)
            ]
            if voice_paths:
                try:
                    await self.media_service.delete_voice_reactions(voice_paths)
                except Exception as e:
                    logfire.warn(
                        "Voice reaction cleanup failed",
                        moment_id=str(moment_id),
                        error=str(e),
                    )

            await self.moment_repository.delete(moment_id)
            logfire.info("Moment deleted", moment_id=str(moment_id))

    async def add_text_reaction(
        self, moment_id: MomentId, user_id: UserId, content: str
    ) -> Reaction:
        """React to a visible moment with text.

        Raises:
            NotFoundError: If the moment does not exist
            NotAuthorizedError: If the user cannot see the moment
            ValidationError: If the text is blank
        """
        with logfire.span(
            "moment_service.add_text_reaction",
            moment_id=str(moment_id),
            user_id=str(user_id),
        ):
            text = content.strip()
            if not text:
                raise ValidationError("Reaction cannot be empty")
            await self._visible_moment(moment_id, user_id)
            return await self._save_reaction(
                moment_id, user_id, TextReaction(content=text)
            )

    async def add_voice_reaction(
        self,
        moment_id: MomentId,
        user_id: UserId,
        audio: bytes,
        duration: float,
        waveform: list[float] | None = None,
    ) -> Reaction:
        """React to a visible moment with a short recording.

        Raises:
            NotFoundError: If the moment does not exist
            NotAuthorizedError: If the user cannot see the moment
            ValidationError: If the recording is empty or too long
        """
        with logfire.span(
            "moment_service.add_voice_reaction",
            moment_id=str(moment_id),
            user_id=str(user_id),
            duration=duration,
        ):
            if not audio:
                raise ValidationError("Voice reaction is empty")
            if duration <= 0 or duration > self.settings.max_voice_seconds:
                raise ValidationError(
                    f"Voice reaction must last at most {self.settings.max_voice_seconds}s"
                )
            await self._visible_moment(moment_id, user_id)

            audio_path = await self.media_service.upload_voice_reaction(user_id, audio)
            content = VoiceReaction(
                duration=duration, audio_path=audio_path, waveform=waveform
            )
            try:
                return await self._save_reaction(moment_id, user_id, content)
            except Exception:
                await self._discard_voice(audio_path)
                raise

    async def _visible_moment(self, moment_id: MomentId, user_id: UserId) -> Moment:
        moment = await self.moment_repository.find_by_id(moment_id)
        if not moment:
            raise NotFoundError("Moment", str(moment_id))
        friend_ids = await self.friendship_service.friend_ids(user_id)
        if not self.moment_gate.can_view(moment, user_id, friend_ids):
            logfire.warn(
                "Reaction on a moment the user cannot see",
                moment_id=str(moment_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("moment", str(moment_id), str(user_id))
        return moment

    async def _save_reaction(
        self,
        moment_id: MomentId,
        user_id: UserId,
        content: TextReaction | VoiceReaction,
    ) -> Reaction:
        reaction = Reaction(
            id=ReactionId(uuid4()),
            moment_id=moment_id,
            author_id=user_id,
            content=content,
            created_at=self.clock.now(),
        )
        saved = await self.reaction_repository.save(reaction)
        logfire.info(
            "Reaction added",
            reaction_id=str(saved.id),
            moment_id=str(moment_id),
            kind=content.kind,
        )
        return saved

    async def _discard_image(self, path: str) -> None:
        try:
            await self.media_service.delete_moment_image(path)
        except Exception as e:
            logfire.warn("Moment image cleanup failed", path=path, error=str(e))

    async def _discard_voice(self, path: str) -> None:
        try:
            await self.media_service.delete_voice_reactions([path])
        except Exception as e:
            logfire.warn("Voice reaction cleanup failed", path=path, error=str(e))
