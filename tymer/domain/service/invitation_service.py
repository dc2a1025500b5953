"""Invitation domain service."""

import secrets
from datetime import datetime, timedelta
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from tymer.config import InvitationSettings
from tymer.domain.error import (
    AlreadyFriendsError,
    ConflictError,
    InvitationNotFoundError,
    NotFoundError,
    SelfAcceptanceError,
)
from tymer.domain.model.invitation import Invitation
from tymer.domain.model.profile import Profile
from tymer.domain.repository import InvitationRepository, ProfileRepository
from tymer.domain.value import InvitationId, InviteCode, UserId

from .base import Service
from .clock import Clock
from .friendship_service import FriendshipService


def _masked(code: str) -> str:
    return code[:3] + "..."


class InvitationService(Service):
    """Domain service turning invitation codes into friendships.

    An invitation moves from created to used exactly once; expiry is a
    plain time comparison and never a stored transition.
    """

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        profile_repository: ProfileRepository,
        friendship_service: FriendshipService,
        clock: Clock,
        settings: InvitationSettings,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            profile_repository: Profile repository
            friendship_service: Friendship domain service
            clock: Clock used for expiry checks
            settings: Invitation settings
        """
        self.invitation_repository = invitation_repository
        self.profile_repository = profile_repository
        self.friendship_service = friendship_service
        self.clock = clock
        self.settings = settings

    def generate_code(self) -> InviteCode:
        """Draw a code uniformly from the unambiguous alphabet."""
        alphabet = self.settings.alphabet
        return InviteCode(
            "".join(secrets.choice(alphabet) for _ in range(self.settings.code_length))
        )

    async def create_invitation(self, creator_id: UserId) -> Invitation:
        """Mint a new invitation.

        A code collision is retried with a fresh code.

        Raises:
            ConflictError: If every attempt collided
        """
        with logfire.span(
            "invitation_service.create_invitation", creator_id=str(creator_id)
        ):
            now = self.clock.now()
            for attempt in range(1, self.settings.max_code_attempts + 1):
                invitation = Invitation(
                    id=InvitationId(uuid4()),
                    creator_id=creator_id,
                    code=self.generate_code(),
                    is_used=False,
                    expires_at=now + timedelta(days=self.settings.validity_days),
                    created_at=now,
                )
                try:
                    saved = await self.invitation_repository.save(invitation)
                except IntegrityError:
                    logfire.warn("Invitation code collision", attempt=attempt)
                    continue

                logfire.info(
                    "Invitation created",
                    invitation_id=str(saved.id),
                    creator_id=str(creator_id),
                )
                return saved

            logfire.error(
                "Could not mint a unique invitation code",
                attempts=self.settings.max_code_attempts,
            )
            raise ConflictError("Could not generate a unique invitation code")

    async def get_or_create_invitation(self, creator_id: UserId) -> Invitation:
        """Return the creator's newest active invitation, minting one if needed.

        Args:
            creator_id: User sharing an invitation

        Returns:
            An active invitation
        """
        with logfire.span(
            "invitation_service.get_or_create_invitation", creator_id=str(creator_id)
        ):
            active = await self.invitation_repository.find_active_by_creator(
                creator_id, self.clock.now(), limit=1
            )
            if active:
                logfire.info(
                    "Reusing active invitation", invitation_id=str(active[0].id)
                )
                return active[0]
            return await self.create_invitation(creator_id)

    async def validate(self, code: str) -> Invitation | None:
        """Look up a redeemable invitation.

        Unknown, malformed, used and expired codes all give None.

        Args:
            code: Code as typed by the user

        Returns:
            The invitation if it can be redeemed now, None otherwise
        """
        with logfire.span("invitation_service.validate", code=_masked(code)):
            try:
                invite_code = InviteCode(code)
            except PydanticValidationError:
                logfire.info("Malformed invitation code", code=_masked(code))
                return None

            invitation = await self.invitation_repository.find_by_code(invite_code)
            if not invitation or not invitation.is_active(self.clock.now()):
                logfire.info("Invitation not redeemable", code=_masked(code))
                return None
            return invitation

    async def accept(self, code: str, acceptor_id: UserId) -> Profile:
        """Redeem an invitation and befriend its creator.

        Rule checks all run before anything is written. Marking the
        invitation used and creating the accepted friendship are one unit:
        when the friendship step fails the invitation is released again,
        so a retry never meets a used code without a friendship.

        Args:
            code: Invitation code
            acceptor_id: User redeeming the code

        Returns:
            The creator's profile

        Raises:
            InvitationNotFoundError: Unknown, used or expired code
            SelfAcceptanceError: The acceptor created the invitation
            AlreadyFriendsError: They are already friends
        """
        with logfire.span(
            "invitation_service.accept",
            code=_masked(code),
            acceptor_id=str(acceptor_id),
        ):
            invitation = await self.validate(code)
            if not invitation:
                raise InvitationNotFoundError()

            creator_id = invitation.creator_id
            if creator_id == acceptor_id:
                logfire.warn("Self acceptance attempt", acceptor_id=str(acceptor_id))
                raise SelfAcceptanceError()

            if await self.friendship_service.are_friends(creator_id, acceptor_id):
                logfire.warn(
                    "Invitation between existing friends",
                    creator_id=str(creator_id),
                    acceptor_id=str(acceptor_id),
                )
                raise AlreadyFriendsError(str(creator_id), str(acceptor_id))

            creator = await self.profile_repository.find_by_id(creator_id)
            if not creator:
                raise NotFoundError("Profile", str(creator_id))

            marked = await self.invitation_repository.mark_used(
                invitation.id, acceptor_id, self.clock.now()
            )
            if not marked:
                # Another redemption won the race
                logfire.warn("Invitation already used", invitation_id=str(invitation.id))
                raise InvitationNotFoundError()

            try:
                friendship = await self.friendship_service.link_accepted(
                    creator_id, acceptor_id
                )
            except Exception as e:
                await self._release(invitation, e)
                raise

            logfire.info(
                "Invitation accepted",
                invitation_id=str(invitation.id),
                friendship_id=str(friendship.id),
            )
            return creator

    async def _release(self, invitation: Invitation, cause: Exception) -> None:
        logfire.warn(
            "Friendship step failed, releasing invitation",
            invitation_id=str(invitation.id),
            error=str(cause),
        )
        try:
            await self.invitation_repository.release(invitation.id)
        except Exception as e:
            logfire.error(
                "Invitation release failed",
                invitation_id=str(invitation.id),
                error=str(e),
            )
