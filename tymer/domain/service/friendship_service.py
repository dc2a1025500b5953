"""Friendship domain service."""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from tymer.domain.error import (
    AlreadyFriendsError,
    FriendRequestExistsError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from tymer.domain.model.friendship import Friendship
from tymer.domain.model.profile import Profile
from tymer.domain.repository import FriendshipRepository, ProfileRepository
from tymer.domain.value import FriendshipId, FriendshipStatus, UserId

from .base import Service
from .clock import Clock


class FriendshipService(Service):
    """Domain service for the undirected friendship relation.

    Rows are directed pairs, so every existence check looks at both
    orderings. The store's uniqueness constraint on the ordered pair is
    the final arbiter when two clients race.
    """

    def __init__(
        self,
        friendship_repository: FriendshipRepository,
        profile_repository: ProfileRepository,
        clock: Clock,
    ) -> None:
        """Initialize friendship service.

        Args:
            friendship_repository: Friendship repository
            profile_repository: Profile repository
            clock: Clock stamping new rows
        """
        self.friendship_repository = friendship_repository
        self.profile_repository = profile_repository
        self.clock = clock

    async def find_between(self, user_a: UserId, user_b: UserId) -> Friendship | None:
        """Return the row linking two users, accepted rows first."""
        rows = await self.friendship_repository.find_between(user_a, user_b)
        if not rows:
            return None
        rows.sort(key=lambda f: not f.is_accepted)
        return rows[0]

    async def are_friends(self, user_a: UserId, user_b: UserId) -> bool:
        """Whether an accepted relation exists in either direction."""
        rows = await self.friendship_repository.find_between(user_a, user_b)
        return any(f.is_accepted for f in rows)

    async def friend_ids(self, user_id: UserId) -> set[UserId]:
        """IDs of every accepted friend of a user."""
        rows = await self.friendship_repository.find_for_user(
            user_id, FriendshipStatus.ACCEPTED
        )
        return {f.other(user_id) for f in rows}

    async def list_friends(self, user_id: UserId) -> list[Profile]:
        """Profiles of every accepted friend of a user.

        Args:
            user_id: User ID

        Returns:
            Friend profiles, most recent friendship first
        """
        with logfire.span("friendship_service.list_friends", user_id=str(user_id)):
            rows = await self.friendship_repository.find_for_user(
                user_id, FriendshipStatus.ACCEPTED
            )
            order = [f.other(user_id) for f in rows]
            profiles = {
                p.id: p for p in await self.profile_repository.find_by_ids(order)
            }
            friends = [profiles[uid] for uid in order if uid in profiles]
            logfire.info(
                "Friends listed", user_id=str(user_id), count=len(friends)
            )
            return friends

    async def list_pending_requests(self, user_id: UserId) -> list[Friendship]:
        """Pending requests addressed to the user."""
        rows = await self.friendship_repository.find_for_user(
            user_id, FriendshipStatus.PENDING
        )
        return [f for f in rows if f.friend_id == user_id]

    async def send_request(self, user_id: UserId, friend_id: UserId) -> Friendship:
        """Create a pending friend request.

        Args:
            user_id: Requesting user
            friend_id: Addressee

        Returns:
            The pending friendship

        Raises:
            ValidationError: If the user targets themselves
            NotFoundError: If the addressee has no profile
            AlreadyFriendsError: If they are already friends
            FriendRequestExistsError: If a pending request already links them
        """
        with logfire.span(
            "friendship_service.send_request",
            user_id=str(user_id),
            friend_id=str(friend_id),
        ):
            if user_id == friend_id:
                raise ValidationError("Cannot send a friend request to yourself")

            if not await self.profile_repository.find_by_id(friend_id):
                raise NotFoundError("Profile", str(friend_id))

            existing = await self.find_between(user_id, friend_id)
            if existing and existing.is_accepted:
                raise AlreadyFriendsError(str(user_id), str(friend_id))
            if existing:
                logfire.warn(
                    "Friend request already pending",
                    friendship_id=str(existing.id),
                )
                raise FriendRequestExistsError(str(user_id), str(friend_id))

            friendship = Friendship(
                id=FriendshipId(uuid4()),
                user_id=user_id,
                friend_id=friend_id,
                status=FriendshipStatus.PENDING,
                created_at=self.clock.now(),
            )
            try:
                saved = await self.friendship_repository.save(friendship)
            except IntegrityError:
                logfire.warn(
                    "Duplicate friendship pair",
                    user_id=str(user_id),
                    friend_id=str(friend_id),
                )
                raise FriendRequestExistsError(str(user_id), str(friend_id))

            logfire.info("Friend request sent", friendship_id=str(saved.id))
            return saved

    async def accept_request(
        self, friendship_id: FriendshipId, user_id: UserId
    ) -> Friendship:
        """Accept a pending request addressed to the user.

        Accepting an already accepted row returns it unchanged.

        Raises:
            NotFoundError: If the request does not exist
            NotAuthorizedError: If the user is not the addressee
        """
        with logfire.span(
            "friendship_service.accept_request",
            friendship_id=str(friendship_id),
            user_id=str(user_id),
        ):
            friendship = await self.friendship_repository.find_by_id(friendship_id)
            if not friendship:
                raise NotFoundError("Friendship", str(friendship_id))
            if friendship.friend_id != user_id:
                raise NotAuthorizedError("friendship", str(friendship_id), str(user_id))
            if friendship.is_accepted:
                return friendship

            updated = await self.friendship_repository.update_status(
                friendship_id, FriendshipStatus.ACCEPTED
            )
            if not updated:
                raise NotFoundError("Friendship", str(friendship_id))
            logfire.info("Friend request accepted", friendship_id=str(friendship_id))
            return updated

    async def remove(self, friendship_id: FriendshipId, user_id: UserId) -> None:
        """Delete a friendship or request, from either side.

        Raises:
            NotFoundError: If the row does not exist
            NotAuthorizedError: If the user is not part of it
        """
        with logfire.span(
            "friendship_service.remove",
            friendship_id=str(friendship_id),
            user_id=str(user_id),
        ):
            friendship = await self.friendship_repository.find_by_id(friendship_id)
            if not friendship:
                raise NotFoundError("Friendship", str(friendship_id))
            if not friendship.involves(user_id):
                raise NotAuthorizedError("friendship", str(friendship_id), str(user_id))

            await self.friendship_repository.delete(friendship_id)
            logfire.info("Friendship removed", friendship_id=str(friendship_id))

    async def link_accepted(self, creator_id: UserId, acceptor_id: UserId) -> Friendship:
        """Create `(creator, acceptor)` and accept it, for invitation redemption.

        A pending row between the two, in either direction, is accepted
        instead of inserting a second row. A row inserted here is deleted
        again if accepting it fails.

        Raises:
            AlreadyFriendsError: If the store rejects the pair as a duplicate
        """
        existing = await self.find_between(creator_id, acceptor_id)
        if existing and existing.is_accepted:
            raise AlreadyFriendsError(str(creator_id), str(acceptor_id))

        created = False
        if existing:
            friendship = existing
        else:
            friendship = Friendship(
                id=FriendshipId(uuid4()),
                user_id=creator_id,
                friend_id=acceptor_id,
                status=FriendshipStatus.PENDING,
                created_at=self.clock.now(),
            )
            try:
                friendship = await self.friendship_repository.save(friendship)
            except IntegrityError:
                raise AlreadyFriendsError(str(creator_id), str(acceptor_id))
            created = True

        try:
            accepted = await self.friendship_repository.update_status(
                friendship.id, FriendshipStatus.ACCEPTED
            )
        except Exception:
            if created:
                await self.friendship_repository.delete(friendship.id)
            raise
        if not accepted:
            raise NotFoundError("Friendship", str(friendship.id))
        return accepted
