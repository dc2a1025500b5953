"""Integration tests for FriendshipRepository."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from tymer.domain.model import Friendship
from tymer.domain.repository import FriendshipRepository, ProfileRepository
from tymer.domain.value import FriendshipId, FriendshipStatus
from tests.conftest import make_profile
from tests.di import TEST_NOW
from tests.harness import create_env_fixture

# Integration test fixture - real PostgreSQL, mocked external services
integration_env = create_env_fixture(unmock={"persistence"})


def make_friendship(user_id, friend_id, status=FriendshipStatus.PENDING) -> Friendship:
    return Friendship(
        id=FriendshipId(uuid4()),
        user_id=user_id,
        friend_id=friend_id,
        status=status,
        created_at=TEST_NOW,
    )


class TestFriendshipRepositoryIntegration:
    """Integration tests for PostgresFriendshipRepository."""

    @pytest.mark.asyncio
    async def test_find_between_checks_both_orderings(self, integration_env):
        repo = await integration_env.get(FriendshipRepository)
        profiles = await integration_env.get(ProfileRepository)
        alice = await make_profile(profiles, display_name="Alice")
        bob = await make_profile(profiles, display_name="Bob")
        chloe = await make_profile(profiles, display_name="Chloé")
        saved = await repo.save(make_friendship(alice.id, bob.id))

        forward = await repo.find_between(alice.id, bob.id)
        backward = await repo.find_between(bob.id, alice.id)
        unrelated = await repo.find_between(alice.id, chloe.id)

        assert [f.id for f in forward] == [saved.id]
        assert [f.id for f in backward] == [saved.id]
        assert unrelated == []

    @pytest.mark.asyncio
    async def test_duplicate_pair_keeps_transaction_usable(self, integration_env):
        """Regression test: a pair conflict must leave the session usable.

        Invitation acceptance compensates after a pair conflict, so later
        statements in the same transaction have to run.
        """
        repo = await integration_env.get(FriendshipRepository)
        profiles = await integration_env.get(ProfileRepository)
        alice = await make_profile(profiles, display_name="Alice")
        bob = await make_profile(profiles, display_name="Bob")
        first = await repo.save(make_friendship(alice.id, bob.id))

        with pytest.raises(IntegrityError):
            await repo.save(make_friendship(alice.id, bob.id))

        updated = await repo.update_status(first.id, FriendshipStatus.ACCEPTED)

        assert updated is not None
        assert updated.is_accepted

    @pytest.mark.asyncio
    async def test_find_for_user_filters_status(self, integration_env):
        repo = await integration_env.get(FriendshipRepository)
        profiles = await integration_env.get(ProfileRepository)
        alice = await make_profile(profiles, display_name="Alice")
        bob = await make_profile(profiles, display_name="Bob")
        chloe = await make_profile(profiles, display_name="Chloé")
        accepted = await repo.save(
            make_friendship(alice.id, bob.id, FriendshipStatus.ACCEPTED)
        )
        pending = await repo.save(make_friendship(chloe.id, alice.id))

        friends = await repo.find_for_user(alice.id, FriendshipStatus.ACCEPTED)
        requests = await repo.find_for_user(alice.id, FriendshipStatus.PENDING)

        assert [f.id for f in friends] == [accepted.id]
        assert [f.id for f in requests] == [pending.id]

    @pytest.mark.asyncio
    async def test_delete_removes_row(self, integration_env):
        repo = await integration_env.get(FriendshipRepository)
        profiles = await integration_env.get(ProfileRepository)
        alice = await make_profile(profiles, display_name="Alice")
        bob = await make_profile(profiles, display_name="Bob")
        friendship = await repo.save(make_friendship(alice.id, bob.id))

        assert await repo.delete(friendship.id) is True
        assert await repo.delete(friendship.id) is False
        assert await repo.find_between(alice.id, bob.id) == []
