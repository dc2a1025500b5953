"""Integration tests for InvitationRepository.

These tests run the repository SQL against Postgres: unique codes, the
conditional mark-used update and the active-invitation filter.
"""

from datetime import timedelta
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from tymer.domain.model import Invitation
from tymer.domain.repository import InvitationRepository, ProfileRepository
from tymer.domain.service import InvitationService
from tymer.domain.value import InvitationId, InviteCode, UserId
from tests.conftest import make_profile
from tests.di import TEST_NOW
from tests.harness import create_env_fixture

# Integration test fixture - real PostgreSQL, mocked external services
integration_env = create_env_fixture(unmock={"persistence"})


def make_invitation(creator_id: UserId, code: str, **kwargs) -> Invitation:
    kwargs.setdefault("expires_at", TEST_NOW + timedelta(days=7))
    return Invitation(
        id=InvitationId(uuid4()),
        creator_id=creator_id,
        code=InviteCode(code),
        created_at=kwargs.pop("created_at", TEST_NOW),
        **kwargs,
    )


class TestInvitationRepositoryIntegration:
    """Integration tests for PostgresInvitationRepository."""

    @pytest.mark.asyncio
    async def test_duplicate_code_keeps_transaction_usable(self, integration_env):
        """Regression test: a code collision must not abort the request transaction.

        Postgres aborts the whole transaction on a constraint failure, so
        the insert runs in a savepoint and the next insert still succeeds.
        """
        repo = await integration_env.get(InvitationRepository)
        profiles = await integration_env.get(ProfileRepository)
        creator = await make_profile(profiles)

        await repo.save(make_invitation(creator.id, "AB3XQ9KZ"))

        with pytest.raises(IntegrityError):
            await repo.save(make_invitation(creator.id, "AB3XQ9KZ"))

        retried = await repo.save(make_invitation(creator.id, "ZZZZ2222"))
        found = await repo.find_by_code(InviteCode("ZZZZ2222"))

        assert found is not None
        assert found.id == retried.id

    @pytest.mark.asyncio
    async def test_service_retries_code_collision(self, integration_env):
        service = await integration_env.get(InvitationService)
        profiles = await integration_env.get(ProfileRepository)
        alice = await make_profile(profiles, display_name="Alice")
        bob = await make_profile(profiles, display_name="Bob")
        taken = await service.create_invitation(alice.id)

        draws = iter([taken.code, InviteCode("ZZZZ2222")])
        service.generate_code = lambda: next(draws)

        invitation = await service.create_invitation(bob.id)

        assert invitation.code == InviteCode("ZZZZ2222")
        assert invitation.creator_id == bob.id

    @pytest.mark.asyncio
    async def test_mark_used_flips_once(self, integration_env):
        repo = await integration_env.get(InvitationRepository)
        profiles = await integration_env.get(ProfileRepository)
        creator = await make_profile(profiles, display_name="Alice")
        first = await make_profile(profiles, display_name="Bob")
        second = await make_profile(profiles, display_name="Chloé")
        invitation = await repo.save(make_invitation(creator.id, "AB3XQ9KZ"))

        won = await repo.mark_used(invitation.id, first.id, TEST_NOW)
        lost = await repo.mark_used(invitation.id, second.id, TEST_NOW)
        stored = await repo.find_by_id(invitation.id)

        assert won is True
        assert lost is False
        assert stored.is_used is True
        assert stored.used_by == first.id

    @pytest.mark.asyncio
    async def test_release_makes_invitation_usable_again(self, integration_env):
        repo = await integration_env.get(InvitationRepository)
        profiles = await integration_env.get(ProfileRepository)
        creator = await make_profile(profiles, display_name="Alice")
        acceptor = await make_profile(profiles, display_name="Bob")
        invitation = await repo.save(make_invitation(creator.id, "AB3XQ9KZ"))
        await repo.mark_used(invitation.id, acceptor.id, TEST_NOW)

        await repo.release(invitation.id)
        stored = await repo.find_by_id(invitation.id)

        assert stored.is_used is False
        assert stored.used_by is None
        assert await repo.mark_used(invitation.id, acceptor.id, TEST_NOW) is True

    @pytest.mark.asyncio
    async def test_find_active_by_creator_filters_expiry(self, integration_env):
        repo = await integration_env.get(InvitationRepository)
        profiles = await integration_env.get(ProfileRepository)
        creator = await make_profile(profiles)
        never = await repo.save(
            make_invitation(
                creator.id,
                "AAAA2222",
                expires_at=None,
                created_at=TEST_NOW - timedelta(days=2),
            )
        )
        future = await repo.save(
            make_invitation(
                creator.id,
                "BBBB3333",
                expires_at=TEST_NOW + timedelta(days=1),
                created_at=TEST_NOW - timedelta(days=1),
            )
        )
        await repo.save(
            make_invitation(
                creator.id,
                "CCCC4444",
                expires_at=TEST_NOW - timedelta(minutes=1),
                created_at=TEST_NOW,
            )
        )

        active = await repo.find_active_by_creator(creator.id, TEST_NOW, limit=10)

        # Newest first; the expired one is ignored
        assert [i.id for i in active] == [future.id, never.id]

    @pytest.mark.asyncio
    async def test_used_invitation_is_not_active(self, integration_env):
        repo = await integration_env.get(InvitationRepository)
        profiles = await integration_env.get(ProfileRepository)
        creator = await make_profile(profiles, display_name="Alice")
        acceptor = await make_profile(profiles, display_name="Bob")
        invitation = await repo.save(
            make_invitation(creator.id, "AB3XQ9KZ", expires_at=None)
        )
        await repo.mark_used(invitation.id, acceptor.id, TEST_NOW)

        assert await repo.find_active_by_creator(creator.id, TEST_NOW) == []
