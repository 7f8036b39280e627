"""Unit tests for IssueInviteUseCase."""

import pytest

from onboard.adapter.error import PlatformPermissionError
from onboard.application.usecase.invite import (
    IssueInviteRequest,
    IssueInviteStatus,
    IssueInviteUseCase,
)
from onboard.application.usecase.invite.issue_invite import (
    DENIED_MESSAGE,
    FAILED_MESSAGE,
)
from onboard.domain.repository import InviteRegistry, InviteUsageCache
from onboard.domain.service import ChatPlatform, InviteRegistryService
from tests.conftest import TARGET_CHANNEL_ID
from tests.harness import create_env_fixture

# Unit test fixtures
unit_env = create_env_fixture()
staff_env = create_env_fixture(staff_role_ids=[42])


class TestIssueInviteUseCase:
    """Tests for IssueInviteUseCase."""

    @pytest.mark.asyncio
    async def test_creates_single_use_invite(self, unit_env):
        """Should create a single-use, non-expiring invite on the target channel."""
        # Arrange
        use_case = await unit_env.get(IssueInviteUseCase)
        platform = await unit_env.get(ChatPlatform)

        # Act
        response = await use_case.execute(
            IssueInviteRequest(requester_id=1, firstname="Maria")
        )

        # Assert
        assert response.status == IssueInviteStatus.CREATED
        assert len(platform.created_invites) == 1
        created = platform.created_invites[0]
        assert created["channel_id"] == TARGET_CHANNEL_ID
        assert created["max_uses"] == 1
        assert created["max_age"] == 0
        assert response.invite_url in response.message
        assert "**Maria**" in response.message

    @pytest.mark.asyncio
    async def test_records_trimmed_firstname(self, unit_env):
        """The new code is mapped to the trimmed firstname."""
        # Arrange
        use_case = await unit_env.get(IssueInviteUseCase)
        registry_service = await unit_env.get(InviteRegistryService)

        # Act
        response = await use_case.execute(
            IssueInviteRequest(requester_id=1, firstname="  Maria  ")
        )

        # Assert
        assert response.firstname == "Maria"
        assert await registry_service.lookup(response.invite_code) == "Maria"

    @pytest.mark.asyncio
    async def test_tracks_new_invite_in_usage_cache(self, unit_env):
        """The issued code is cached with zero uses."""
        use_case = await unit_env.get(IssueInviteUseCase)
        cache = await unit_env.get(InviteUsageCache)

        response = await use_case.execute(
            IssueInviteRequest(requester_id=1, firstname="Maria")
        )

        assert await cache.get_uses(response.invite_code) == 0

    @pytest.mark.asyncio
    async def test_blank_firstname_is_invalid(self, unit_env):
        """A whitespace-only firstname creates nothing."""
        use_case = await unit_env.get(IssueInviteUseCase)
        platform = await unit_env.get(ChatPlatform)

        response = await use_case.execute(
            IssueInviteRequest(requester_id=1, firstname="   ")
        )

        assert response.status == IssueInviteStatus.INVALID
        assert platform.created_invites == []

    @pytest.mark.asyncio
    async def test_platform_error_replies_with_failure(self, unit_env):
        """A permission error becomes a generic failure reply."""
        # Arrange
        use_case = await unit_env.get(IssueInviteUseCase)
        platform = await unit_env.get(ChatPlatform)
        registry = await unit_env.get(InviteRegistry)
        platform.failures["create_invite"] = PlatformPermissionError("no perms")

        # Act
        response = await use_case.execute(
            IssueInviteRequest(requester_id=1, firstname="Maria")
        )

        # Assert
        assert response.status == IssueInviteStatus.FAILED
        assert response.message == FAILED_MESSAGE
        assert await registry.count() == 0


class TestIssueInviteAuthorization:
    """Staff role gating."""

    @pytest.mark.asyncio
    async def test_empty_staff_set_allows_anyone(self, unit_env):
        """Without staff roles configured, any requester may issue."""
        use_case = await unit_env.get(IssueInviteUseCase)

        response = await use_case.execute(
            IssueInviteRequest(requester_id=1, requester_role_ids=[], firstname="Maria")
        )

        assert response.status == IssueInviteStatus.CREATED

    @pytest.mark.asyncio
    async def test_non_staff_denied(self, staff_env):
        """Requesters without a staff role are denied and nothing is created."""
        # Arrange
        use_case = await staff_env.get(IssueInviteUseCase)
        platform = await staff_env.get(ChatPlatform)

        # Act
        response = await use_case.execute(
            IssueInviteRequest(requester_id=1, requester_role_ids=[7], firstname="Maria")
        )

        # Assert
        assert response.status == IssueInviteStatus.DENIED
        assert response.message == DENIED_MESSAGE
        assert platform.created_invites == []

    @pytest.mark.asyncio
    async def test_staff_allowed(self, staff_env):
        """Requesters holding a staff role may issue."""
        use_case = await staff_env.get(IssueInviteUseCase)

        response = await use_case.execute(
            IssueInviteRequest(
                requester_id=1, requester_role_ids=[7, 42], firstname="Maria"
            )
        )

        assert response.status == IssueInviteStatus.CREATED
