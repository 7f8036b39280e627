"""Unit tests for InviteRegistryService."""

import pytest

from onboard.domain.error import ValidationError
from onboard.domain.repository import InviteRegistry
from onboard.domain.service import InviteRegistryService
from onboard.domain.value import InviteCode
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestRecord:
    """Tests for record."""

    @pytest.mark.asyncio
    async def test_record_trims_firstname(self, unit_env):
        """Firstnames are stored trimmed."""
        # Arrange
        service = await unit_env.get(InviteRegistryService)

        # Act
        entry = await service.record(InviteCode("abc"), "  Maria ")

        # Assert
        assert entry.firstname.root == "Maria"
        assert await service.lookup(InviteCode("abc")) == "Maria"

    @pytest.mark.asyncio
    async def test_record_is_upsert(self, unit_env):
        """Recording the same code again overwrites the name."""
        service = await unit_env.get(InviteRegistryService)
        registry = await unit_env.get(InviteRegistry)

        await service.record(InviteCode("abc"), "Maria")
        await service.record(InviteCode("abc"), "Bob")

        assert await service.lookup(InviteCode("abc")) == "Bob"
        assert await registry.count() == 1

    @pytest.mark.asyncio
    async def test_blank_firstname_rejected(self, unit_env):
        """Whitespace-only names are rejected."""
        service = await unit_env.get(InviteRegistryService)

        with pytest.raises(ValidationError):
            await service.record(InviteCode("abc"), "   ")

    @pytest.mark.asyncio
    async def test_blank_code_rejected(self, unit_env):
        """Empty codes are rejected."""
        service = await unit_env.get(InviteRegistryService)

        with pytest.raises(ValidationError):
            await service.record(InviteCode(""), "Maria")


class TestLookup:
    """Tests for lookup."""

    @pytest.mark.asyncio
    async def test_unknown_code_returns_none(self, unit_env):
        """Codes never recorded have no firstname."""
        service = await unit_env.get(InviteRegistryService)

        assert await service.lookup(InviteCode("missing")) is None

    @pytest.mark.asyncio
    async def test_entries_survive_lookup(self, unit_env):
        """Lookups never evict entries; the registry only grows."""
        service = await unit_env.get(InviteRegistryService)
        registry = await unit_env.get(InviteRegistry)
        for i in range(5):
            await service.record(InviteCode(f"code{i}"), f"Client {i}")

        for i in range(5):
            await service.lookup(InviteCode(f"code{i}"))

        assert await registry.count() == 5
