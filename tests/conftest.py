"""Test configuration and fixtures."""

from datetime import datetime, timezone

import logfire

from onboard.config import Settings
from onboard.domain.model.member import JoinedMember
from onboard.domain.value import GuildId, UserId

GUILD_ID = 100
TARGET_CHANNEL_ID = 200
REQUEST_CHANNEL_ID = 300

# Keep spans local; instrumentation in create_app expects a configured Logfire
logfire.configure(send_to_logfire=False, console=False)


def make_settings(**overrides) -> Settings:
    """Settings for tests, independent of the real environment and .env."""
    values = {
        "environment": "test",
        "discord_token": "test-token",
        "guild_id": GUILD_ID,
        "invite_target_channel_id": TARGET_CHANNEL_ID,
        "invite_request_channel_id": REQUEST_CHANNEL_ID,
        "business_name": "Nomads",
        "staff_role_ids": [],
        "csm_user_ids": [],
        "founder_user_id": None,
        "operations_user_id": None,
        "start_here_channel_id": None,
        "zapier_webhook_url": None,
        "zapier_secret": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_member(
    member_id: int = 555,
    guild_id: int = GUILD_ID,
    display_name: str | None = "maria_g",
    username: str | None = "maria_g",
    tag: str | None = "maria_g",
) -> JoinedMember:
    """Helper to build a joined member."""
    return JoinedMember(
        id=UserId(member_id),
        guild_id=GuildId(guild_id),
        display_name=display_name,
        username=username,
        tag=tag,
        joined_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    )
