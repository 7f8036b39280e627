"""Unit tests for settings loading."""

import pytest

from onboard.config import load_settings
from onboard.util.error import ConfigurationError

REQUIRED = {
    "DISCORD_TOKEN": "token",
    "GUILD_ID": "100",
    "INVITE_TARGET_CHANNEL_ID": "200",
    "INVITE_REQUEST_CHANNEL_ID": "300",
}


@pytest.fixture
def env(monkeypatch):
    """Environment holding only the required variables."""
    for name in (
        *REQUIRED,
        "BUSINESS_NAME",
        "STAFF_ROLE_IDS",
        "CSM_USER_IDS",
        "FOUNDER_USER_ID",
        "ZAPIER_SECRET",
        "PORT",
    ):
        monkeypatch.delenv(name, raising=False)
    for name, value in REQUIRED.items():
        monkeypatch.setenv(name, value)
    return monkeypatch


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self, env):
        """Optional values fall back to their defaults."""
        settings = load_settings(_env_file=None)

        assert settings.guild_id == 100
        assert settings.business_name == "Nomads"
        assert settings.channel_emoji == "🤝"
        assert settings.port == 3000
        assert settings.staff_role_ids == []
        assert settings.zapier_secret is None

    def test_comma_separated_ids(self, env):
        """Id lists are parsed from comma separated strings."""
        env.setenv("STAFF_ROLE_IDS", "1, 2,3")
        env.setenv("CSM_USER_IDS", "44")

        settings = load_settings(_env_file=None)

        assert settings.staff_role_ids == [1, 2, 3]
        assert settings.csm_user_ids == [44]

    def test_blank_optional_id_is_unset(self, env):
        """An empty optional variable counts as unset."""
        env.setenv("FOUNDER_USER_ID", "")

        settings = load_settings(_env_file=None)

        assert settings.founder_user_id is None

    def test_missing_required_variables_named(self, env):
        """Missing required variables abort with their names."""
        env.delenv("DISCORD_TOKEN")
        env.delenv("GUILD_ID")

        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(_env_file=None)

        message = str(exc_info.value)
        assert "DISCORD_TOKEN is required" in message
        assert "GUILD_ID is required" in message

    def test_invalid_value_named(self, env):
        """Unparseable values are reported."""
        env.setenv("PORT", "not-a-port")

        with pytest.raises(ConfigurationError, match="PORT"):
            load_settings(_env_file=None)
