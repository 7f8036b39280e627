"""Application configuration."""

from typing import Annotated, Literal

from pydantic import BaseModel, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from onboard.util.error import ConfigurationError


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Bot and HTTP facade settings.

    Every field maps to an upper-case environment variable of the same name
    (``guild_id`` -> ``GUILD_ID``). Values can also come from a ``.env`` file.

    Required:
        DISCORD_TOKEN, GUILD_ID, INVITE_TARGET_CHANNEL_ID,
        INVITE_REQUEST_CHANNEL_ID

    Comma separated lists:
        STAFF_ROLE_IDS=111,222
        CSM_USER_IDS=333
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows OBSERVABILITY__LOGFIRE_TOKEN syntax
        extra="ignore",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Discord credentials and target guild
    discord_token: str
    guild_id: int

    # Branding
    business_name: str = "Nomads"
    channel_emoji: str = "🤝"

    # Channels
    invite_target_channel_id: int  # Invites land here
    invite_request_channel_id: int  # Staff "generate invite" button lives here
    start_here_channel_id: int | None = None

    # People and roles mentioned in / granted access to client workspaces
    staff_role_ids: Annotated[list[int], NoDecode] = []
    founder_user_id: int | None = None
    csm_user_ids: Annotated[list[int], NoDecode] = []
    operations_user_id: int | None = None

    # External automation
    zapier_webhook_url: str | None = None
    zapier_secret: str | None = None

    # HTTP facade
    host: str = "0.0.0.0"
    port: int = 3000

    observability: ObservabilitySettings = ObservabilitySettings()

    @field_validator("staff_role_ids", "csm_user_ids", mode="before")
    @classmethod
    def split_comma_separated(cls, v: object) -> object:
        """Accept ``"1,2, 3"`` as well as real lists."""
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        if isinstance(v, int):
            return [v]
        return v

    @field_validator(
        "start_here_channel_id",
        "founder_user_id",
        "operations_user_id",
        "zapier_webhook_url",
        "zapier_secret",
        mode="before",
    )
    @classmethod
    def blank_is_unset(cls, v: object) -> object:
        """Treat ``FOUNDER_USER_ID=`` the same as an unset variable."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


def load_settings(**overrides) -> Settings:
    """Load settings from the environment.

    Args:
        **overrides: Explicit field values (take precedence over environment)

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If a required variable is missing or a value is invalid
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        problems = []
        for error in e.errors():
            name = "__".join(str(part) for part in error["loc"]).upper()
            if error["type"] == "missing":
                problems.append(f"{name} is required")
            else:
                problems.append(f"{name}: {error['msg']}")
        raise ConfigurationError(
            "Invalid configuration: " + "; ".join(problems)
        ) from e
