"""Configuration system for HouseDigest.

Uses pydantic-settings to load configuration from environment variables
and .env files with defaults matching the local listing vault layout.
"""

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.
    Environment variables are prefixed with HOUSEDIGEST_ (e.g.,
    HOUSEDIGEST_VAULT_PATH). The bot token and the served config key also
    accept their conventional unprefixed names.
    """

    model_config = SettingsConfigDict(
        env_prefix="HOUSEDIGEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Input notes
    vault_path: Path = Field(
        default=Path("/work/obsidian-vault"),
        description="Base directory of the notes vault",
    )
    folder_name: str = Field(
        default="Real Estate Mission Control",
        description="Vault subfolder holding one directory per profile",
    )
    latest_filename: str = Field(
        default="latest.md",
        description="Name of the per-profile listing document",
    )

    # Telegram delivery
    telegram_bot_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "HOUSEDIGEST_TELEGRAM_BOT_TOKEN", "TELEGRAM_BOT_TOKEN", "telegram_bot_token"
        ),
        description="Bot credential for the Telegram Bot API",
    )
    telegram_chat_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "HOUSEDIGEST_TELEGRAM_CHAT_ID", "TELEGRAM_CHAT_ID", "telegram_chat_id"
        ),
        description="Destination chat identifier",
    )
    telegram_api_url: str = Field(
        default="https://api.telegram.org",
        description="Telegram Bot API base URL",
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="HTTP timeout in seconds for each delivery call",
    )

    # Report shape
    top_n: int = Field(
        default=10,
        ge=1,
        description="Number of newest properties listed per report",
    )
    max_chunk_size: int = Field(
        default=4000,
        ge=1,
        description="Maximum characters per outbound message",
    )
    send_delay: float = Field(
        default=0.5,
        ge=0,
        description="Pause in seconds between consecutive chunks",
    )

    # Daily schedule (fixed offset, DST is not tracked)
    report_hour: int = Field(default=7, ge=0, le=23)
    report_minute: int = Field(default=0, ge=0, le=59)
    utc_offset_hours: float = Field(
        default=-6,
        ge=-14,
        le=14,
        description="Reference timezone offset (CST by default)",
    )

    # Static file server
    server_host: str = Field(default="0.0.0.0")
    server_port: int = Field(default=8893, ge=1, le=65535)
    server_root: Path = Field(
        default=Path("."),
        description="Directory served by the static file server",
    )
    config_key: str = Field(
        default="",
        validation_alias=AliasChoices(
            "HOUSEDIGEST_CONFIG_KEY", "OPENAI_API_KEY", "config_key"
        ),
        description="Value exposed by /api/config-key",
    )

    @property
    def profiles_dir(self) -> Path:
        """Directory holding one subdirectory per profile."""
        return self.vault_path / self.folder_name

    def require_telegram(self) -> None:
        """Raise ValueError if delivery credentials are missing."""
        missing = [
            name
            for name in ("telegram_bot_token", "telegram_chat_id")
            if not getattr(self, name)
        ]
        if missing:
            raise ValueError(
                "Telegram delivery is not configured, missing: " + ", ".join(missing)
            )
