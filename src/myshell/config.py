"""Configuration for myshell, read from MYSHELL_* environment variables."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ShellSettings(BaseSettings):
    """Shell settings."""

    model_config = SettingsConfigDict(env_prefix="MYSHELL_", case_sensitive=False)

    # Interactive loop
    prompt: str = Field(default="$ ", description="Prompt printed before each read")
    history_file: Path = Field(
        default=Path("~/.myshell_history").expanduser(),
        description="Readline history file",
    )
    history_length: int = Field(default=1000, description="Maximum number of history entries kept")

    # Dispatch
    case_insensitive_builtins: bool = Field(
        default=False, description="Match built-in names regardless of case"
    )
    report_failed_commands: bool = Field(
        default=False,
        description="Print '<line>: command not found' when a child exits non-zero",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Log level for diagnostics on stderr")


def get_settings() -> ShellSettings:
    """Build settings from the current environment."""
    return ShellSettings()
