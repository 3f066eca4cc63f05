"""Configuration and constants for field validation error reporting.

Includes configuration for:
- Field path composition (MessageSettings with FIELDVALIDATE_ prefix)
- Fixed message markers (MessageConstants)

Configuration can be overridden via:
1. Environment variables (e.g., FIELDVALIDATE_PATH_SEPARATOR=/)
2. .env file in the current directory
3. Default values in code
"""

from dataclasses import dataclass
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class MessageConstants:
    """Fixed markers used when phrasing validation failures.

    These are NOT configurable - they are part of the message contract
    that callers and report layers rely on.
    """

    # Constraint value of an empty/nil rule asserting the value must be present
    REQUIRED_MARKER: str = "false"

    # Subject used in place of a field name before the binder has run
    UNBOUND_SUBJECT: str = ""


# Module-level singleton for message constants
CONSTANTS = MessageConstants()


class MessageSettings(BaseSettings):
    """Configuration for error message and field path handling.

    Can be overridden via environment variables with FIELDVALIDATE_ prefix:
    - FIELDVALIDATE_PATH_SEPARATOR

    Attributes:
        path_separator: Separator placed between parent and child field names
    """

    model_config = SettingsConfigDict(
        env_prefix="FIELDVALIDATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    path_separator: str = Field(
        default=".", description="Separator between nested field names"
    )

    @field_validator("path_separator")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        if not v:
            msg = "Field path separator cannot be empty"
            raise ValueError(msg)
        return v


@lru_cache(maxsize=1)
def get_settings() -> MessageSettings:
    """Return the process-wide message settings, read once from the environment."""
    return MessageSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
