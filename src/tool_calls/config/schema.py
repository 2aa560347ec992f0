"""Configuration schema and validation using Pydantic.

Validates and coerces extractor settings from environment variables (prefix
``TOOL_CALLS_``), an optional ``.env`` file and programmatic overrides.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tool_calls.constants import ENV_PREFIX


class ExtractorSettings(BaseSettings):
    """Pydantic settings schema for the extractor."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=None,  # Only used when explicitly requested
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    allow_overlapping_matches: bool = Field(
        default=False,
        description=(
            "Report a call again when a lower-priority envelope matches text "
            "already claimed by an earlier match"
        ),
    )

    enable_diagnostics: bool = Field(
        default=False,
        description="Attach ExtractionDiagnostics counters to results",
    )
