"""Public entry point for configuration resolution."""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from tool_calls.exceptions import ConfigurationError

from .schema import ExtractorSettings
from .scope import get_ambient_config
from .types import FrozenConfig

log = logging.getLogger(__name__)


def resolve_config(
    programmatic: dict[str, Any] | None = None,
    *,
    use_env_file: str | Path | None = None,
) -> FrozenConfig:
    """Resolve configuration from all sources with proper precedence.

    Precedence: Programmatic > Ambient scope or Environment > .env file > Defaults.
    Inside a `config_scope`, the scoped config replaces environment resolution
    and programmatic overrides are applied on top of it.

    Args:
        programmatic: Field overrides. Unknown keys are ignored.
        use_env_file: Optional ``.env`` file read before defaults apply.

    Raises:
        ConfigurationError: If a value fails validation or the env file is missing.
    """
    overrides = dict(programmatic or {})

    ambient = get_ambient_config()
    if ambient is not None:
        return ambient.with_overrides(**overrides)

    env_file = None
    if use_env_file is not None:
        env_file = Path(use_env_file)
        if not env_file.is_file():
            raise ConfigurationError(f"Environment file not found: {env_file}")

    known = ExtractorSettings.model_fields.keys()
    try:
        settings = ExtractorSettings(
            _env_file=env_file,
            **{k: v for k, v in overrides.items() if k in known},
        )
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e

    config = FrozenConfig(**settings.model_dump())
    log.debug("Resolved extractor config: %s", config)
    return config
