"""Configuration scoping for entry-time overrides."""

from collections.abc import Generator
from contextlib import contextmanager
import contextvars

from .types import FrozenConfig

_ambient_config: contextvars.ContextVar[FrozenConfig] = contextvars.ContextVar(
    "tool_calls_config"
)


def get_ambient_config() -> FrozenConfig | None:
    """Return the config set by an enclosing `config_scope`, if any."""
    try:
        return _ambient_config.get()
    except LookupError:
        return None


@contextmanager
def config_scope(config: FrozenConfig) -> Generator[None]:
    """Temporarily use a different configuration.

    Only affects `resolve_config()` calls made inside the block; an extractor
    already constructed keeps the config it resolved.

    Example:
        with config_scope(FrozenConfig(enable_diagnostics=True)):
            result = ToolCallExtractor().extract(text)
    """
    token = _ambient_config.set(config)
    try:
        yield
    finally:
        _ambient_config.reset(token)
