"""Configuration for tool call extraction.

Settings are resolved once into an immutable `FrozenConfig` and then handed
to extractors; nothing reads the environment during extraction.
"""

from .api import resolve_config
from .schema import ExtractorSettings
from .scope import config_scope, get_ambient_config
from .types import FrozenConfig

__all__ = [
    "ExtractorSettings",
    "FrozenConfig",
    "config_scope",
    "get_ambient_config",
    "resolve_config",
]
