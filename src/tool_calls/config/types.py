"""Resolved configuration value handed to extractors."""

from dataclasses import dataclass, fields, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class FrozenConfig:
    """Immutable extractor configuration, resolved once at construction time."""

    allow_overlapping_matches: bool = False
    enable_diagnostics: bool = False

    def with_overrides(self, **overrides: Any) -> "FrozenConfig":
        """Return a copy with known fields replaced. Unknown fields are ignored."""
        known = {f.name for f in fields(self)}
        return replace(self, **{k: v for k, v in overrides.items() if k in known})
