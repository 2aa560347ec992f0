"""Core data types produced by extraction.

These are the immutable values handed back to callers: the normalized
`StructuredCall`, the `ExtractionResult` pairing calls with the residual
narrative text, and the optional `ExtractionDiagnostics` counters.
"""

from __future__ import annotations

from collections.abc import Iterator
import dataclasses
import typing


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = ValueError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)


@dataclasses.dataclass(frozen=True, slots=True)
class StructuredCall:
    """A normalized tool invocation: the tool name and its parameters."""

    name: str
    input: dict[str, typing.Any] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        _require(
            condition=isinstance(self.name, str) and bool(self.name),
            message="must be a non-empty string",
            field_name="name",
        )
        _require(
            condition=isinstance(self.input, dict),
            message=f"must be a dict, got {type(self.input).__name__}",
            exc=TypeError,
            field_name="input",
        )

    def to_dict(self) -> dict[str, typing.Any]:
        return {"name": self.name, "input": dict(self.input)}


@dataclasses.dataclass
class ExtractionDiagnostics:
    """Counters describing what happened during one extraction.

    Purely informational. Collected only when diagnostics are enabled and
    never used to change the extraction outcome.
    """

    attempted_envelopes: list[str] = dataclasses.field(default_factory=list)
    matched: dict[str, int] = dataclasses.field(default_factory=dict)
    decode_failures: int = 0
    unnamed_records: int = 0
    overlapping_matches: int = 0

    def record_match(self, envelope_name: str) -> None:
        self.matched[envelope_name] = self.matched.get(envelope_name, 0) + 1

    def to_dict(self) -> dict[str, typing.Any]:
        return dataclasses.asdict(self)


@dataclasses.dataclass(frozen=True, slots=True)
class ExtractionResult:
    """Calls found in a piece of text plus the narrative left over.

    Unpacks as ``calls, residual_text = result`` for callers that only want
    the pair.
    """

    calls: tuple[StructuredCall, ...]
    residual_text: str
    diagnostics: ExtractionDiagnostics | None = None

    def __iter__(self) -> Iterator[typing.Any]:
        yield list(self.calls)
        yield self.residual_text

    @property
    def has_calls(self) -> bool:
        return bool(self.calls)
