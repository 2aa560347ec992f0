"""Envelope patterns: the textual shapes a model may wrap a call in.

Each `EnvelopePattern` is an independent recognizer. The extractor runs them
in priority order against the same original text and funnels every match
through one shared normalization step, so supporting a new shape means adding
one entry to `default_envelopes()`.
"""

from __future__ import annotations

from collections.abc import Iterator
import dataclasses
import re

from tool_calls.constants import FENCE, FENCE_LABEL, TAG_CLOSE, TAG_OPEN, TOOL_KEY

_TOOL = re.escape(f'"{TOOL_KEY}"')
_FENCE = re.escape(FENCE)


@dataclasses.dataclass(frozen=True, slots=True)
class EnvelopeMatch:
    """One located envelope: the full matched span and its inner record text."""

    envelope: str
    span: tuple[int, int]
    text: str
    body: str

    def overlaps(self, other: tuple[int, int]) -> bool:
        start, end = other
        return self.span[0] < end and start < self.span[1]


@dataclasses.dataclass(frozen=True, slots=True)
class EnvelopePattern:
    """How one call-encoding shape is delimited.

    Attributes:
        name: Stable identifier used in logs and diagnostics.
        pattern: Compiled regex matching the whole envelope.
        priority: Higher runs first.
        body_group: Group index isolating the encoded record.
        discriminator: Substring the body must contain to count as a call.
    """

    name: str
    pattern: re.Pattern[str]
    priority: int = 0
    body_group: int = 1
    discriminator: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name: must be a non-empty string")
        if self.body_group > self.pattern.groups:
            raise ValueError(
                f"body_group: pattern {self.name!r} has only "
                f"{self.pattern.groups} group(s)"
            )

    def matches(self, text: str) -> bool:
        """Return True if the envelope shape occurs anywhere in `text`."""
        if self.discriminator is None:
            return self.pattern.search(text) is not None
        return next(self.find_all(text), None) is not None

    def find_all(self, text: str) -> Iterator[EnvelopeMatch]:
        """Yield every non-overlapping match in document order."""
        for m in self.pattern.finditer(text):
            body = m.group(self.body_group)
            if self.discriminator is not None and self.discriminator not in body:
                continue
            yield EnvelopeMatch(
                envelope=self.name,
                span=m.span(),
                text=m.group(0),
                body=body,
            )


# Every body run below is bounded by the next delimiter of its own kind (a
# tag marker, a backtick, a brace), so an unclosed envelope is scanned once
# rather than once per candidate start.
_NOT_TAG = rf"(?:(?!{re.escape(TAG_OPEN)}|{re.escape(TAG_CLOSE)}).)"

TAGGED_BLOCK = EnvelopePattern(
    name="tagged_block",
    pattern=re.compile(
        rf"{re.escape(TAG_OPEN)}\s*(\{{{_NOT_TAG}*?\}})\s*{re.escape(TAG_CLOSE)}",
        re.DOTALL,
    ),
    priority=40,
)

JSON_FENCE = EnvelopePattern(
    name="json_fence",
    pattern=re.compile(
        rf"{_FENCE}{re.escape(FENCE_LABEL)}\s*\n(\{{[^`]*\}})\s*\n{_FENCE}",
    ),
    priority=30,
    discriminator=f'"{TOOL_KEY}"',
)

BARE_FENCE = EnvelopePattern(
    name="bare_fence",
    pattern=re.compile(rf"{_FENCE}\s*\n(\{{[^`]*\}})\s*\n{_FENCE}"),
    priority=20,
    discriminator=f'"{TOOL_KEY}"',
)

# The discriminator key must come first and be followed by at least one more
# key; `[^{}]+` stops at the first brace, so nested objects never match here
# and are left to the fenced or tagged shapes.
INLINE_RECORD = EnvelopePattern(
    name="inline_record",
    pattern=re.compile(rf'(\{{{_TOOL}\s*:\s*"[^"]+"\s*,\s*"[^{{}}]+\}})'),
    priority=10,
)

_DEFAULT_ENVELOPES: tuple[EnvelopePattern, ...] = (
    TAGGED_BLOCK,
    JSON_FENCE,
    BARE_FENCE,
    INLINE_RECORD,
)


def default_envelopes() -> tuple[EnvelopePattern, ...]:
    """Built-in envelopes, highest priority first."""
    return _DEFAULT_ENVELOPES


def sort_envelopes(
    envelopes: tuple[EnvelopePattern, ...] | list[EnvelopePattern],
) -> tuple[EnvelopePattern, ...]:
    """Deterministic order: higher priority first, name as tiebreaker."""
    return tuple(sorted(envelopes, key=lambda e: (-e.priority, e.name)))
