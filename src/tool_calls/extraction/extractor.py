"""Multi-envelope tool call extraction.

`ToolCallExtractor` applies each configured `EnvelopePattern` in priority
order against the original text, decodes every match, normalizes it into a
`StructuredCall`, and removes accepted spans to produce the residual
narrative text.

Extraction never raises for malformed model output: bodies that fail to
decode or carry no tool name are skipped and left in the residual text.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging

from tool_calls.config import FrozenConfig, resolve_config
from tool_calls.core.types import (
    ExtractionDiagnostics,
    ExtractionResult,
    StructuredCall,
)

from .envelopes import EnvelopeMatch, EnvelopePattern, default_envelopes, sort_envelopes
from .normalize import decode_record, normalize_record

log = logging.getLogger(__name__)


class ToolCallExtractor:
    """Extract structured calls from model text.

    Instances hold only immutable configuration and can be shared freely
    between threads.

    Attributes:
        envelopes: Envelopes in the order they are applied.
        config: Resolved `FrozenConfig`.
    """

    def __init__(
        self,
        envelopes: Iterable[EnvelopePattern] | None = None,
        *,
        config: FrozenConfig | None = None,
    ) -> None:
        """Initialize the extractor.

        Args:
            envelopes: Optional envelopes. Defaults to the built-ins.
            config: Optional config. Resolved from scope/environment if omitted.
        """
        self.envelopes: tuple[EnvelopePattern, ...] = sort_envelopes(
            tuple(envelopes) if envelopes is not None else default_envelopes()
        )
        self.config = config if config is not None else resolve_config()

    def looks_like_call_response(self, text: str) -> bool:
        """Cheap shape test: does any envelope occur in `text`?

        Does not decode, so a malformed body inside a valid envelope still
        counts.
        """
        return any(envelope.matches(text) for envelope in self.envelopes)

    def extract(self, text: str) -> ExtractionResult:
        """Extract every call in `text` and the narrative left around them.

        Calls are grouped by envelope priority, then by position within each
        envelope's matches.
        """
        diagnostics = ExtractionDiagnostics() if self.config.enable_diagnostics else None
        calls: list[StructuredCall] = []
        accepted: list[tuple[int, int]] = []

        for envelope in self.envelopes:
            if diagnostics:
                diagnostics.attempted_envelopes.append(envelope.name)

            for match in envelope.find_all(text):
                if diagnostics:
                    diagnostics.record_match(envelope.name)

                overlapping = any(match.overlaps(span) for span in accepted)
                if overlapping and not self.config.allow_overlapping_matches:
                    log.debug(
                        "Skipping %s match at %s: already claimed by an earlier match",
                        envelope.name,
                        match.span,
                    )
                    if diagnostics:
                        diagnostics.overlapping_matches += 1
                    continue

                call = self._normalize(match, diagnostics)
                if call is None:
                    continue

                calls.append(call)
                if not overlapping:
                    accepted.append(match.span)

        residual = _remove_spans(text, accepted).strip()
        log.debug(
            "Extracted %d call(s); residual text is %d chars", len(calls), len(residual)
        )
        return ExtractionResult(
            calls=tuple(calls), residual_text=residual, diagnostics=diagnostics
        )

    def _normalize(
        self, match: EnvelopeMatch, diagnostics: ExtractionDiagnostics | None
    ) -> StructuredCall | None:
        record = decode_record(match.body)
        if record is None:
            if diagnostics:
                diagnostics.decode_failures += 1
            return None
        call = normalize_record(record)
        if call is None and diagnostics:
            diagnostics.unnamed_records += 1
        return call


def _remove_spans(text: str, spans: list[tuple[int, int]]) -> str:
    """Cut non-overlapping `spans` out of `text`."""
    if not spans:
        return text
    parts: list[str] = []
    cursor = 0
    for start, end in sorted(spans):
        parts.append(text[cursor:start])
        cursor = end
    parts.append(text[cursor:])
    return "".join(parts)


def extract_calls(
    text: str, *, config: FrozenConfig | None = None
) -> tuple[list[StructuredCall], str]:
    """Return ``(calls, residual_text)`` for `text` using the built-in envelopes."""
    calls, residual = ToolCallExtractor(config=config).extract(text)
    return calls, residual


def looks_like_call_response(text: str) -> bool:
    """Return True if any built-in envelope occurs in `text`."""
    return ToolCallExtractor(config=FrozenConfig()).looks_like_call_response(text)
