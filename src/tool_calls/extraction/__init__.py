"""
Envelope recognition and call extraction

Recognizers for each supported envelope shape, the shared decode and
normalization step, and the extractor that ties them together.
"""

from .envelopes import (
    BARE_FENCE,
    INLINE_RECORD,
    JSON_FENCE,
    TAGGED_BLOCK,
    EnvelopeMatch,
    EnvelopePattern,
    default_envelopes,
)
from .extractor import ToolCallExtractor, extract_calls, looks_like_call_response
from .normalize import decode_record, normalize_record

__all__ = [
    # Extraction
    "ToolCallExtractor",
    "extract_calls",
    "looks_like_call_response",
    # Envelopes
    "EnvelopeMatch",
    "EnvelopePattern",
    "default_envelopes",
    "TAGGED_BLOCK",
    "JSON_FENCE",
    "BARE_FENCE",
    "INLINE_RECORD",
    # Normalization
    "decode_record",
    "normalize_record",
]
