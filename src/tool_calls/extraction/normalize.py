"""Decode envelope bodies and normalize them into `StructuredCall`s."""

from __future__ import annotations

import json
import logging
from typing import Any

from tool_calls.constants import INPUT_KEY, NAME_KEY, RESERVED_KEYS, TOOL_KEY
from tool_calls.core.types import StructuredCall

log = logging.getLogger(__name__)


def decode_record(body: str) -> dict[str, Any] | None:
    """Decode an envelope body into a raw record.

    Returns None when the body is not valid JSON or does not decode to an
    object. Never raises for malformed input.
    """
    try:
        record = json.loads(body)
    except (ValueError, RecursionError) as e:
        log.debug("Skipping envelope body that is not valid JSON: %s", e)
        return None
    if not isinstance(record, dict):
        log.debug(
            "Skipping envelope body that decoded to %s, not an object",
            type(record).__name__,
        )
        return None
    return record


def _call_name(record: dict[str, Any]) -> str | None:
    for key in (TOOL_KEY, NAME_KEY):
        value = record.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def normalize_record(record: dict[str, Any]) -> StructuredCall | None:
    """Turn a raw record into a `StructuredCall`, or None if it has no name.

    An explicit nested ``input`` object is used verbatim. Otherwise every key
    except the reserved ones becomes a parameter.
    """
    name = _call_name(record)
    if name is None:
        log.debug("Skipping record without a usable tool name: keys=%s", list(record))
        return None

    nested = record.get(INPUT_KEY)
    if isinstance(nested, dict):
        params = nested
    else:
        params = {k: v for k, v in record.items() if k not in RESERVED_KEYS}

    return StructuredCall(name=name, input=params)
