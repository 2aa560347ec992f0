"""Command-line inspection of tool calls in model output.

Usage:
    python -m tool_calls response.txt
    python -m tool_calls --json < response.txt
    python -m tool_calls --check response.txt
"""

import argparse
import json
import sys

from .config import resolve_config
from .exceptions import ConfigurationError
from .extraction import ToolCallExtractor

# ruff: noqa: T201


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for tool call extraction."""
    parser = argparse.ArgumentParser(
        description="Extract tool calls from language model output",
        prog="python -m tool_calls",
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="File containing model output (default: stdin)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON instead of human-readable format",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only test for call envelopes (exit code 0=found, 1=none)",
    )
    parser.add_argument(
        "--diagnostics",
        action="store_true",
        help="Include extraction diagnostics counters",
    )
    args = parser.parse_args(argv)

    with args.file as fh:
        text = fh.read()

    try:
        overrides = {"enable_diagnostics": True} if args.diagnostics else None
        extractor = ToolCallExtractor(config=resolve_config(overrides))
    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 2

    if args.check:
        return 0 if extractor.looks_like_call_response(text) else 1

    result = extractor.extract(text)

    if args.json:
        payload = {
            "calls": [call.to_dict() for call in result.calls],
            "residual_text": result.residual_text,
        }
        if result.diagnostics is not None:
            payload["diagnostics"] = result.diagnostics.to_dict()
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    print(f"=== Tool Calls ({len(result.calls)}) ===")
    for i, call in enumerate(result.calls, 1):
        print(f"{i}. {call.name} {json.dumps(call.input, ensure_ascii=False)}")
    print("\n=== Residual Text ===")
    print(result.residual_text)
    if result.diagnostics is not None:
        print("\n=== Diagnostics ===")
        for key, value in result.diagnostics.to_dict().items():
            print(f"  {key}: {value}")
    return 0
