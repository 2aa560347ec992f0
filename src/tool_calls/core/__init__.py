"""Core result types for tool call extraction."""

from .types import ExtractionDiagnostics, ExtractionResult, StructuredCall

__all__ = [
    "ExtractionDiagnostics",
    "ExtractionResult",
    "StructuredCall",
]
