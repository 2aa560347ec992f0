"""Extract tool calls from language model output."""

import importlib.metadata
import logging

from tool_calls.config import FrozenConfig, config_scope, resolve_config
from tool_calls.core.types import (
    ExtractionDiagnostics,
    ExtractionResult,
    StructuredCall,
)
from tool_calls.exceptions import (
    ConfigurationError,
    ToolCallsError,
    ToolDescriptorError,
)
from tool_calls.extraction import (
    EnvelopePattern,
    ToolCallExtractor,
    default_envelopes,
    extract_calls,
    looks_like_call_response,
)
from tool_calls.prompts import ToolDescriptor, ToolPromptBuilder, build_tool_prompt

try:
    __version__ = importlib.metadata.version("llm-tool-calls")
except importlib.metadata.PackageNotFoundError:
    __version__ = "development"

# Set up a null handler for the library's root logger.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Extraction
    "ToolCallExtractor",
    "extract_calls",
    "looks_like_call_response",
    "EnvelopePattern",
    "default_envelopes",
    # Prompt building
    "ToolPromptBuilder",
    "ToolDescriptor",
    "build_tool_prompt",
    # Result types
    "StructuredCall",
    "ExtractionResult",
    "ExtractionDiagnostics",
    # Configuration
    "FrozenConfig",
    "config_scope",
    "resolve_config",
    # Exceptions
    "ToolCallsError",
    "ConfigurationError",
    "ToolDescriptorError",
]
