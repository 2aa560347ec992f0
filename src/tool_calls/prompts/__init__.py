"""Prompt fragments that teach a model the tool call envelope."""

from .base import BasePromptBuilder
from .models import InputSchema, ParameterSpec, ToolDescriptor
from .tool_prompt_builder import ToolPromptBuilder, build_tool_prompt

__all__ = [
    "BasePromptBuilder",
    "InputSchema",
    "ParameterSpec",
    "ToolDescriptor",
    "ToolPromptBuilder",
    "build_tool_prompt",
]
