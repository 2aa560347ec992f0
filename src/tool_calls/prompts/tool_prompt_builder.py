from collections.abc import Sequence  # noqa: D100
import json
from typing import Any

from pydantic import ValidationError

from tool_calls.constants import TAG_CLOSE, TAG_OPEN, TOOL_KEY
from tool_calls.exceptions import ToolDescriptorError

from .base import BasePromptBuilder
from .models import ToolDescriptor


def _envelope(record: dict[str, Any]) -> str:
    return f"{TAG_OPEN}\n{json.dumps(record, ensure_ascii=False)}\n{TAG_CLOSE}"


class ToolPromptBuilder(BasePromptBuilder):
    """Builds the system prompt fragment that teaches the model the call envelope.

    The example envelopes use the same tag markers the extractor recognizes,
    so output that follows the instructions is always extractable.
    """

    def create_prompt(self, tools: Sequence[Any]) -> str:
        """Creates the tool section of a system prompt, or "" when there are no tools."""
        if not tools:
            return ""

        descriptors = [self._coerce(i, tool) for i, tool in enumerate(tools)]

        prompt_parts = [
            "",
            "## Tool Calling",
            "",
            "You are an assistant with tool execution capabilities. "
            "You can and must use tools to complete the user's requests.",
            "",
            "Whenever an action is needed, output a tool call in exactly this format:",
            "",
            "```",
            _envelope({TOOL_KEY: "tool_name", "parameter_name": "parameter_value"}),
            "```",
            "",
            "### Available Tools",
            "",
        ]
        for tool in descriptors:
            prompt_parts.extend(self._tool_section(tool))

        prompt_parts.extend(
            [
                "### Rules",
                "",
                f"1. **Always use tools** - when a request needs an action, output a "
                f"{TAG_OPEN} block instead of describing the action in prose",
                "2. **One tool at a time** - call exactly one tool per response and "
                "wait for its result before continuing",
                "3. **Act immediately** - do not ask for confirmation before calling a tool",
                "",
                "Example - create a file:",
                _envelope(
                    {
                        TOOL_KEY: "write_file",
                        "path": "/path/to/file.txt",
                        "content": "file content",
                    }
                ),
                "",
                "Example - run a command:",
                _envelope({TOOL_KEY: "bash", "command": "ls -la"}),
            ]
        )
        return "\n".join(prompt_parts) + "\n"

    def _tool_section(self, tool: ToolDescriptor) -> list[str]:
        header = f"**{tool.name}**"
        if tool.description:
            header += f" - {tool.description}"
        lines = [header]

        properties = tool.input_schema.properties
        if properties:
            required = set(tool.input_schema.required)
            params = []
            for name, spec in properties.items():
                param = f"`{name}`"
                if spec.description:
                    param += f" ({spec.description})"
                if name in required:
                    param += " [required]"
                params.append(param)
            lines.append("Parameters: " + ", ".join(params))

        lines.append("")
        return lines

    @staticmethod
    def _coerce(index: int, tool: Any) -> ToolDescriptor:
        try:
            return ToolDescriptor.coerce(tool)
        except ValidationError as e:
            raise ToolDescriptorError(f"Tool {index} is not a valid descriptor: {e}") from e


def build_tool_prompt(tools: Sequence[Any]) -> str:
    """Render `tools` into instructions for emitting extractable tool calls.

    Returns an empty string for an empty catalog; callers should omit the
    fragment rather than treat that as an error.
    """
    return ToolPromptBuilder().create_prompt(tools)
