"""Tool descriptor models consumed by the prompt builder."""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ParameterSpec(BaseModel):
    """One parameter of a tool's input schema."""

    model_config = ConfigDict(extra="allow")

    description: str | None = None
    type: Any = None


class InputSchema(BaseModel):
    """JSON-schema-like description of a tool's parameters."""

    model_config = ConfigDict(extra="allow")

    type: Any = "object"
    properties: dict[str, ParameterSpec] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)


class ToolDescriptor(BaseModel):
    """A tool the model may call: name, description and parameters."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = Field(min_length=1)
    description: str | None = None
    input_schema: InputSchema = Field(
        default_factory=InputSchema,
        validation_alias=AliasChoices("input_schema", "inputSchema", "parameters"),
    )

    @classmethod
    def coerce(cls, value: Any) -> "ToolDescriptor":
        """Accept a descriptor instance or any mapping with the same shape."""
        if isinstance(value, cls):
            return value
        return cls.model_validate(value)
