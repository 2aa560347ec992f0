"""Basic exceptions for tool call extraction"""


class ToolCallsError(Exception):
    """Base exception for tool call errors"""


class ConfigurationError(ToolCallsError):
    """Raised when configuration values fail validation"""


class ToolDescriptorError(ToolCallsError):
    """Raised when a tool descriptor cannot be read for prompt building"""
