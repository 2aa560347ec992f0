"""
Project-wide constants for tool call extraction
"""

# ==============================================================================
# Record Keys
# ==============================================================================

TOOL_KEY = "tool"  # Primary name key, also the fence/inline discriminator
NAME_KEY = "name"  # Fallback name key
TYPE_KEY = "type"  # Reserved, never surfaced as a parameter
INPUT_KEY = "input"  # Explicit nested parameter mapping

RESERVED_KEYS = frozenset({TOOL_KEY, NAME_KEY, TYPE_KEY})

# ==============================================================================
# Envelope Syntax
# ==============================================================================

TAG_OPEN = "<tool_call>"
TAG_CLOSE = "</tool_call>"
FENCE = "```"
FENCE_LABEL = "json"

# ==============================================================================
# Configuration
# ==============================================================================

ENV_PREFIX = "TOOL_CALLS_"
