"""
Global test configuration and shared model-output samples.
"""

import os

import pytest

from tool_calls.config import FrozenConfig


# --- Environment Isolation (Autouse) ---
@pytest.fixture(autouse=True)
def isolate_tool_calls_env(request, monkeypatch):
    """Ensure a clean TOOL_CALLS_* environment for each test.

    Escape hatch: mark a test with @pytest.mark.allow_env_pollution to keep
    the current environment unchanged.
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("TOOL_CALLS_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def default_config() -> FrozenConfig:
    return FrozenConfig()


@pytest.fixture
def diagnostics_config() -> FrozenConfig:
    return FrozenConfig(enable_diagnostics=True)


# --- Model Output Samples ---


@pytest.fixture
def tagged_response() -> str:
    return (
        "Sure, doing that now.\n"
        "<tool_call>\n"
        '{"tool":"write_file","path":"/a.txt","content":"hi"}\n'
        "</tool_call>"
    )


@pytest.fixture
def two_tagged_response() -> str:
    return (
        "First I'll list the files.\n"
        '<tool_call>\n{"tool": "bash", "command": "ls"}\n</tool_call>\n'
        "Then I'll read the config.\n"
        '<tool_call>\n{"tool": "read_file", "path": "setup.cfg"}\n</tool_call>\n'
        "Done."
    )


@pytest.fixture
def json_fence_response() -> str:
    return (
        "Running the tests:\n"
        "```json\n"
        '{"tool": "bash", "command": "pytest -q"}\n'
        "```\n"
        "I'll report back."
    )


@pytest.fixture
def bare_fence_response() -> str:
    return (
        "Here you go\n"
        "```\n"
        '{"tool": "read_file", "path": "README.md"}\n'
        "```"
    )
