from abc import ABC, abstractmethod  # noqa: D100
from collections.abc import Sequence
from typing import Any


class BasePromptBuilder(ABC):
    """Abstract base class for all prompt builders."""

    @abstractmethod
    def create_prompt(self, tools: Sequence[Any]) -> str:
        """Creates the prompt fragment describing `tools` to the model."""
