from __future__ import annotations

"""Result and prompt-value types shared by every language model implementation."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from pydantic import BaseModel, Field


class Generation(BaseModel):
    """One generated output, aligned with the prompt that produced it."""

    text: str
    generation_info: Dict[str, Any] = Field(default_factory=dict)


class LLMResult(BaseModel):
    """Outputs of a ``generate`` call; one inner list per call."""

    generations: List[List[Generation]] = Field(default_factory=list)


class PromptValue(ABC):
    """Anything that can be rendered into a plain prompt string."""

    @abstractmethod
    def to_string(self) -> str:
        ...


class StringPromptValue(BaseModel, PromptValue):
    text: str

    def to_string(self) -> str:
        return self.text


class ChatMessage(BaseModel):
    role: str  # 'system', 'user', 'assistant'
    content: str


_ROLE_PREFIXES = {"system": "System", "user": "Human", "assistant": "AI"}


class ChatPromptValue(BaseModel, PromptValue):
    messages: List[ChatMessage] = Field(default_factory=list)

    def to_string(self) -> str:
        # Flatten the conversation as "Human: ...\nAI: ..." lines
        lines = []
        for msg in self.messages:
            prefix = _ROLE_PREFIXES.get(msg.role, msg.role.capitalize())
            lines.append(f"{prefix}: {msg.content}")
        return "\n".join(lines)
