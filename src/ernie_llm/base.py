from __future__ import annotations

"""Capability interfaces for language models and embedding providers.

Each concrete provider implements one or both of the narrow interfaces
below. They carry no shared state, so an alternative backend only has
to supply the methods, never a base constructor.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Sequence

from .schema import Generation, LLMResult, PromptValue


class LLM(ABC):
    """Batch text generation from plain string prompts."""

    @abstractmethod
    def generate(self, prompts: Sequence[str], **options: Any) -> List[Generation]:  # noqa: D401
        """Return one generation per prompt, in prompt order."""
        ...

    @abstractmethod
    def call(self, prompt: str, **options: Any) -> str:
        """Generate text for a single prompt."""
        ...


class LanguageModel(LLM):
    """An :class:`LLM` that also accepts prompt values."""

    @abstractmethod
    def generate_prompt(self, prompt_values: Sequence[PromptValue], **options: Any) -> LLMResult:
        ...

    @abstractmethod
    def get_num_tokens(self, text: str) -> int:
        ...


class EmbeddingProvider(ABC):
    """Batch text-to-vector conversion."""

    @abstractmethod
    def create_embedding(self, texts: Sequence[str]) -> List[List[float]]:
        """Return one vector per text, in the order the provider returns them."""
        ...


def generate_prompt(llm: LLM, prompt_values: Sequence[PromptValue], **options: Any) -> LLMResult:
    """Render *prompt_values* to strings and run them through ``llm.generate``."""
    prompts = [pv.to_string() for pv in prompt_values]
    generations = llm.generate(prompts, **options)
    return LLMResult(generations=[generations])
