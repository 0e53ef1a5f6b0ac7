from __future__ import annotations

"""ERNIE (Baidu Wenxin Workshop) language model adapter."""

from typing import Any

from .base import LLM, EmbeddingProvider, LanguageModel, generate_prompt
from .callbacks import CallbackHandler, LogHandler, NoopHandler
from .embeddings import ErnieEmbedder
from .errors import (
    AccessTokenError,
    AuthNotSetError,
    EmptyResponseError,
    ErnieError,
    ErrorCodeResponse,
)
from .llm import ErnieLLM
from .models import DEFAULT_COMPLETION_MODEL_PATH, ModelName, model_to_path
from .options import CallOptions, resolve_model, resolve_options
from .schema import ChatMessage, ChatPromptValue, Generation, LLMResult, StringPromptValue
from .settings import ErnieSettings

__all__ = [
    "get_llm",
    "LLM",
    "LanguageModel",
    "EmbeddingProvider",
    "generate_prompt",
    "CallbackHandler",
    "LogHandler",
    "NoopHandler",
    "ErnieEmbedder",
    "ErnieError",
    "AccessTokenError",
    "AuthNotSetError",
    "EmptyResponseError",
    "ErrorCodeResponse",
    "ErnieLLM",
    "DEFAULT_COMPLETION_MODEL_PATH",
    "ModelName",
    "model_to_path",
    "CallOptions",
    "resolve_model",
    "resolve_options",
    "ChatMessage",
    "ChatPromptValue",
    "Generation",
    "LLMResult",
    "StringPromptValue",
    "ErnieSettings",
]


def get_llm(
    model: str | None = None,
    settings: ErnieSettings | None = None,
    **kwargs: Any,
) -> ErnieLLM:
    """Return an ErnieLLM configured from the environment (and ``.env``)."""

    settings = settings or ErnieSettings.from_env()
    if not settings.has_auth():
        raise AuthNotSetError()
    return ErnieLLM(
        access_token=settings.access_token or None,
        api_key=settings.api_key or None,
        secret_key=settings.secret_key or None,
        model=model or settings.model or None,
        base_url=settings.base_url,
        timeout=settings.timeout,
        **kwargs,
    )
