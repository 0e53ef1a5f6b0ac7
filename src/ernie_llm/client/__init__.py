from .client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, TOKEN_URL, ErnieClient
from .models import (
    Completion,
    CompletionRequest,
    EmbeddingData,
    EmbeddingResponse,
    Message,
    Usage,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "TOKEN_URL",
    "ErnieClient",
    "Completion",
    "CompletionRequest",
    "EmbeddingData",
    "EmbeddingResponse",
    "Message",
    "Usage",
]
