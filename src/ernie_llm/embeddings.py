from __future__ import annotations

"""Document / query embedder on top of an :class:`EmbeddingProvider`."""

from typing import List, Sequence

from .base import EmbeddingProvider

# Embedding-V1 accepts at most 16 texts per request.
DEFAULT_BATCH_SIZE = 16


class ErnieEmbedder:
    """Splits large inputs into provider-sized batches and keeps input order."""

    def __init__(
        self,
        provider: EmbeddingProvider,
        batch_size: int = DEFAULT_BATCH_SIZE,
        strip_new_lines: bool = True,
    ):
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self.provider = provider
        self.batch_size = batch_size
        self.strip_new_lines = strip_new_lines

    def _prepare(self, texts: Sequence[str]) -> List[str]:
        if not self.strip_new_lines:
            return list(texts)
        return [t.replace("\n", " ") for t in texts]

    def embed_documents(self, texts: Sequence[str]) -> List[List[float]]:
        texts = self._prepare(texts)
        vectors: List[List[float]] = []
        for start in range(0, len(texts), self.batch_size):
            vectors.extend(self.provider.create_embedding(texts[start:start + self.batch_size]))
        return vectors

    def embed_query(self, text: str) -> List[float]:
        vectors = self.provider.create_embedding(self._prepare([text]))
        if not vectors:
            raise ValueError("embedding provider returned no vector for the query")
        return vectors[0]
