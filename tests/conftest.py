import pytest

from ernie_llm.callbacks import CallbackHandler
from ernie_llm.client import Completion, EmbeddingData, EmbeddingResponse


class FakeClient:
    """Stands in for ErnieClient; replays queued outcomes in order."""

    def __init__(self, outcomes=None, embedding=None):
        self.outcomes = list(outcomes or [])
        self.embedding = embedding
        self.calls = []
        self.embedding_calls = []

    def create_completion(self, model_path, request, streaming_func=None):
        self.calls.append((model_path, request, streaming_func))
        outcome = self.outcomes.pop(0) if self.outcomes else Completion(result=request.messages[0].content.upper())
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def create_embedding(self, texts):
        self.embedding_calls.append(list(texts))
        if isinstance(self.embedding, Exception):
            raise self.embedding
        if self.embedding is not None:
            return self.embedding
        return EmbeddingResponse(
            data=[EmbeddingData(embedding=[float(len(t)), float(i)], index=i) for i, t in enumerate(texts)]
        )


class RecordingHandler(CallbackHandler):
    def __init__(self):
        self.starts = []
        self.errors = []

    def handle_llm_start(self, prompts):
        self.starts.append(list(prompts))

    def handle_llm_error(self, err):
        self.errors.append(err)


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def no_ernie_env(monkeypatch):
    for name in ("ERNIE_ACCESS_TOKEN", "ERNIE_API_KEY", "ERNIE_SECRET_KEY", "ERNIE_MODEL", "ERNIE_BASE_URL", "ERNIE_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
