import pytest
import requests

from ernie_llm import ErnieEmbedder, ErnieLLM, ErrorCodeResponse
from ernie_llm.client import EmbeddingData, EmbeddingResponse

from conftest import FakeClient


def test_create_embedding_single_request(handler):
    client = FakeClient(
        embedding=EmbeddingResponse(
            data=[EmbeddingData(embedding=[0.1, 0.2], index=0), EmbeddingData(embedding=[0.3, 0.4], index=1)]
        )
    )
    llm = ErnieLLM(client=client, callbacks_handler=handler)

    vectors = llm.create_embedding(["first", "second"])

    assert vectors == [[0.1, 0.2], [0.3, 0.4]]
    assert client.embedding_calls == [["first", "second"]]
    # embeddings never go through the lifecycle hooks
    assert handler.starts == []


def test_create_embedding_error_code():
    client = FakeClient(embedding=EmbeddingResponse(id="e-1", error_code=336001, error_msg="invalid argument"))
    with pytest.raises(ErrorCodeResponse) as exc_info:
        ErnieLLM(client=client).create_embedding(["x"])
    assert exc_info.value.code == 336001
    assert exc_info.value.id == "e-1"


def test_create_embedding_transport_error(handler):
    boom = requests.Timeout("too slow")
    client = FakeClient(embedding=boom)
    llm = ErnieLLM(client=client, callbacks_handler=handler)
    with pytest.raises(requests.Timeout):
        llm.create_embedding(["x"])
    assert handler.errors == []


def test_embedder_batches_by_16():
    client = FakeClient()
    embedder = ErnieEmbedder(ErnieLLM(client=client))
    texts = [f"text {i}" for i in range(35)]

    vectors = embedder.embed_documents(texts)

    assert [len(batch) for batch in client.embedding_calls] == [16, 16, 3]
    assert len(vectors) == 35
    assert vectors[16] == [float(len("text 16")), 0.0]


def test_embedder_strips_newlines():
    client = FakeClient()
    embedder = ErnieEmbedder(ErnieLLM(client=client))
    embedder.embed_query("line one\nline two")
    assert client.embedding_calls == [["line one line two"]]


def test_embedder_rejects_bad_batch_size():
    with pytest.raises(ValueError):
        ErnieEmbedder(ErnieLLM(client=FakeClient()), batch_size=0)
