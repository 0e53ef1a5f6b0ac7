from __future__ import annotations

"""ERNIE language model: batch generation and embeddings over Wenxin Workshop."""

import logging
import os
from typing import Any, Callable, List, Optional, Sequence

from . import base
from .base import EmbeddingProvider, LanguageModel
from .callbacks import CallbackHandler, NoopHandler
from .client import CompletionRequest, ErnieClient, Message
from .errors import AuthNotSetError, EmptyResponseError, ErrorCodeResponse
from .models import ModelName, model_to_path
from .options import CallOptions, StreamingFunc, resolve_model, resolve_options
from .schema import Generation, LLMResult, PromptValue
from .settings import ERNIE_ACCESS_TOKEN, ERNIE_API_KEY, ERNIE_SECRET_KEY

logger = logging.getLogger(__name__)


def _model_value(model: ModelName | str | None) -> Optional[str]:
    if model is None:
        return None
    return model.value if isinstance(model, ModelName) else str(model)


class ErnieLLM(LanguageModel, EmbeddingProvider):
    """Baidu ERNIE chat models exposed as an :class:`LLM` and an embedding provider.

    ``client`` may be any object offering ``create_completion`` and
    ``create_embedding``; when omitted an :class:`ErnieClient` is built from
    the credentials. Access token, API key and secret key default to the
    ``ERNIE_ACCESS_TOKEN``, ``ERNIE_API_KEY`` and ``ERNIE_SECRET_KEY``
    environment variables.
    """

    def __init__(
        self,
        access_token: str | None = None,
        api_key: str | None = None,
        secret_key: str | None = None,
        model: ModelName | str | None = None,
        callbacks_handler: CallbackHandler | None = None,
        default_options: CallOptions | None = None,
        client: Any = None,
        base_url: str | None = None,
        timeout: float = 20.0,
    ):
        if client is None:
            access_token = access_token or os.getenv(ERNIE_ACCESS_TOKEN, "")
            api_key = api_key or os.getenv(ERNIE_API_KEY, "")
            secret_key = secret_key or os.getenv(ERNIE_SECRET_KEY, "")
            if not access_token and not (api_key and secret_key):
                raise AuthNotSetError()
            client = ErnieClient(
                access_token=access_token or None,
                api_key=api_key,
                secret_key=secret_key,
                base_url=base_url,
                timeout=timeout,
            )
        self.client = client
        self.model = _model_value(model) or ""
        self.callbacks_handler = callbacks_handler or NoopHandler()
        self.default_options = default_options or CallOptions()

    # ------------------------------------------------------------------
    # LanguageModel
    # ------------------------------------------------------------------
    def generate_prompt(self, prompt_values: Sequence[PromptValue], **options: Any) -> LLMResult:
        return base.generate_prompt(self, prompt_values, **options)

    def get_num_tokens(self, text: str) -> int:
        # Token counting is not offered by the service.
        return -1

    def call(self, prompt: str, **options: Any) -> str:
        generations = self.generate([prompt], **options)
        if not generations:
            raise EmptyResponseError()
        return generations[0].text

    def generate(
        self,
        prompts: Sequence[str],
        model: ModelName | str | None = None,
        temperature: float | None = None,
        top_p: float | None = None,
        repetition_penalty: float | None = None,
        streaming_func: StreamingFunc | None = None,
    ) -> List[Generation]:
        """Run every prompt through the chat endpoint, one request per prompt.

        The first failure aborts the batch: the error is reported to the
        callbacks handler and raised, and no generations are returned.
        """
        self._notify(self.callbacks_handler.handle_llm_start, list(prompts))

        overrides = CallOptions(
            model=_model_value(model),
            temperature=temperature,
            top_p=top_p,
            repetition_penalty=repetition_penalty,
            streaming_func=streaming_func,
        )
        opts = resolve_options(self.default_options, overrides)
        model_path = model_to_path(resolve_model(self.model, opts))

        generations: List[Generation] = []
        for prompt in prompts:
            request = CompletionRequest(
                messages=[Message(role="user", content=prompt)],
                temperature=opts.temperature,
                top_p=opts.top_p,
                penalty_score=opts.repetition_penalty,
                stream=opts.streaming_func is not None,
            )
            try:
                result = self.client.create_completion(
                    model_path, request, streaming_func=opts.streaming_func
                )
            except Exception as exc:
                self._notify(self.callbacks_handler.handle_llm_error, exc)
                raise

            if result.error_code > 0:
                err = ErrorCodeResponse(result.error_code, result.error_msg, result.id)
                self._notify(self.callbacks_handler.handle_llm_error, err)
                raise err

            generations.append(Generation(text=result.result))

        return generations

    # ------------------------------------------------------------------
    # EmbeddingProvider
    # ------------------------------------------------------------------
    def create_embedding(self, texts: Sequence[str]) -> List[List[float]]:
        """Embed *texts* with Embedding-V1 in a single request.

        The service accepts at most 16 texts, each shorter than 384
        characters; callers are responsible for staying inside those limits.
        doc: https://cloud.baidu.com/doc/WENXINWORKSHOP/s/alj562vvu
        """
        resp = self.client.create_embedding(list(texts))
        if resp.error_code > 0:
            raise ErrorCodeResponse(resp.error_code, resp.error_msg, resp.id)
        return [list(item.embedding) for item in resp.data]

    # ------------------------------------------------------------------
    @staticmethod
    def _notify(hook: Callable[[Any], None], payload: Any) -> None:
        try:
            hook(payload)
        except Exception as exc:
            logger.error("Callbacks handler %s failed: %s", hook.__name__, exc)
