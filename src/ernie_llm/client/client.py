from __future__ import annotations

"""Synchronous client for the Baidu Wenxin Workshop REST API.

Like the other HTTP clients in this codebase it talks to the service with
`requests`, through a `requests.Session` that callers may supply.
Authentication uses either a fixed access token or an API key / secret
key pair exchanged for a token at the OAuth endpoint.
"""

import json
import logging
import time
from typing import List, Sequence

import requests

from ..errors import AccessTokenError, AuthNotSetError
from ..options import StreamingFunc
from .models import Completion, CompletionRequest, EmbeddingResponse

DEFAULT_BASE_URL = "https://aip.baidubce.com/rpc/2.0/ai_custom/v1/wenxinworkshop"
TOKEN_URL = "https://aip.baidubce.com/oauth/2.0/token"
DEFAULT_TIMEOUT = 20.0
EMBEDDING_PATH = "embeddings/embedding-v1"

# Refresh tokens a little before the server expires them.
_EXPIRY_MARGIN = 60.0

logger = logging.getLogger(__name__)


class ErnieClient:
    def __init__(
        self,
        access_token: str | None = None,
        api_key: str | None = None,
        secret_key: str | None = None,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ):
        if not access_token and not (api_key and secret_key):
            raise AuthNotSetError()
        self.api_key = api_key
        self.secret_key = secret_key
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self._fixed_token = access_token or None
        self._token: str | None = None
        self._token_expires_at = 0.0

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------
    def get_access_token(self) -> str:
        if self._fixed_token:
            return self._fixed_token
        if self._token and time.monotonic() < self._token_expires_at:
            return self._token

        params = {
            "grant_type": "client_credentials",
            "client_id": self.api_key,
            "client_secret": self.secret_key,
        }
        resp = self.session.post(TOKEN_URL, params=params, timeout=self.timeout)
        try:
            data = resp.json()
        except ValueError:
            data = {}
        # OAuth failures carry an error body, often with a 4xx status
        if data.get("error"):
            raise AccessTokenError(data["error"], data.get("error_description", ""))
        resp.raise_for_status()
        if not data.get("access_token"):
            raise AccessTokenError("no_token")

        self._token = data["access_token"]
        expires_in = float(data.get("expires_in", 0))
        self._token_expires_at = time.monotonic() + max(expires_in - _EXPIRY_MARGIN, 0.0)
        logger.debug("ernie access token refreshed, expires_in=%s", expires_in)
        return self._token

    # ------------------------------------------------------------------
    # Completion
    # ------------------------------------------------------------------
    def create_completion(
        self,
        model_path: str,
        request: CompletionRequest,
        streaming_func: StreamingFunc | None = None,
    ) -> Completion:
        url = f"{self.base_url}/chat/{model_path}"
        params = {"access_token": self.get_access_token()}
        logger.debug("[ernie] POST %s stream=%s", url, request.stream)
        resp = self.session.post(
            url,
            params=params,
            json=request.to_payload(),
            timeout=self.timeout,
            stream=request.stream,
        )
        try:
            resp.raise_for_status()
            if not request.stream:
                return Completion.model_validate(resp.json())
            return self._read_stream(resp, streaming_func)
        finally:
            # release the pooled connection even when the stream is cut short
            resp.close()

    @staticmethod
    def _read_stream(resp: requests.Response, streaming_func: StreamingFunc | None) -> Completion:
        chunks: List[str] = []
        other: List[str] = []
        last: Completion | None = None
        for line in resp.iter_lines(decode_unicode=True):
            if not line:
                continue
            if not line.startswith("data:"):
                # error bodies come back as plain JSON
                other.append(line)
                continue
            last = Completion.model_validate(json.loads(line[len("data:"):].strip()))
            if last.error_code > 0:
                return last
            if streaming_func is not None:
                streaming_func(last.result)
            chunks.append(last.result)
            if last.is_end:
                break

        if last is None:
            return Completion.model_validate(json.loads("".join(other) or "{}"))
        return last.model_copy(update={"result": "".join(chunks)})

    # ------------------------------------------------------------------
    # Embedding
    # ------------------------------------------------------------------
    def create_embedding(self, texts: Sequence[str]) -> EmbeddingResponse:
        url = f"{self.base_url}/{EMBEDDING_PATH}"
        params = {"access_token": self.get_access_token()}
        logger.debug("[ernie] POST %s texts=%d", url, len(texts))
        resp = self.session.post(url, params=params, json={"input": list(texts)}, timeout=self.timeout)
        resp.raise_for_status()
        return EmbeddingResponse.model_validate(resp.json())
