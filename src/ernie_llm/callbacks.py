from __future__ import annotations

"""Lifecycle hooks fired around a generation batch."""

import logging
from abc import ABC, abstractmethod
from typing import Sequence

logger = logging.getLogger(__name__)


class CallbackHandler(ABC):
    """Observer notified when a batch starts and when it fails.

    Return values are ignored; handlers cannot change the outcome of a call.
    """

    @abstractmethod
    def handle_llm_start(self, prompts: Sequence[str]) -> None:
        ...

    @abstractmethod
    def handle_llm_error(self, err: BaseException) -> None:
        ...


class NoopHandler(CallbackHandler):
    """Default handler: does nothing."""

    def handle_llm_start(self, prompts: Sequence[str]) -> None:
        pass

    def handle_llm_error(self, err: BaseException) -> None:
        pass


class LogHandler(CallbackHandler):
    """Writes lifecycle events to a logger."""

    def __init__(self, log: logging.Logger | None = None):
        self.log = log or logger

    def handle_llm_start(self, prompts: Sequence[str]) -> None:
        self.log.info("[llm] start prompts=%d", len(prompts))
        for prompt in prompts:
            self.log.debug("[llm] prompt=%s", prompt)

    def handle_llm_error(self, err: BaseException) -> None:
        self.log.error("[llm] error: %s", err)
