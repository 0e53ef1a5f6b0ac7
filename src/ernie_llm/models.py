from __future__ import annotations

"""Supported ERNIE models and their Wenxin Workshop endpoint paths."""

from enum import Enum

DEFAULT_COMPLETION_MODEL_PATH = "completions"


class ModelName(str, Enum):
    ERNIE_BOT = "ERNIE-Bot"
    ERNIE_BOT_TURBO = "ERNIE-Bot-turbo"
    ERNIE_BOT_8K = "ERNIE-Bot-8K"
    ERNIE_BOT_PRO = "ERNIE-Bot-4"
    BLOOMZ_7B = "BLOOMZ-7B"
    LLAMA2_7B_CHAT = "Llama-2-7b-chat"
    LLAMA2_13B_CHAT = "Llama-2-13b-chat"
    LLAMA2_70B_CHAT = "Llama-2-70b-chat"


_MODEL_PATHS: dict[ModelName, str] = {
    ModelName.ERNIE_BOT: "completions",
    ModelName.ERNIE_BOT_TURBO: "eb-instant",
    ModelName.ERNIE_BOT_8K: "ernie_bot_8k",
    ModelName.ERNIE_BOT_PRO: "completions_pro",
    ModelName.BLOOMZ_7B: "bloomz_7b1",
    ModelName.LLAMA2_7B_CHAT: "llama_2_7b",
    ModelName.LLAMA2_13B_CHAT: "llama_2_13b",
    ModelName.LLAMA2_70B_CHAT: "llama_2_70b",
}


def model_to_path(model: ModelName | str | None) -> str:
    """Return the chat endpoint path for *model*.

    Unknown or empty model names fall back to the default completion path.
    """
    try:
        return _MODEL_PATHS[ModelName(model)]
    except ValueError:
        return DEFAULT_COMPLETION_MODEL_PATH
