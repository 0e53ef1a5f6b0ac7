from __future__ import annotations

"""Per-call options and the pure functions that merge them with instance defaults."""

from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict

# Receives each streamed chunk of generated text.
StreamingFunc = Callable[[str], None]


class CallOptions(BaseModel):
    """Options accepted by ``generate``/``call``. ``None`` means "not set"."""

    model_config = ConfigDict(arbitrary_types_allowed=True, protected_namespaces=())

    model: Optional[str] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    repetition_penalty: Optional[float] = None
    streaming_func: Optional[StreamingFunc] = None


_MERGED_FIELDS = ("temperature", "top_p", "repetition_penalty", "streaming_func")


def _present(value: Any) -> bool:
    # zero / empty values are treated as "not supplied"
    return value is not None and value != 0 and value != ""


def resolve_options(defaults: CallOptions | None, overrides: CallOptions | None) -> CallOptions:
    """Merge two option sets field by field, preferring *overrides* where present.

    ``model`` is carried over from *overrides* untouched; model selection has
    its own precedence rule, see :func:`resolve_model`.
    """
    defaults = defaults or CallOptions()
    overrides = overrides or CallOptions()
    merged: dict[str, Any] = {"model": overrides.model}
    for name in _MERGED_FIELDS:
        value = getattr(overrides, name)
        merged[name] = value if _present(value) else getattr(defaults, name)
    return CallOptions(**merged)


def resolve_model(instance_model: str | None, options: CallOptions) -> str:
    """A model fixed on the instance wins; otherwise use the per-call one (may be empty)."""
    if instance_model:
        return str(getattr(instance_model, "value", instance_model))
    model = options.model or ""
    return str(getattr(model, "value", model))
