from __future__ import annotations

"""Exception types raised by the ERNIE adapter."""

from typing import Any


class ErnieError(Exception):
    """Base class for all errors raised by this package."""


class AuthNotSetError(ErnieError, ValueError):
    """Neither an access token nor an API key / secret key pair was configured."""

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "both access_token and api_key/secret_key are not set.\n"
            "You can pass auth info with ErnieLLM(api_key=..., secret_key=...) or\n"
            "export ERNIE_API_KEY={API Key}\n"
            "export ERNIE_SECRET_KEY={Secret Key}\n"
            "doc: https://cloud.baidu.com/doc/WENXINWORKSHOP/s/flfmc9do2"
        )


class AccessTokenError(ErnieError):
    """The OAuth endpoint refused to issue an access token."""

    def __init__(self, error: str, description: str = ""):
        self.error = error
        self.description = description
        super().__init__(f"access token request failed: {error} {description}".strip())


class EmptyResponseError(ErnieError, RuntimeError):
    """The service returned no generation even though no error was reported."""

    def __init__(self, message: str = "no response"):
        super().__init__(message)


class ErrorCodeResponse(ErnieError, RuntimeError):
    """The service answered, but with an application-level error code."""

    def __init__(self, code: int, message: str = "", id: Any = ""):  # noqa: A002
        self.code = code
        self.message = message
        self.id = id
        super().__init__(f"has error code, error_code:{code}, error_msg:{message}, id:{id}")
