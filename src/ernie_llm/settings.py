from __future__ import annotations

import os
from dataclasses import dataclass, asdict

from dotenv import load_dotenv

ERNIE_ACCESS_TOKEN = "ERNIE_ACCESS_TOKEN"
ERNIE_API_KEY = "ERNIE_API_KEY"
ERNIE_SECRET_KEY = "ERNIE_SECRET_KEY"
ERNIE_MODEL = "ERNIE_MODEL"
ERNIE_BASE_URL = "ERNIE_BASE_URL"
ERNIE_TIMEOUT = "ERNIE_TIMEOUT"


@dataclass
class ErnieSettings:
    """Credentials and connection settings, usually read from the environment."""

    access_token: str = ""
    api_key: str = ""
    secret_key: str = ""
    model: str = ""
    base_url: str | None = None
    timeout: float = 20.0

    @classmethod
    def from_env(cls, dotenv_path: str | None = ".env") -> "ErnieSettings":
        # Existing environment variables win over the .env file
        if dotenv_path:
            load_dotenv(dotenv_path, override=False)
        return cls(
            access_token=os.getenv(ERNIE_ACCESS_TOKEN, ""),
            api_key=os.getenv(ERNIE_API_KEY, ""),
            secret_key=os.getenv(ERNIE_SECRET_KEY, ""),
            model=os.getenv(ERNIE_MODEL, ""),
            base_url=os.getenv(ERNIE_BASE_URL) or None,
            timeout=float(os.getenv(ERNIE_TIMEOUT) or 20),
        )

    def has_auth(self) -> bool:
        return bool(self.access_token or (self.api_key and self.secret_key))

    def to_dict(self):
        data = asdict(self)
        # never echo secrets
        for key in ("access_token", "api_key", "secret_key"):
            if data[key]:
                data[key] = "***"
        return data
