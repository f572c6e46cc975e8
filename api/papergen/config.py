from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .errors import ServerConfigurationError

DEFAULT_URL = "https://openrouter.ai/api/v1/chat/completions"
DEFAULT_MODEL = "mistralai/mistral-7b-instruct"
DEFAULT_REFERER = "https://coopergen-app.com"
DEFAULT_TITLE = "Coopergen"


def _get_env(name: str) -> str | None:
    value = os.getenv(name)
    if value and value.strip():
        return value.strip()
    return None


@dataclass
class GenerateConfig:
    api_key: str
    model: str = DEFAULT_MODEL
    url: str = DEFAULT_URL
    referer: str = DEFAULT_REFERER
    title: str = DEFAULT_TITLE
    timeout: Optional[float] = None
    strict_schema: bool = False

    @classmethod
    def from_env(cls) -> "GenerateConfig":
        api_key = _get_env("OPENROUTER_API_KEY")
        if not api_key:
            raise ServerConfigurationError("OPENROUTER_API_KEY is not set.")

        raw_timeout = _get_env("OPENROUTER_TIMEOUT_SECONDS")
        timeout = None
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ServerConfigurationError(
                    f"OPENROUTER_TIMEOUT_SECONDS is not a number: {raw_timeout!r}",
                    public_message="Server configuration error: invalid request timeout.",
                ) from exc

        validation = (_get_env("PAPER_SCHEMA_VALIDATION") or "off").lower()
        return cls(
            api_key=api_key,
            model=_get_env("OPENROUTER_MODEL") or DEFAULT_MODEL,
            url=_get_env("OPENROUTER_URL") or DEFAULT_URL,
            referer=_get_env("OPENROUTER_REFERER") or DEFAULT_REFERER,
            title=_get_env("OPENROUTER_TITLE") or DEFAULT_TITLE,
            timeout=timeout,
            strict_schema=validation == "strict",
        )
