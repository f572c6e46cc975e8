"""Outbound call to the OpenRouter chat-completion API."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import requests

from .config import GenerateConfig
from .errors import UpstreamHttpError


def build_headers(config: GenerateConfig) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {config.api_key}",
        "Content-Type": "application/json",
        "HTTP-Referer": config.referer,
        "X-Title": config.title,
    }


def build_payload(config: GenerateConfig, messages: List[Dict[str, str]]) -> Dict[str, Any]:
    return {
        "model": config.model,
        "response_format": {"type": "json_object"},
        "messages": messages,
    }


def request_completion(config: GenerateConfig, messages: List[Dict[str, str]]) -> Any:
    """POST the messages once and return the assistant message content.

    Non-2xx answers raise :class:`UpstreamHttpError` carrying the downstream
    status and body text. A 2xx envelope without ``choices[0].message.content``
    is left to fail with the lookup error; the handler reports it as a generic
    server error.
    """
    response = requests.post(
        config.url,
        headers=build_headers(config),
        json=build_payload(config, messages),
        timeout=config.timeout,
    )
    if not 200 <= response.status_code < 300:
        error_body = response.text
        logging.error("[generate] OpenRouter API error %s: %s", response.status_code, error_body)
        raise UpstreamHttpError(response.status_code, error_body)

    data = response.json()
    return data["choices"][0]["message"]["content"]
