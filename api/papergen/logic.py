from __future__ import annotations

import json
import logging
import os
from typing import Any, Callable, Dict, Optional

import azure.functions as func  # type: ignore
from pydantic import ValidationError

from .config import GenerateConfig
from .errors import (
    BadRequest,
    GenericServerError,
    MethodNotAllowed,
    PaperGenerationError,
    UpstreamContentError,
)
from .models import GenerateRequest, QuestionPaper
from .openrouter import request_completion
from .prompts import build_messages

ALLOWED_ORIGIN = os.getenv("GENERATE_ALLOW_ORIGIN", "*")


def _json_response(
    status: int, payload: Dict[str, Any], allow_origin: str, headers: Optional[Dict[str, str]] = None
) -> func.HttpResponse:  # type: ignore
    all_headers = {"Access-Control-Allow-Origin": allow_origin}
    if headers:
        all_headers.update(headers)
    return func.HttpResponse(
        json.dumps(payload, ensure_ascii=False),
        status_code=status,
        mimetype="application/json",
        headers=all_headers,
    )


class PaperGenerationHandler:
    """Turns one blueprint request into one question paper response.

    ``config_loader`` is called after the request has been validated, so a
    missing API key is only reported for requests that would otherwise reach
    the model. Tests pass a loader returning a fixed :class:`GenerateConfig`.
    """

    def __init__(
        self,
        config_loader: Callable[[], GenerateConfig] = GenerateConfig.from_env,
        allow_origin: str = ALLOWED_ORIGIN,
    ):
        self._config_loader = config_loader
        self._allow_origin = allow_origin

    def handle(self, req: func.HttpRequest) -> func.HttpResponse:  # type: ignore
        try:
            paper = self._generate(GenerateRequest.from_http(req))
        except PaperGenerationError as exc:
            return _json_response(exc.status_code, exc.to_payload(), self._allow_origin, exc.headers)
        except Exception as exc:  # noqa: BLE001
            logging.exception("[generate] Error calling generation API: %s", exc)
            error = GenericServerError.from_exception(exc)
            return _json_response(error.status_code, error.to_payload(), self._allow_origin)
        return _json_response(200, {"paper": paper}, self._allow_origin)

    def _generate(self, request: GenerateRequest) -> Any:
        if request.method != "POST":
            raise MethodNotAllowed(request.method)
        if not request.blueprint:
            raise BadRequest('Missing "blueprint" in request body')

        config = self._load_config()

        logging.info("[generate] Requesting paper from model %s", config.model)
        content = request_completion(config, build_messages(request.blueprint))
        paper = parse_paper(content)
        if config.strict_schema:
            validate_paper(paper, content)
        logging.info("[generate] Paper generated")
        return paper

    def _load_config(self) -> GenerateConfig:
        try:
            return self._config_loader()
        except PaperGenerationError as exc:
            logging.error("[generate] %s", exc.message)
            raise


def parse_paper(content: Any) -> Any:
    try:
        return json.loads(content)
    except (TypeError, ValueError) as exc:
        logging.error("[generate] Failed to parse AI JSON response: %s", exc)
        logging.error("[generate] Raw AI response: %s", content)
        raise UpstreamContentError("AI returned invalid JSON.", details=content) from exc


def validate_paper(paper: Any, content: Any) -> None:
    try:
        QuestionPaper.model_validate(paper)
    except ValidationError as exc:
        logging.error("[generate] AI paper failed schema validation: %s", exc)
        raise UpstreamContentError(
            "AI returned a paper that does not match the schema.", details=content
        ) from exc


def handle(req: func.HttpRequest) -> func.HttpResponse:  # type: ignore
    return PaperGenerationHandler().handle(req)
