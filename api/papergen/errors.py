"""Failures of the generate endpoint.

Each error knows the HTTP status and JSON payload it turns into, so the
handler can convert any of them into a response in one place.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class PaperGenerationError(Exception):
    status_code = 500

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Any = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details

    @property
    def headers(self) -> Dict[str, str]:
        return {}

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class MethodNotAllowed(PaperGenerationError):
    status_code = 405

    def __init__(self, method: str, allowed: str = "POST"):
        super().__init__(f"Method {method} Not Allowed")
        self.allowed = allowed

    @property
    def headers(self) -> Dict[str, str]:
        return {"Allow": self.allowed}


class BadRequest(PaperGenerationError):
    status_code = 400


class ServerConfigurationError(PaperGenerationError):
    """Raised with the internal reason; callers only see `public_message`."""

    def __init__(self, message: str, public_message: str = "Server configuration error: API key not found."):
        super().__init__(message)
        self.public_message = public_message

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.public_message}


class UpstreamHttpError(PaperGenerationError):
    def __init__(self, status_code: int, body: str):
        super().__init__(f"AI API error: {body}", status_code=status_code)
        self.body = body


class UpstreamContentError(PaperGenerationError):
    status_code = 500

    def to_payload(self) -> Dict[str, Any]:
        # raw content is echoed even when the model sent null
        return {"error": self.message, "details": self.details}


class GenericServerError(PaperGenerationError):
    status_code = 500

    @classmethod
    def from_exception(cls, exc: BaseException) -> "GenericServerError":
        return cls(f"Server error: {exc}")
