"""API Gateway proxy event parsing and response building."""

import base64
import json
from typing import Any

from pydantic import BaseModel, ConfigDict

from registry.errors import ErrorCode, ValidationError

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


class HttpRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: str
    path: str
    headers: dict[str, str] = {}
    body: str | None = None
    is_base64_encoded: bool = False

    @classmethod
    def from_event(cls, event: dict[str, Any]) -> "HttpRequest":
        """Build a request from a REST (payload v1) or HTTP API (payload v2) proxy event."""
        http_context = (event.get("requestContext") or {}).get("http") or {}
        method = event.get("httpMethod") or http_context.get("method") or ""
        path = event.get("path") or event.get("rawPath") or http_context.get("path") or "/"
        headers = {name.lower(): value for name, value in (event.get("headers") or {}).items() if value is not None}
        return cls(
            method=method.upper(),
            path=path,
            headers=headers,
            body=event.get("body"),
            is_base64_encoded=bool(event.get("isBase64Encoded")),
        )

    def header(self, name: str) -> str | None:
        return self.headers.get(name.lower())

    def json_body(self) -> Any:
        """Decode the body as JSON, raising ValidationError(INVALID_PAYLOAD) on any failure."""
        try:
            raw: str | bytes = self.body or ""
            if self.is_base64_encoded:
                raw = base64.b64decode(raw, validate=True)
            return json.loads(raw, parse_constant=_reject_constant)
        except ValueError as e:
            # JSONDecodeError, UnicodeDecodeError and binascii.Error are all ValueErrors
            raise ValidationError(code=ErrorCode.INVALID_PAYLOAD) from e


def json_response(data: Any, status_code: int = 200) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {
            **CORS_HEADERS,
            "Content-Type": "application/json",
            "Cache-Control": "no-store",
        },
        "body": json.dumps(data, indent=2, ensure_ascii=False),
    }


def text_response(body: str, status_code: int = 200) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {**CORS_HEADERS, "Content-Type": "text/plain; charset=utf-8"},
        "body": body,
    }


def preflight_response() -> dict[str, Any]:
    return {"statusCode": 200, "headers": dict(CORS_HEADERS), "body": ""}
