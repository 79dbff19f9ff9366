from __future__ import annotations

from typing import Mapping

from .exceptions import (
    ApiError,
    BadRequestError,
    ConflictError,
    NotFoundError,
    RateLimitError,
    ServerError,
)


def map_error(status_code: int, payload: Mapping[str, object] | None, request_id: str | None) -> ApiError:
    payload = payload or {}
    code = str(payload.get("code") or "HTTP_ERROR")
    message = str(payload.get("message") or "Request failed")
    details = payload.get("details")
    payload_request_id = payload.get("request_id")
    resolved_request_id = str(payload_request_id) if payload_request_id is not None else request_id
    mapped: type[ApiError]
    if status_code in {400, 422}:
        mapped = BadRequestError
    elif status_code == 404:
        mapped = NotFoundError
    elif status_code == 409:
        mapped = ConflictError
    elif status_code == 429:
        mapped = RateLimitError
    elif status_code >= 500:
        mapped = ServerError
    else:
        mapped = ApiError
    return mapped(
        code=code,
        message=message,
        details=details,
        request_id=resolved_request_id,
        status_code=status_code,
        raw_payload=dict(payload),
    )
