from __future__ import annotations

import json
import time
from dataclasses import dataclass
from typing import Any
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter

from .config import ClientConfig
from .error_mapper import map_error
from .exceptions import TransportError
from .tracing import REQUEST_ID_HEADER, TraceContext


@dataclass
class LastOperation:
    module: str
    operation: str
    duration_ms: int
    result: str
    request_id: str | None


@dataclass
class HttpClient:
    """Sends one request per call; failures are raised, never retried."""

    config: ClientConfig
    trace: TraceContext | None = None
    session: requests.Session | None = None
    last_operation: LastOperation | None = None

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = requests.Session()
            adapter = HTTPAdapter(
                pool_connections=self.config.max_connections,
                pool_maxsize=self.config.max_connections,
                max_retries=0,
            )
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)

    def _build_url(self, path: str) -> str:
        base = self.config.api_base_url.rstrip("/") + "/"
        return urljoin(base, path.lstrip("/"))

    def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        module: str = "unknown",
        operation: str = "unknown",
    ) -> dict[str, Any] | list[Any] | None:
        if self.session is None:
            raise RuntimeError("HTTP session not initialized")
        request_headers = {"Accept": "application/json"}
        if headers:
            request_headers.update(headers)
        trace_context = self.trace or TraceContext()
        request_headers[REQUEST_ID_HEADER] = trace_context.ensure()

        normalized_method = method.upper()
        url = self._build_url(path)
        started = time.monotonic()
        try:
            response = self.session.request(
                method=normalized_method,
                url=url,
                headers=request_headers,
                json=json_body,
                params=params,
                timeout=(self.config.connect_timeout_seconds, self.config.read_timeout_seconds),
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as exc:
            self._record_operation(module, operation, started, "error", trace_context.request_id)
            raise TransportError(
                code="TRANSPORT_ERROR",
                message=str(exc),
                details={"type": type(exc).__name__},
                request_id=trace_context.request_id,
                status_code=0,
                raw_payload=None,
            ) from exc

        trace_context.update_from_headers(response.headers)
        if response.ok:
            try:
                data = response.json() if response.content else None
            except ValueError as exc:
                self._record_operation(module, operation, started, "error", trace_context.request_id)
                raise map_error(
                    400,
                    {"code": "INVALID_PAYLOAD", "message": "Response body is not valid JSON"},
                    trace_context.request_id,
                ) from exc
            self._record_operation(module, operation, started, "success", trace_context.request_id)
            return data

        payload: Any = None
        try:
            payload = response.json()
        except json.JSONDecodeError:
            payload = {"message": response.text}
        self._record_operation(module, operation, started, "error", trace_context.request_id)
        raise map_error(
            response.status_code,
            payload if isinstance(payload, dict) else {"details": payload},
            trace_context.request_id,
        )

    def _record_operation(self, module: str, operation: str, started: float, result: str, request_id: str | None) -> None:
        self.last_operation = LastOperation(
            module=module,
            operation=operation,
            duration_ms=int((time.monotonic() - started) * 1000),
            result=result,
            request_id=request_id,
        )
