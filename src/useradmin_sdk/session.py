from __future__ import annotations

from dataclasses import dataclass

from .clients.users import UsersClient
from .config import ClientConfig
from .http_client import HttpClient
from .tracing import TraceContext


@dataclass
class ApiSession:
    config: ClientConfig
    trace: TraceContext | None = None
    http: HttpClient | None = None

    def __post_init__(self) -> None:
        self.trace = self.trace or TraceContext()
        self.http = self.http or HttpClient(config=self.config, trace=self.trace)

    def _http(self) -> HttpClient:
        if self.http is None:
            raise RuntimeError("HTTP client not initialized")
        return self.http

    def users_client(self) -> UsersClient:
        return UsersClient(http=self._http(), resource_path=self.config.users_path)
