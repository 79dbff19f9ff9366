from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Mapping

REQUEST_ID_HEADER = "X-Request-ID"
REQUEST_ID_HEADER_ALIASES = (REQUEST_ID_HEADER, "X-Request-Id", "x-request-id")


@dataclass
class TraceContext:
    request_id: str | None = None

    def ensure(self) -> str:
        if not self.request_id:
            self.request_id = str(uuid.uuid4())
        return self.request_id

    def update_from_headers(self, headers: Mapping[str, str]) -> None:
        for key in REQUEST_ID_HEADER_ALIASES:
            request_id = headers.get(key)
            if request_id:
                self.request_id = request_id
                return
