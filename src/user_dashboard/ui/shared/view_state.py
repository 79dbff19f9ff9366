from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

LOADING_MESSAGE = "Loading users..."
EMPTY_MESSAGE = "No users found."


class TableStatus(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    READY = "ready"


@dataclass(frozen=True)
class TableViewState:
    status: TableStatus
    message: str
    error: str | None = None

    def render(self) -> dict[str, Any]:
        return {"status": self.status.value, "message": self.message, "error": self.error}


def resolve_table_state(*, loading: bool, has_rows: bool, error: str | None = None) -> TableViewState:
    if loading:
        return TableViewState(status=TableStatus.LOADING, message=LOADING_MESSAGE, error=error)
    if not has_rows:
        return TableViewState(status=TableStatus.EMPTY, message=EMPTY_MESSAGE, error=error)
    return TableViewState(status=TableStatus.READY, message="Ready", error=error)
