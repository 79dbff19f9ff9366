"""Dashboard telemetry events.

Events describe what happened to the collection and which remote calls were
made. They identify users by id only; personal fields are rejected.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any

LOAD = "load"
MUTATION = "mutation"
API_CALL_RESULT = "api_call_result"
TELEMETRY_CATEGORIES = (LOAD, MUTATION, API_CALL_RESULT)

_PERSONAL_KEYS = frozenset(
    {"email", "name", "first_name", "last_name", "firstname", "lastname", "full_name", "department"}
)


@dataclass(frozen=True)
class TelemetryEvent:
    category: str
    name: str
    action: str
    timestamp_utc: str
    success: bool = True
    request_id: str | None = None
    duration_ms: int | None = None
    error_code: str | None = None
    context: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value is not None}


def build_event(
    category: str,
    action: str,
    *,
    success: bool = True,
    request_id: str | None = None,
    duration_ms: int | None = None,
    error_code: str | None = None,
    context: dict[str, Any] | None = None,
    now: datetime | None = None,
) -> TelemetryEvent:
    if category not in TELEMETRY_CATEGORIES:
        raise ValueError(f"Unsupported telemetry category: {category}")
    personal = sorted(key for key in context or {} if key.lower() in _PERSONAL_KEYS)
    if personal:
        raise ValueError(f"Personal fields are not allowed in telemetry context: {personal}")
    return TelemetryEvent(
        category=category,
        name=f"users_{action}_{category}",
        action=action,
        timestamp_utc=(now or datetime.now(timezone.utc)).isoformat(),
        success=success,
        request_id=request_id,
        duration_ms=duration_ms,
        error_code=error_code,
        context=context,
    )


def api_call_event(
    action: str,
    *,
    success: bool,
    duration_ms: int,
    request_id: str | None,
    error_code: str | None = None,
    user_id: int | None = None,
) -> TelemetryEvent:
    return build_event(
        API_CALL_RESULT,
        action,
        success=success,
        request_id=request_id,
        duration_ms=duration_ms,
        error_code=error_code,
        context={"user_id": user_id} if user_id is not None else None,
    )


def load_event(*, count: int | None = None, error_code: str | None = None) -> TelemetryEvent:
    if error_code is not None:
        return build_event(LOAD, "list", success=False, error_code=error_code)
    return build_event(LOAD, "list", context={"count": count})


def mutation_event(action: str, user_id: int, *, request_id: str | None = None) -> TelemetryEvent:
    return build_event(MUTATION, action, request_id=request_id, context={"user_id": user_id})
