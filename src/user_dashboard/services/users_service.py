from __future__ import annotations

import logging
from time import perf_counter
from typing import Any

from useradmin_sdk.clients.users import UsersClient
from useradmin_sdk.exceptions import ApiError
from useradmin_sdk.models import CreatedUser, RawUser, UserPayload

from ..telemetry.events import TelemetryEvent, api_call_event
from ..telemetry.logger import TelemetryLogger

logger = logging.getLogger(__name__)


class UsersService:
    """Remote side of the dashboard: one call per intent, errors re-raised."""

    def __init__(self, client: UsersClient, *, telemetry: TelemetryLogger | None = None) -> None:
        self.client = client
        self.telemetry = telemetry or TelemetryLogger(app_name="user_dashboard", enabled=False)

    def list_users(self) -> list[RawUser]:
        users = self._call("list", self.client.list_users)
        logger.info("users_list_success", extra={"count": len(users)})
        return users

    def create_user(self, payload: UserPayload) -> CreatedUser:
        return self._call("create", lambda: self.client.create_user(payload))

    def update_user(self, user_id: int, payload: UserPayload) -> dict[str, Any]:
        return self._call("update", lambda: self.client.update_user(user_id, payload), user_id=user_id)

    def delete_user(self, user_id: int) -> None:
        self._call("delete", lambda: self.client.delete_user(user_id), user_id=user_id)

    @property
    def last_request_id(self) -> str | None:
        last = self.client.http.last_operation
        return last.request_id if last else None

    def _call(self, action: str, func, *, user_id: int | None = None):
        logger.info("users_%s_attempt", action, extra={"user_id": user_id})
        started = perf_counter()
        try:
            result = func()
        except ApiError as exc:
            logger.warning(
                "users_%s_failed",
                action,
                extra={
                    "user_id": user_id,
                    "code": exc.code,
                    "status_code": exc.status_code,
                    "request_id": exc.request_id,
                },
            )
            self._emit(
                action, started, success=False, user_id=user_id, error_code=exc.code, request_id=exc.request_id
            )
            raise
        self._emit(action, started, success=True, user_id=user_id, request_id=self.last_request_id)
        return result

    def record(self, event: TelemetryEvent) -> None:
        self.telemetry.emit(event)

    def _emit(
        self,
        action: str,
        started: float,
        *,
        success: bool,
        user_id: int | None,
        request_id: str | None,
        error_code: str | None = None,
    ) -> None:
        self.record(
            api_call_event(
                action,
                success=success,
                duration_ms=int((perf_counter() - started) * 1000),
                request_id=request_id,
                error_code=error_code,
                user_id=user_id,
            )
        )
