from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import BadRequestError
from ..models import CreatedUser, RawUser, UserPayload
from .base import BaseClient


@dataclass
class UsersClient(BaseClient):
    resource_path: str = "/users"

    def _item_path(self, user_id: int) -> str:
        return f"{self.resource_path.rstrip('/')}/{user_id}"

    def list_users(self) -> list[RawUser]:
        data = self._request("GET", self.resource_path, module="users", operation="list")
        if isinstance(data, dict):
            data = data.get("users", data.get("data"))
        if not isinstance(data, list):
            raise _invalid_payload("Expected a list of users", data)
        try:
            return [RawUser.model_validate(item) for item in data]
        except PydanticValidationError as exc:
            raise _invalid_payload("User list contains malformed records", exc.errors()) from exc

    def create_user(self, payload: UserPayload) -> CreatedUser:
        data = self._request(
            "POST",
            self.resource_path,
            json_body=payload.to_request_body(),
            module="users",
            operation="create",
        )
        if not isinstance(data, dict):
            return CreatedUser()
        try:
            return CreatedUser.model_validate(data)
        except PydanticValidationError as exc:
            raise _invalid_payload("Create response is malformed", exc.errors()) from exc

    def update_user(self, user_id: int, payload: UserPayload) -> dict[str, Any]:
        data = self._request(
            "PUT",
            self._item_path(user_id),
            json_body=payload.to_request_body(),
            module="users",
            operation="update",
        )
        return data if isinstance(data, dict) else {}

    def delete_user(self, user_id: int) -> None:
        self._request("DELETE", self._item_path(user_id), module="users", operation="delete")


def _invalid_payload(message: str, details: Any) -> BadRequestError:
    return BadRequestError(
        code="INVALID_PAYLOAD",
        message=message,
        details=details,
        request_id=None,
        status_code=200,
        raw_payload=None,
    )
