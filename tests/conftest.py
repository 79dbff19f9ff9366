from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest

BASE_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = BASE_DIR / "src"

sys.path.insert(0, str(SRC_DIR))

from useradmin_sdk.exceptions import ServerError  # noqa: E402
from useradmin_sdk.models import CreatedUser, RawUser, UserPayload  # noqa: E402

from user_dashboard.app.dashboard_controller import DashboardController  # noqa: E402
from user_dashboard.app.state import DashboardState  # noqa: E402
from user_dashboard.services.users_service import UsersService  # noqa: E402


def server_error(operation: str) -> ServerError:
    return ServerError(
        code="INTERNAL_ERROR",
        message=f"{operation} failed",
        details=None,
        request_id="req-500",
        status_code=500,
    )


@dataclass
class FakeUsersClient:
    users: list[dict[str, Any]] = field(default_factory=list)
    created_id: int | None = 101
    failing: set[str] = field(default_factory=set)
    calls: list[tuple[str, Any]] = field(default_factory=list)
    http: Any = field(default_factory=lambda: SimpleNamespace(last_operation=None))

    def _check(self, operation: str) -> None:
        if operation in self.failing:
            raise server_error(operation)

    def list_users(self) -> list[RawUser]:
        self.calls.append(("list", None))
        self._check("list")
        return [RawUser.model_validate(item) for item in self.users]

    def create_user(self, payload: UserPayload) -> CreatedUser:
        self.calls.append(("create", payload.to_request_body()))
        self._check("create")
        return CreatedUser(id=self.created_id, **payload.model_dump())

    def update_user(self, user_id: int, payload: UserPayload) -> dict[str, Any]:
        self.calls.append(("update", (user_id, payload.to_request_body())))
        self._check("update")
        return {"id": user_id, **payload.to_request_body()}

    def delete_user(self, user_id: int) -> None:
        self.calls.append(("delete", user_id))
        self._check("delete")


def sample_users(count: int = 10) -> list[dict[str, Any]]:
    first_names = ["Leanne", "Ervin", "Clementine", "Patricia", "Chelsey", "Dennis", "Kurtis", "Nicholas", "Glenna", "Clementina"]
    return [
        {
            "id": index + 1,
            "name": f"{first_names[index % len(first_names)]} Person{index + 1}",
            "email": f"user{index + 1}@example.com",
        }
        for index in range(count)
    ]


@pytest.fixture()
def fake_client() -> FakeUsersClient:
    return FakeUsersClient(users=sample_users())


@pytest.fixture()
def service(fake_client: FakeUsersClient) -> UsersService:
    return UsersService(fake_client)  # type: ignore[arg-type]


@pytest.fixture()
def state() -> DashboardState:
    return DashboardState()


@pytest.fixture()
def controller(state: DashboardState, service: UsersService) -> DashboardController:
    return DashboardController(state, service, confirm=lambda _message: True)
