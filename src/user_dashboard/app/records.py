from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Mapping


class UserField(str, Enum):
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    EMAIL = "email"
    DEPARTMENT = "department"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    UserField.FIRST_NAME: "First Name",
    UserField.LAST_NAME: "Last Name",
    UserField.EMAIL: "Email",
    UserField.DEPARTMENT: "Department",
}

USER_FIELDS = tuple(UserField)


@dataclass(frozen=True)
class UserRecord:
    id: int
    first_name: str
    last_name: str
    email: str
    department: str

    def value_of(self, field: UserField) -> str:
        return getattr(self, field.value)

    def merged(self, patch: Mapping[str, str]) -> "UserRecord":
        changes = {key: value for key, value in patch.items() if key in _FIELD_NAMES}
        return replace(self, **changes)


_FIELD_NAMES = {field.value for field in UserField}
