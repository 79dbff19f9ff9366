from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from useradmin_sdk.models import UserPayload

from ..config import PAGE_SIZE_OPTIONS
from .collection_store import CollectionStore
from .records import USER_FIELDS, UserField, UserRecord

MAX_OPERATIONS = 30


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass
class SortState:
    key: UserField | None = None
    direction: SortDirection = SortDirection.ASC

    def toggle(self, key: UserField) -> None:
        if self.key == key and self.direction is SortDirection.ASC:
            self.direction = SortDirection.DESC
        else:
            self.direction = SortDirection.ASC
        self.key = key


@dataclass
class FilterState:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    department: str = ""

    def get(self, key: UserField) -> str:
        return getattr(self, key.value)

    def set(self, key: UserField, value: str) -> None:
        setattr(self, key.value, value)

    def active(self) -> list[tuple[UserField, str]]:
        return [(key, self.get(key)) for key in USER_FIELDS if self.get(key)]

    def clear(self) -> None:
        for key in USER_FIELDS:
            self.set(key, "")


@dataclass
class PageState:
    page_size: int = PAGE_SIZE_OPTIONS[0]
    current_page: int = 1


@dataclass
class FormDraft:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    department: str = ""
    editing_id: int | None = None

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def values(self) -> dict[str, str]:
        return {key.value: getattr(self, key.value) for key in USER_FIELDS}

    def set(self, key: UserField, value: str) -> None:
        setattr(self, key.value, value)

    def load(self, record: UserRecord) -> None:
        for key in USER_FIELDS:
            self.set(key, record.value_of(key))
        self.editing_id = record.id

    def reset(self) -> None:
        for key in USER_FIELDS:
            self.set(key, "")
        self.editing_id = None

    def to_payload(self) -> UserPayload:
        return UserPayload(**self.values())


@dataclass
class StatusMessage:
    text: str | None = None

    def show(self, text: str) -> None:
        self.text = text

    def clear(self) -> None:
        self.text = None


@dataclass(frozen=True)
class OperationRecord:
    action: str
    target: int
    at: datetime
    request_id: str | None = None


@dataclass
class DashboardState:
    collection: CollectionStore = field(default_factory=CollectionStore)
    search_text: str = ""
    filters: FilterState = field(default_factory=FilterState)
    sort: SortState = field(default_factory=SortState)
    page: PageState = field(default_factory=PageState)
    draft: FormDraft = field(default_factory=FormDraft)
    status: StatusMessage = field(default_factory=StatusMessage)
    loading: bool = False
    pending_mutations: set[str] = field(default_factory=set)
    operations: list[OperationRecord] = field(default_factory=list)

    def add_operation(self, operation: OperationRecord) -> None:
        self.operations.insert(0, operation)
        del self.operations[MAX_OPERATIONS:]
