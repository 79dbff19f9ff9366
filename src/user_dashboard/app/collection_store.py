from __future__ import annotations

import logging
from typing import Iterable, Iterator, Mapping

from useradmin_sdk.models import RawUser

from .records import USER_FIELDS, UserRecord

logger = logging.getLogger(__name__)

DEFAULT_DEPARTMENT = "General"


def split_name(name: str) -> tuple[str, str]:
    first, _, rest = name.partition(" ")
    return first, rest


class CollectionStore:
    """Canonical, ordered user collection.

    Only the controllers mutate it, and only after the matching remote call
    succeeded. Ids are unique within the collection.
    """

    def __init__(self, default_department: str = DEFAULT_DEPARTMENT) -> None:
        self.default_department = default_department
        self._records: list[UserRecord] = []
        self._last_issued_id = 0

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[UserRecord]:
        return iter(list(self._records))

    @property
    def records(self) -> tuple[UserRecord, ...]:
        return tuple(self._records)

    def get(self, user_id: int) -> UserRecord | None:
        return next((record for record in self._records if record.id == user_id), None)

    def contains(self, user_id: int) -> bool:
        return self.get(user_id) is not None

    def load(self, raw_users: Iterable[RawUser]) -> None:
        records: list[UserRecord] = []
        seen: set[int] = set()
        for raw in raw_users:
            if raw.id in seen:
                logger.warning("collection_load_duplicate_id", extra={"user_id": raw.id})
                continue
            seen.add(raw.id)
            records.append(self._annotate(raw))
        self._records = records
        self._last_issued_id = 0

    def append(self, values: Mapping[str, str], assigned_id: int | None = None) -> UserRecord:
        user_id = assigned_id
        if user_id is None or self.contains(user_id):
            local_id = self.next_local_id()
            logger.warning(
                "collection_append_local_id",
                extra={"assigned_id": assigned_id, "local_id": local_id},
            )
            user_id = local_id
        record = UserRecord(id=user_id, **{field.value: values.get(field.value, "") for field in USER_FIELDS})
        self._records.append(record)
        return record

    def next_local_id(self) -> int:
        highest = max((record.id for record in self._records), default=0)
        self._last_issued_id = max(highest, self._last_issued_id) + 1
        return self._last_issued_id

    def update_in_place(self, user_id: int, patch: Mapping[str, str]) -> bool:
        for index, record in enumerate(self._records):
            if record.id == user_id:
                self._records[index] = record.merged(patch)
                return True
        return False

    def remove_by_id(self, user_id: int) -> bool:
        remaining = [record for record in self._records if record.id != user_id]
        removed = len(remaining) != len(self._records)
        self._records = remaining
        return removed

    def _annotate(self, raw: RawUser) -> UserRecord:
        first_name, last_name = split_name(raw.name)
        return UserRecord(
            id=raw.id,
            first_name=raw.first_name if raw.first_name is not None else first_name,
            last_name=raw.last_name if raw.last_name is not None else last_name,
            email=raw.email,
            department=raw.department or self.default_department,
        )
