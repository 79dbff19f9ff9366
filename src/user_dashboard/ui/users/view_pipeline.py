"""Derivation of the visible user table from the canonical collection.

Stages run in a fixed order: search, attribute filters, sort, pagination.
Each stage only narrows or reorders the previous one and nothing here mutates
its inputs, so the same inputs always produce the same view.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ...app.records import USER_FIELDS, UserRecord
from ...app.state import FilterState, PageState, SortDirection, SortState


@dataclass(frozen=True)
class DerivedView:
    rows: list[UserRecord]
    page_count: int
    total: int
    current_page: int
    page_size: int


def matches_search(record: UserRecord, search: str) -> bool:
    probe = search.lower()
    return any(probe in record.value_of(key).lower() for key in USER_FIELDS)


def apply_search(records: Iterable[UserRecord], search: str) -> list[UserRecord]:
    if not search:
        return list(records)
    return [record for record in records if matches_search(record, search)]


def apply_filters(records: Iterable[UserRecord], filters: FilterState) -> list[UserRecord]:
    filtered = list(records)
    for key, value in filters.active():
        probe = value.lower()
        filtered = [record for record in filtered if probe in record.value_of(key).lower()]
    return filtered


def stable_sort(records: Sequence[UserRecord], sort: SortState) -> list[UserRecord]:
    if sort.key is None:
        return list(records)
    key = sort.key
    # sorted() keeps equal keys in input order, also with reverse=True
    return sorted(
        records,
        key=lambda record: record.value_of(key).lower(),
        reverse=sort.direction is SortDirection.DESC,
    )


def page_count_for(total: int, page_size: int) -> int:
    return max(1, -(-total // page_size))


def filter_and_sort(
    collection: Iterable[UserRecord],
    search: str,
    filters: FilterState,
    sort: SortState,
) -> list[UserRecord]:
    rows = apply_search(collection, search)
    rows = apply_filters(rows, filters)
    return stable_sort(rows, sort)


def derive_view(
    collection: Iterable[UserRecord],
    search: str,
    filters: FilterState,
    sort: SortState,
    page: PageState,
) -> DerivedView:
    rows = filter_and_sort(collection, search, filters, sort)
    total = len(rows)
    start = max(page.current_page - 1, 0) * page.page_size
    return DerivedView(
        rows=rows[start : start + page.page_size],
        page_count=page_count_for(total, page.page_size),
        total=total,
        current_page=page.current_page,
        page_size=page.page_size,
    )
