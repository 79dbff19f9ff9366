from __future__ import annotations

from dataclasses import dataclass

from ...app.records import USER_FIELDS, UserRecord
from ...app.state import DashboardState, SortDirection
from ...config import PAGE_SIZE_OPTIONS
from ..shared.view_state import TableViewState, resolve_table_state
from .view_pipeline import DerivedView, derive_view


@dataclass(frozen=True)
class ColumnDef:
    key: str
    label: str
    sortable: bool = False
    sort_direction: SortDirection | None = None


@dataclass(frozen=True)
class PaginationControls:
    page_size: int
    page_size_options: tuple[tuple[int, str], ...]
    can_prev: bool
    can_next: bool
    position_label: str


def build_columns(state: DashboardState) -> list[ColumnDef]:
    columns = [ColumnDef(key="id", label="ID")]
    for key in USER_FIELDS:
        direction = state.sort.direction if state.sort.key == key else None
        columns.append(ColumnDef(key=key.value, label=key.label, sortable=True, sort_direction=direction))
    columns.append(ColumnDef(key="actions", label="Actions"))
    return columns


def build_pagination(view: DerivedView) -> PaginationControls:
    return PaginationControls(
        page_size=view.page_size,
        page_size_options=tuple((size, f"{size} per page") for size in PAGE_SIZE_OPTIONS),
        can_prev=view.current_page > 1,
        can_next=view.current_page < view.page_count,
        position_label=f"Page {view.current_page} of {view.page_count}",
    )


def row_cells(record: UserRecord) -> dict[str, str]:
    cells = {"id": str(record.id)}
    cells.update({key.value: record.value_of(key) for key in USER_FIELDS})
    return cells


@dataclass
class UsersListViewModel:
    state: DashboardState

    def view(self) -> DerivedView:
        return derive_view(
            self.state.collection.records,
            self.state.search_text,
            self.state.filters,
            self.state.sort,
            self.state.page,
        )

    def table_state(self) -> TableViewState:
        return resolve_table_state(
            loading=self.state.loading,
            has_rows=bool(self.view().rows),
            error=self.state.status.text,
        )

    def columns(self) -> list[ColumnDef]:
        return build_columns(self.state)

    def rows(self) -> list[dict[str, str]]:
        return [row_cells(record) for record in self.view().rows]

    def pagination(self) -> PaginationControls:
        return build_pagination(self.view())

