from __future__ import annotations

from conftest import sample_users

from user_dashboard.app.collection_store import CollectionStore
from user_dashboard.app.records import UserField
from user_dashboard.app.state import DashboardState, PageState, SortDirection
from user_dashboard.ui.shared.view_state import TableStatus, resolve_table_state
from user_dashboard.ui.users.users_list_view import UsersListViewModel
from useradmin_sdk.models import RawUser


def _loaded_state(count: int = 10, page_size: int = 10) -> DashboardState:
    state = DashboardState(page=PageState(page_size=page_size))
    state.collection.load(RawUser.model_validate(item) for item in sample_users(count))
    return state


def test_columns_mark_active_sort() -> None:
    state = _loaded_state()
    state.sort.toggle(UserField.EMAIL)
    state.sort.toggle(UserField.EMAIL)

    columns = UsersListViewModel(state).columns()

    assert [column.label for column in columns] == ["ID", "First Name", "Last Name", "Email", "Department", "Actions"]
    assert [column.key for column in columns if column.sortable] == ["first_name", "last_name", "email", "department"]
    email = next(column for column in columns if column.key == "email")
    assert email.sort_direction is SortDirection.DESC
    assert all(column.sort_direction is None for column in columns if column.key != "email")


def test_rows_render_cells_for_current_page() -> None:
    state = _loaded_state(count=12)
    state.page.current_page = 2

    rows = UsersListViewModel(state).rows()

    assert rows == [
        {"id": "11", "first_name": "Leanne", "last_name": "Person11", "email": "user11@example.com", "department": "General"},
        {"id": "12", "first_name": "Ervin", "last_name": "Person12", "email": "user12@example.com", "department": "General"},
    ]


def test_pagination_controls_reflect_position() -> None:
    state = _loaded_state(count=25)
    model = UsersListViewModel(state)

    first = model.pagination()
    assert first.position_label == "Page 1 of 3"
    assert first.can_prev is False
    assert first.can_next is True
    assert first.page_size_options == (
        (10, "10 per page"),
        (25, "25 per page"),
        (50, "50 per page"),
        (100, "100 per page"),
    )

    state.page.current_page = 3
    last = model.pagination()
    assert last.position_label == "Page 3 of 3"
    assert last.can_prev is True
    assert last.can_next is False


def test_empty_collection_shows_single_page() -> None:
    state = DashboardState(collection=CollectionStore())
    model = UsersListViewModel(state)

    assert model.pagination().position_label == "Page 1 of 1"
    assert model.table_state().status is TableStatus.EMPTY
    assert model.table_state().message == "No users found."


def test_table_state_prefers_loading() -> None:
    state = _loaded_state()
    state.loading = True

    assert UsersListViewModel(state).table_state().render() == {
        "status": "loading",
        "message": "Loading users...",
        "error": None,
    }


def test_table_state_carries_status_message() -> None:
    state = _loaded_state()
    state.status.show("Failed to delete user.")

    table = UsersListViewModel(state).table_state()

    assert table.status is TableStatus.READY
    assert table.error == "Failed to delete user."


def test_no_match_is_empty_state() -> None:
    state = _loaded_state()
    state.search_text = "nobody-matches-this"

    assert UsersListViewModel(state).table_state().status is TableStatus.EMPTY


def test_resolve_table_state_ready() -> None:
    table = resolve_table_state(loading=False, has_rows=True)
    assert (table.status, table.message, table.error) == (TableStatus.READY, "Ready", None)
