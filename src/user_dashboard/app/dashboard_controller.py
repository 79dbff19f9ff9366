from __future__ import annotations

import logging
from datetime import datetime, timezone

from useradmin_sdk.exceptions import ApiError

from ..config import PAGE_SIZE_OPTIONS
from ..errors import DashboardError, DeleteError, LoadError
from ..services.users_service import UsersService
from ..telemetry.events import load_event, mutation_event
from ..ui.users.user_actions_dialog import ConfirmPrompt, confirm_delete, deny_by_default
from ..ui.users.user_form_controller import UserFormController
from ..ui.users.users_list_view import UsersListViewModel
from ..ui.users.view_pipeline import DerivedView, page_count_for
from .mutation_guard import mutation_key, single_flight
from .records import UserField, UserRecord
from .state import DashboardState, OperationRecord

logger = logging.getLogger(__name__)


class DashboardController:
    """Wires operator actions to the state aggregate.

    Every action applies one transition to ``state``. Changes to the
    collection, search text, filters or sort send the table back to page 1.
    Failures end up as the single status message and never propagate.
    """

    def __init__(
        self,
        state: DashboardState,
        service: UsersService,
        *,
        confirm: ConfirmPrompt = deny_by_default,
    ) -> None:
        self.state = state
        self.service = service
        self.confirm = confirm
        self.form = UserFormController(state, service)
        self.list_view = UsersListViewModel(state)

    def view(self) -> DerivedView:
        return self.list_view.view()

    def load_users(self) -> bool:
        self.state.loading = True
        self.state.status.clear()
        try:
            raw_users = self.service.list_users()
        except ApiError as exc:
            self.service.record(load_event(error_code=exc.code))
            self._fail(LoadError(), exc)
            return False
        finally:
            self.state.loading = False
        self.state.collection.load(raw_users)
        self.service.record(load_event(count=len(self.state.collection)))
        self._reset_page()
        return True

    def set_search(self, text: str) -> None:
        if text == self.state.search_text:
            return
        self.state.search_text = text
        self._reset_page()

    def set_filter(self, key: UserField, value: str) -> None:
        if self.state.filters.get(key) == value:
            return
        self.state.filters.set(key, value)
        self._reset_page()

    def clear_filters(self) -> None:
        if not self.state.filters.active():
            return
        self.state.filters.clear()
        self._reset_page()

    def toggle_sort(self, key: UserField) -> None:
        self.state.sort.toggle(key)
        self._reset_page()

    def set_page_size(self, page_size: int) -> None:
        if page_size not in PAGE_SIZE_OPTIONS:
            raise ValueError(f"Unsupported page size {page_size}; expected one of {PAGE_SIZE_OPTIONS}")
        self.state.page.page_size = page_size
        page_count = page_count_for(self.view().total, page_size)
        self.state.page.current_page = min(max(self.state.page.current_page, 1), page_count)

    def next_page(self) -> None:
        page_count = self.view().page_count
        self.state.page.current_page = min(self.state.page.current_page + 1, page_count)

    def prev_page(self) -> None:
        self.state.page.current_page = max(self.state.page.current_page - 1, 1)

    def update_draft(self, key: UserField, value: str) -> None:
        self.form.update_field(key, value)

    def start_edit(self, user_id: int) -> bool:
        try:
            self.form.start_edit(user_id)
        except DashboardError as err:
            self._fail(err)
            return False
        self.state.status.clear()
        return True

    def cancel_edit(self) -> None:
        self.form.cancel()
        self.state.status.clear()

    def submit(self) -> UserRecord | None:
        try:
            record = self.form.submit()
        except DashboardError as err:
            self._fail(err, err.__cause__)
            return None
        self.state.status.clear()
        self._reset_page()
        return record

    def delete_user(self, user_id: int) -> bool:
        if not confirm_delete(self.confirm):
            return False
        try:
            with single_flight(self.state, mutation_key(user_id)):
                try:
                    self.service.delete_user(user_id)
                except ApiError as exc:
                    raise DeleteError() from exc
        except DashboardError as err:
            self._fail(err, err.__cause__)
            return False
        self.state.collection.remove_by_id(user_id)
        request_id = self.service.last_request_id
        self.state.add_operation(
            OperationRecord(action="user.delete", target=user_id, at=datetime.now(timezone.utc), request_id=request_id)
        )
        self.service.record(mutation_event("delete", user_id, request_id=request_id))
        self.state.status.clear()
        self._reset_page()
        return True

    def _reset_page(self) -> None:
        self.state.page.current_page = 1

    def _fail(self, error: DashboardError, cause: BaseException | None = None) -> None:
        if cause is not None and error.__cause__ is None:
            error.__cause__ = cause
        logger.warning(
            "dashboard_action_failed",
            extra={
                "error": type(error).__name__,
                "code": getattr(cause, "code", None),
                "status_code": getattr(cause, "status_code", None),
                "request_id": getattr(cause, "request_id", None),
            },
        )
        self.state.status.show(error.message)
