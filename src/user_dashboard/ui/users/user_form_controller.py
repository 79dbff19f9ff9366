from __future__ import annotations

import logging
from datetime import datetime, timezone

from useradmin_sdk.exceptions import ApiError

from ...app.mutation_guard import mutation_key, single_flight
from ...app.records import UserField, UserRecord
from ...app.state import DashboardState, OperationRecord
from ...errors import RecordNotFoundError, SaveError, ValidationError
from ...services.users_service import UsersService
from ...telemetry.events import mutation_event
from ..shared.validators import validate_draft

logger = logging.getLogger(__name__)


class UserFormController:
    """Add/edit form over ``state.draft``.

    ``draft.editing_id`` selects the mode: ``None`` creates, an id updates that
    record. The draft is reset after a successful submit and on cancel.
    """

    def __init__(self, state: DashboardState, service: UsersService) -> None:
        self.state = state
        self.service = service

    @property
    def title(self) -> str:
        return "Edit User" if self.state.draft.is_editing else "Add User"

    @property
    def submit_label(self) -> str:
        return "Update" if self.state.draft.is_editing else "Add"

    @property
    def show_cancel(self) -> bool:
        return self.state.draft.is_editing

    def update_field(self, key: UserField, value: str) -> None:
        self.state.draft.set(key, value)

    def start_edit(self, user_id: int) -> UserRecord:
        record = self.state.collection.get(user_id)
        if record is None:
            raise RecordNotFoundError()
        self.state.draft.load(record)
        return record

    def cancel(self) -> None:
        self.state.draft.reset()

    def submit(self) -> UserRecord:
        draft = self.state.draft
        result = validate_draft(draft.values())
        if not result.ok:
            raise ValidationError(result.failure)
        self.state.status.clear()

        with single_flight(self.state, mutation_key(draft.editing_id)):
            if draft.editing_id is None:
                record = self._create()
            else:
                record = self._update(draft.editing_id)
        draft.reset()
        return record

    def _create(self) -> UserRecord:
        values = self.state.draft.values()
        try:
            created = self.service.create_user(self.state.draft.to_payload())
        except ApiError as exc:
            raise SaveError() from exc
        record = self.state.collection.append(values, created.id)
        self._record("create", record.id)
        return record

    def _update(self, user_id: int) -> UserRecord:
        values = self.state.draft.values()
        try:
            self.service.update_user(user_id, self.state.draft.to_payload())
        except ApiError as exc:
            raise SaveError() from exc
        if not self.state.collection.update_in_place(user_id, values):
            logger.warning("user_update_target_missing", extra={"user_id": user_id})
        self._record("update", user_id)
        return self.state.collection.get(user_id) or UserRecord(id=user_id, **values)

    def _record(self, action: str, user_id: int) -> None:
        request_id = self.service.last_request_id
        self.state.add_operation(
            OperationRecord(action=f"user.{action}", target=user_id, at=datetime.now(timezone.utc), request_id=request_id)
        )
        self.service.record(mutation_event(action, user_id, request_id=request_id))
