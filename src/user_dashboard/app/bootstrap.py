from __future__ import annotations

import logging

from useradmin_sdk import ApiSession, ClientConfig, load_config

from ..config import DashboardConfig, load_dashboard_config
from ..services.users_service import UsersService
from ..telemetry.logger import TelemetryLogger
from ..ui.users.user_actions_dialog import ConfirmPrompt, deny_by_default
from .collection_store import CollectionStore
from .dashboard_controller import DashboardController
from .state import DashboardState, PageState

logger = logging.getLogger(__name__)


class DashboardBootstrap:
    def __init__(
        self,
        config: ClientConfig | None = None,
        dashboard_config: DashboardConfig | None = None,
        session: ApiSession | None = None,
        *,
        confirm: ConfirmPrompt = deny_by_default,
    ) -> None:
        self.config = config or load_config()
        self.dashboard_config = dashboard_config or load_dashboard_config()
        self.session = session or ApiSession(self.config)
        self.state = DashboardState(
            collection=CollectionStore(default_department=self.dashboard_config.default_department),
            page=PageState(page_size=self.dashboard_config.default_page_size),
        )
        self.telemetry = TelemetryLogger(app_name="user_dashboard", enabled=self.dashboard_config.telemetry_enabled)
        self.service = UsersService(self.session.users_client(), telemetry=self.telemetry)
        self.controller = DashboardController(self.state, self.service, confirm=confirm)

    def start(self) -> bool:
        logger.info("dashboard_start", extra={"env": self.config.env_name, "base_url": self.config.api_base_url})
        return self.controller.load_users()
