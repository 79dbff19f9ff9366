from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

PAGE_SIZE_OPTIONS = (10, 25, 50, 100)


class DashboardConfigError(ValueError):
    """Raised when dashboard configuration values are invalid."""


@dataclass(frozen=True)
class DashboardConfig:
    default_department: str = "General"
    default_page_size: int = 10
    telemetry_enabled: bool = False


def load_dashboard_config(env_file: str | None = None) -> DashboardConfig:
    load_dotenv(env_file)

    default_department = (os.getenv("USERADMIN_DEFAULT_DEPARTMENT") or "General").strip()
    if not default_department:
        raise DashboardConfigError("USERADMIN_DEFAULT_DEPARTMENT cannot be blank.")

    raw_page_size = os.getenv("USERADMIN_PAGE_SIZE", "10")
    try:
        page_size = int(raw_page_size)
    except ValueError as exc:
        raise DashboardConfigError(f"Invalid USERADMIN_PAGE_SIZE: expected an integer, got {raw_page_size!r}") from exc
    if page_size not in PAGE_SIZE_OPTIONS:
        raise DashboardConfigError(
            f"Invalid USERADMIN_PAGE_SIZE: expected one of {PAGE_SIZE_OPTIONS}, got {page_size}"
        )

    telemetry = os.getenv("USERADMIN_TELEMETRY_ENABLED", "0").strip().lower()
    return DashboardConfig(
        default_department=default_department,
        default_page_size=page_size,
        telemetry_enabled=telemetry in {"1", "true", "yes", "on"},
    )
