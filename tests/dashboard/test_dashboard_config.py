from __future__ import annotations

import pytest

from user_dashboard.config import DashboardConfigError, load_dashboard_config

ENV_KEYS = ("USERADMIN_DEFAULT_DEPARTMENT", "USERADMIN_PAGE_SIZE", "USERADMIN_TELEMETRY_ENABLED")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    # setenv first so teardown also drops values load_dotenv wrote
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


def test_defaults() -> None:
    config = load_dashboard_config()

    assert config.default_department == "General"
    assert config.default_page_size == 10
    assert config.telemetry_enabled is False


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("USERADMIN_DEFAULT_DEPARTMENT", " Operations ")
    monkeypatch.setenv("USERADMIN_PAGE_SIZE", "50")
    monkeypatch.setenv("USERADMIN_TELEMETRY_ENABLED", "true")

    config = load_dashboard_config()

    assert config.default_department == "Operations"
    assert config.default_page_size == 50
    assert config.telemetry_enabled is True


def test_dotenv_file(tmp_path) -> None:
    env_file = tmp_path / "dashboard.env"
    env_file.write_text("USERADMIN_PAGE_SIZE=25\n", encoding="utf-8")

    config = load_dashboard_config(str(env_file))

    assert config.default_page_size == 25


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("USERADMIN_PAGE_SIZE", "20"),
        ("USERADMIN_PAGE_SIZE", "ten"),
        ("USERADMIN_DEFAULT_DEPARTMENT", "   "),
    ],
)
def test_invalid_values(monkeypatch: pytest.MonkeyPatch, key: str, value: str) -> None:
    monkeypatch.setenv(key, value)

    with pytest.raises(DashboardConfigError, match=key):
        load_dashboard_config()
