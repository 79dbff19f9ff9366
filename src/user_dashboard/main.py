from __future__ import annotations

import logging

from .app.bootstrap import DashboardBootstrap

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)


def run() -> int:
    bootstrap = DashboardBootstrap()
    if not bootstrap.start():
        print(bootstrap.state.status.text)
        return 1
    view = bootstrap.controller.view()
    print(
        f"User dashboard loaded {view.total} users for env={bootstrap.config.env_name} "
        f"(Page {view.current_page} of {view.page_count})."
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
