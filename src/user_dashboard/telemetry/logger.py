from __future__ import annotations

import json
import logging
from pathlib import Path

from .events import TelemetryEvent

logger = logging.getLogger(__name__)

DEFAULT_TELEMETRY_DIR = Path("artifacts") / "telemetry"


class TelemetryLogger:
    """Appends events as JSON lines; a disabled logger drops them."""

    def __init__(self, *, app_name: str, enabled: bool, log_file: str | Path | None = None) -> None:
        self.app_name = app_name
        self.enabled = enabled
        self.log_file = Path(log_file) if log_file else DEFAULT_TELEMETRY_DIR / f"{app_name}.jsonl"

    def emit(self, event: TelemetryEvent) -> bool:
        if not self.enabled:
            return False
        record = {**event.to_dict(), "app_name": self.app_name}
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        with self.log_file.open("a", encoding="utf-8") as fp:
            fp.write(json.dumps(record, sort_keys=True) + "\n")
        logger.debug("telemetry_event_written", extra={"event": event.name, "path": str(self.log_file)})
        return True
