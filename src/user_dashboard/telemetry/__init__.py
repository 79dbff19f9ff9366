from .events import TELEMETRY_CATEGORIES, TelemetryEvent, api_call_event, build_event, load_event, mutation_event
from .logger import TelemetryLogger

__all__ = [
    "TELEMETRY_CATEGORIES",
    "TelemetryEvent",
    "TelemetryLogger",
    "api_call_event",
    "build_event",
    "load_event",
    "mutation_event",
]
