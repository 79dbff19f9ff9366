"""Client-side user management dashboard built on ``useradmin_sdk``."""

__version__ = "0.1.0"
