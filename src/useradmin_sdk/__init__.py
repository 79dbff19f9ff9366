from .clients.users import UsersClient
from .config import ClientConfig, ConfigError, load_config
from .exceptions import (
    ApiError,
    BadRequestError,
    ConflictError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
)
from .http_client import HttpClient
from .models import CreatedUser, RawUser, UserPayload
from .session import ApiSession
from .tracing import TraceContext

__all__ = [
    "ApiError",
    "ApiSession",
    "BadRequestError",
    "ClientConfig",
    "ConfigError",
    "ConflictError",
    "CreatedUser",
    "HttpClient",
    "NotFoundError",
    "RateLimitError",
    "RawUser",
    "ServerError",
    "TraceContext",
    "TransportError",
    "UserPayload",
    "UsersClient",
    "load_config",
]
