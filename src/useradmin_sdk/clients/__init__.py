from .base import BaseClient
from .users import UsersClient

__all__ = ["BaseClient", "UsersClient"]
