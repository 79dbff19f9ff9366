from __future__ import annotations

from typing import Callable

DELETE_CONFIRMATION_MESSAGE = "Are you sure you want to delete this user?"

ConfirmPrompt = Callable[[str], bool]


def deny_by_default(_message: str) -> bool:
    return False


def confirm_delete(prompt: ConfirmPrompt) -> bool:
    return bool(prompt(DELETE_CONFIRMATION_MESSAGE))
