from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from ..errors import MutationInFlightError
from .state import DashboardState

CREATE_KEY = "user:new"


def mutation_key(user_id: int | None) -> str:
    return CREATE_KEY if user_id is None else f"user:{user_id}"


def begin_mutation(state: DashboardState, key: str) -> bool:
    if key in state.pending_mutations:
        return False
    state.pending_mutations.add(key)
    return True


def end_mutation(state: DashboardState, key: str) -> None:
    state.pending_mutations.discard(key)


@contextmanager
def single_flight(state: DashboardState, key: str) -> Iterator[None]:
    """At most one outstanding mutation per key; a second attempt is rejected."""
    if not begin_mutation(state, key):
        raise MutationInFlightError()
    try:
        yield
    finally:
        end_mutation(state, key)
