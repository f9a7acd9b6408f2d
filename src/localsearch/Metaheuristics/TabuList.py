from __future__ import annotations

from collections import OrderedDict
from typing import Generic, Hashable, Iterator, TypeVar

State = TypeVar("State", bound=Hashable)


class TabuList(Generic[State]):
    """Bounded FIFO set of recently visited states.

    Insertion order decides eviction order. Adding a state that is already
    tabu moves it to the newest position, so the `capacity` most recently
    added distinct states are always the ones held.
    """

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ValueError(f"capacity must be an int, got {capacity!r}")
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._states: OrderedDict[State, None] = OrderedDict()

    def add(self, state: State) -> None:
        if state in self._states:
            self._states.move_to_end(state)
            return
        self._states[state] = None
        if len(self._states) > self.capacity:
            self._states.popitem(last=False)

    def clear(self) -> None:
        self._states.clear()

    def __contains__(self, state: object) -> bool:
        return state in self._states

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[State]:
        return iter(self._states)

    def __repr__(self) -> str:
        return f"TabuList(capacity={self.capacity}, states={list(self._states)!r})"
