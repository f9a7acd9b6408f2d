from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Termination(Enum):
    """Why a search run stopped."""

    MAX_ITERATIONS = "max_iterations"
    STOPPING_COST = "stopping_cost"
    DEAD_END = "dead_end"


@dataclass
class SearchResult:
    """Outcome of one local search run.

    Attributes:
        state: Best state observed during the run (the initial state included).
        cost: Cost of `state`; never above the initial cost or the cost of any
            visited state.
        iterations: Number of state transitions performed.
        termination: Condition that ended the run.
    """

    state: Any
    cost: float
    iterations: int = 0
    termination: Termination = Termination.MAX_ITERATIONS
