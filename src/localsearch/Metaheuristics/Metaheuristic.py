from abc import ABC, abstractmethod
from typing import Callable, Generic, Hashable, Iterable, List, Optional, Tuple, TypeVar
import matplotlib.pyplot as plt

from ..SearchResult import SearchResult

State = TypeVar("State", bound=Hashable)

NeighborFunction = Callable[[State], Iterable[State]]
CostFunction = Callable[[State], float]


class Metaheuristic(ABC, Generic[State]):
    """Base class for local search metaheuristics over caller-defined states."""

    def __init__(
        self,
        neighbors: NeighborFunction,
        cost: CostFunction,
        max_iterations: int = 100,
        stopping_cost: Optional[float] = None,
    ) -> None:
        if not callable(neighbors):
            raise TypeError(f"neighbors must be callable, got {type(neighbors).__name__}")
        if not callable(cost):
            raise TypeError(f"cost must be callable, got {type(cost).__name__}")
        if isinstance(max_iterations, bool) or not isinstance(max_iterations, int):
            raise ValueError(f"max_iterations must be an int, got {max_iterations!r}")
        if max_iterations < 0:
            raise ValueError(f"max_iterations must be non-negative, got {max_iterations}")

        self.neighbors = neighbors
        self.cost = cost
        self.max_iterations = max_iterations
        self.stopping_cost = stopping_cost

        self.best_result: Optional[SearchResult] = None
        self.best_cost_historic: List[float] = []
        self.current_cost_historic: List[float] = []

    def history_costs(self) -> Tuple[List[float], List[float]]:
        """Return (best-so-far, current) cost history of the last run."""
        return list(self.best_cost_historic), list(self.current_cost_historic)

    def _reset_history(self) -> None:
        self.best_result = None
        self.best_cost_historic = []
        self.current_cost_historic = []

    def _record(self, best_cost: float, current_cost: float) -> None:
        self.best_cost_historic.append(best_cost)
        self.current_cost_historic.append(current_cost)

    def _reached_stopping_cost(self, best_cost: float) -> bool:
        return self.stopping_cost is not None and best_cost <= self.stopping_cost

    def plot_cost_history(self) -> None:
        """Plot historic cost curves (best-so-far and current state)."""
        if not self.best_cost_historic:
            return

        best_hist, current_hist = self.history_costs()
        iterations = list(range(len(best_hist)))

        ax: plt.Axes
        fig, ax = plt.subplots(figsize=(10, 4))
        ax.plot(iterations, current_hist, color="tab:orange", alpha=0.7, label="Current")
        ax.plot(iterations, best_hist, color="tab:blue", label="Best so far")
        ax.set_xlabel("Iteration")
        ax.set_ylabel("Cost")
        ax.legend()

        ax.set_title(f"{self.__class__.__name__} - Cost Function History")
        fig.tight_layout()
        plt.show()

    @abstractmethod
    def solve(self, initial_state: State) -> SearchResult:
        """Run the metaheuristic and return the best state found."""
        raise NotImplementedError
