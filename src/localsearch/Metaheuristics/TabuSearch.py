"""Tabu Search over caller-defined states.

- A trajectory-based metaheuristic that utilizes 'memory' structures to guide the
    search process.
- Mechanism: It aggressively explores neighborhoods by always moving to the best
    available neighbor, even when that neighbor is worse than the current state. To
    avoid cycling (falling back into the same local optima), it records recently
    visited states in a 'Tabu List' and forbids moving back to them.
- Strength: Escapes local minima where a greedy descent would stop.

Representation:
    - State: any hashable value supplied by the caller.
Neighborhood:
    - Produced by a caller-supplied function; may be a generator.
Tabu list:
    - Bounded FIFO set of the states the search has left; aspiration allows
      a tabu state when it improves the global best.
Fitness:
    - Caller-supplied cost, lower is better.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..SearchResult import SearchResult, Termination
from .Metaheuristic import CostFunction, Metaheuristic, NeighborFunction, State
from .TabuList import TabuList

logger = logging.getLogger(__name__)


class TabuSearch(Metaheuristic[State]):
    """Tabu Search minimizing a cost over states produced by a neighbor function."""

    def __init__(
        self,
        neighbors: NeighborFunction,
        cost: CostFunction,
        max_iterations: int = 100,
        stopping_cost: Optional[float] = None,
        tabu_tenure: int = 20,
    ) -> None:
        """
        Initialize Tabu Search hyperparameters.

        Args:
            neighbors: Function returning the candidate successors of a state.
            cost: Function returning the cost of a state; lower is better.
            max_iterations: Maximum number of state transitions.
            stopping_cost: Optional threshold; the run stops as soon as the best
                cost found is at or below it.
            tabu_tenure: How many recently left states stay forbidden. Larger avoids cycling but can block good moves.
        """
        super().__init__(neighbors, cost, max_iterations, stopping_cost)
        if isinstance(tabu_tenure, bool) or not isinstance(tabu_tenure, int) or tabu_tenure < 1:
            raise ValueError(f"tabu_tenure must be a positive int, got {tabu_tenure!r}")
        self.tabu_tenure = tabu_tenure

    def solve(self, initial_state: State) -> SearchResult:
        """Run Tabu Search and return the best state found.

        Args:
            initial_state: First current state and first incumbent best.
        """
        self._reset_history()
        tabu: TabuList[State] = TabuList(self.tabu_tenure)

        current = initial_state
        current_cost = self.cost(current)
        best = SearchResult(state=current, cost=current_cost)
        self._record(best.cost, current_cost)
        logger.info("Starting tabu search: initial cost %s", current_cost)

        termination = Termination.MAX_ITERATIONS
        iterations = 0
        while iterations < self.max_iterations:
            if self._reached_stopping_cost(best.cost):
                termination = Termination.STOPPING_COST
                break

            # the state being left becomes tabu before its neighbors are scanned
            tabu.add(current)

            move = self._best_neighbor(current, best.cost, tabu)
            if move is None:
                termination = Termination.DEAD_END
                break

            current, current_cost = move
            iterations += 1

            if current_cost < best.cost:
                best = SearchResult(state=current, cost=current_cost)
                logger.debug("Iteration %d: new best cost %s", iterations, current_cost)

            self._record(best.cost, current_cost)
        else:
            if self._reached_stopping_cost(best.cost):
                termination = Termination.STOPPING_COST

        best.iterations = iterations
        best.termination = termination
        self.best_result = best
        logger.info(
            "Tabu search finished (%s) after %d iterations: best cost %s",
            termination.value,
            iterations,
            best.cost,
        )
        return best

    def _best_neighbor(
        self,
        state: State,
        best_cost: float,
        tabu: TabuList[State],
    ) -> Optional[Tuple[State, float]]:
        """Return the next current state and its cost, or None at a dead end.

        The lowest-cost neighbor that is either not tabu or strictly better than
        `best_cost` wins; ties go to the first one generated. When every neighbor
        is tabu without improving on `best_cost`, the lowest-cost tabu neighbor is
        taken.
        """
        chosen: Optional[Tuple[State, float]] = None
        fallback: Optional[Tuple[State, float]] = None

        for neighbor in self.neighbors(state):
            neighbor_cost = self.cost(neighbor)

            if neighbor in tabu:
                if neighbor_cost < best_cost:
                    if chosen is None or neighbor_cost < chosen[1]:
                        logger.debug("Aspiration: tabu state with cost %s is admissible", neighbor_cost)
                        chosen = (neighbor, neighbor_cost)
                elif fallback is None or neighbor_cost < fallback[1]:
                    fallback = (neighbor, neighbor_cost)
                continue

            if chosen is None or neighbor_cost < chosen[1]:
                chosen = (neighbor, neighbor_cost)

        return chosen if chosen is not None else fallback


def tabu_search(
    initial_state: State,
    neighbors: NeighborFunction,
    cost: CostFunction,
    max_iterations: int,
    stopping_cost: Optional[float] = None,
    tabu_tenure: int = 20,
) -> State:
    """Run a tabu search minimization and return the best state found.

    Args:
        initial_state: The state to start the search from.
        neighbors: Function generating the candidate successors of a state.
        cost: The cost of a state.
        max_iterations: The search stops after this many iterations.
        stopping_cost: If not None, the search stops once the best cost is at or
            below this value.
        tabu_tenure: Capacity of the tabu list.
    """
    solver = TabuSearch(
        neighbors,
        cost,
        max_iterations=max_iterations,
        stopping_cost=stopping_cost,
        tabu_tenure=tabu_tenure,
    )
    return solver.solve(initial_state).state
