"""Clustering by Tabu Search over partitions.

Representation:
    - State: a Partition, i.e. the group label of every item.
    - Seeding: all items in the first group, the remaining groups empty.
Neighborhood:
    - Move a single item to any other group.
Fitness:
    - Caller-supplied cost of the whole clustering (e.g. the diameter of the
      widest group, see `max_diameter`).
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, TypeVar

from ..Metaheuristics import TabuSearch
from ..Partition import Partition
from ..SearchResult import SearchResult

logger = logging.getLogger(__name__)

Item = TypeVar("Item")

ClusteringCost = Callable[[List[List[Item]]], float]


class PartitionClustering:
    """Partition items into a fixed number of groups minimizing a clustering cost."""

    def __init__(
        self,
        cost: ClusteringCost,
        n_clusters: int,
        max_iterations: int = 100,
        stopping_cost: Optional[float] = None,
        tabu_tenure: int = 20,
    ) -> None:
        """
        Initialize the clustering hyperparameters.

        Args:
            cost: Cost of a clustering, given as one list of items per group.
            n_clusters: Number of groups to produce.
            max_iterations: Maximum number of tabu search iterations.
            stopping_cost: If not None, stop once the best clustering costs at
                most this much.
            tabu_tenure: Capacity of the tabu list.
        """
        if not callable(cost):
            raise TypeError(f"cost must be callable, got {type(cost).__name__}")
        if isinstance(n_clusters, bool) or not isinstance(n_clusters, int) or n_clusters < 1:
            raise ValueError(f"n_clusters must be a positive int, got {n_clusters!r}")
        self.cost = cost
        self.n_clusters = n_clusters
        self.max_iterations = max_iterations
        self.stopping_cost = stopping_cost
        self.tabu_tenure = tabu_tenure
        self.result: Optional[SearchResult] = None

    def solve(self, items: Sequence[Item]) -> List[List[Item]]:
        """Cluster `items` and return exactly `n_clusters` groups."""
        items = list(items)

        def partition_cost(partition: Partition) -> float:
            return self.cost(partition.groups(items))

        # constructed before the shortcut below so bad search settings are still reported
        solver: TabuSearch[Partition] = TabuSearch(
            Partition.moves,
            partition_cost,
            max_iterations=self.max_iterations,
            stopping_cost=self.stopping_cost,
            tabu_tenure=self.tabu_tenure,
        )

        if self.n_clusters == 1:
            logger.debug("Single cluster requested, skipping search")
            return [items]

        self.result = solver.solve(Partition.seed(len(items), self.n_clusters))
        best: Partition = self.result.state
        logger.info("Clustered %d items into groups of sizes %s", len(items), best.sizes())
        return best.groups(items)


def cluster_tabu(
    items: Sequence[Item],
    cost: ClusteringCost,
    n_clusters: int,
    max_iterations: int,
    stopping_cost: Optional[float] = None,
    tabu_tenure: int = 20,
) -> List[List[Item]]:
    """Runs a tabu-search based clustering.

    Args:
        items: The items to cluster.
        cost: Cost of a possible clustering, given one list of items per group.
        n_clusters: The number of clusters to identify.
        max_iterations: The number of iterations (at most) to search for.
        stopping_cost: If not None, stop once the best clustering costs at most
            this much.
        tabu_tenure: Capacity of the tabu list.
    """
    clustering = PartitionClustering(
        cost,
        n_clusters,
        max_iterations=max_iterations,
        stopping_cost=stopping_cost,
        tabu_tenure=tabu_tenure,
    )
    return clustering.solve(items)
