from .SearchResult import SearchResult, Termination
from .Partition import Partition
from .Metaheuristics import Metaheuristic, TabuList, TabuSearch, tabu_search
from .Clustering import PartitionClustering, cluster_tabu, diameter, max_diameter, point_diameter

__all__ = [
    "SearchResult",
    "Termination",
    "Partition",
    "Metaheuristic",
    "TabuList",
    "TabuSearch",
    "tabu_search",
    "PartitionClustering",
    "cluster_tabu",
    "diameter",
    "max_diameter",
    "point_diameter",
]
