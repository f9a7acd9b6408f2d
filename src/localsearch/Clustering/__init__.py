from .Diameter import diameter, max_diameter, point_diameter
from .ClusterTabu import PartitionClustering, cluster_tabu

__all__ = [
	"diameter",
	"max_diameter",
	"point_diameter",
	"PartitionClustering",
	"cluster_tabu",
]
