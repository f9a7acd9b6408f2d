from .Metaheuristic import Metaheuristic
from .TabuList import TabuList
from .TabuSearch import TabuSearch, tabu_search

__all__ = [
	"Metaheuristic",
	"TabuList",
	"TabuSearch",
	"tabu_search",
]
