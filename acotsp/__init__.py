from .approx import approx_pow
from .pheromone import PheromoneTrail
from .ant import Ant, TourConstructionError
from .selector import DegenerateDistributionError, probabilities, select_next
from .colony import ACOConfig, ColonyEngine, SolveResult
from .tsp import MatrixFormatError, TSPInstance, load_distance_matrix
from .experiments import run_parameter_sweep, run_repeated_trials
