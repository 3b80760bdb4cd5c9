from .branching import mean_branching_entropy, mean_branching_entropy_weighted, row_entropy
from .complexity import n_states, occupancy, statistical_complexity
from .graph import DotStyle, save_dot, to_dot, to_edge_list
from .matrix import stationary_distribution, to_frame, transition_matrix
from .predictive import log_loss

__all__ = [
    "log_loss",
    "row_entropy",
    "mean_branching_entropy",
    "mean_branching_entropy_weighted",
    "n_states",
    "occupancy",
    "statistical_complexity",
    "transition_matrix",
    "stationary_distribution",
    "to_frame",
    "to_edge_list",
    "to_dot",
    "save_dot",
    "DotStyle",
]
