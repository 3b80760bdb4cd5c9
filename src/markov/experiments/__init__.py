from .runner import run_experiment
from .registry import SOURCE_REGISTRY

__all__ = ["run_experiment", "SOURCE_REGISTRY"]
