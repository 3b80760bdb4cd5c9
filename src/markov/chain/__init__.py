from .model import Model
from .row import COUNTER_BYTES, NormalizingRow
from .uint_model import UintModel

__all__ = [
    "Model",
    "NormalizingRow",
    "UintModel",
    "COUNTER_BYTES",
]
