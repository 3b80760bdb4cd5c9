from .model_walk import ModelWalk
from .protocols import Sample, Source
from .text_file import TextFile
from .two_state import TwoStateChain

__all__ = [
    "Source",
    "Sample",
    "ModelWalk",
    "TextFile",
    "TwoStateChain",
]
