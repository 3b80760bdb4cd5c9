from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from markov.states.text import TextState

from .protocols import Sample, Source

TOKENIZERS = ("chars", "words")


def load_tokens(path: Path, tokens: str = "words") -> List[str]:
    """
    Split a UTF-8 text file into tokens.

    ``words`` splits on whitespace; ``chars`` keeps every character, newlines
    included.
    """
    if tokens not in TOKENIZERS:
        raise ValueError(f"tokens must be one of {TOKENIZERS}, got {tokens!r}.")
    if not path.exists():
        raise FileNotFoundError(path)
    text = path.read_text(encoding="utf-8")
    out = text.split() if tokens == "words" else list(text)
    if not out:
        raise ValueError(f"No tokens found in {path}.")
    return out


@dataclass(frozen=True)
class TextFile(Source):
    """Expose the tokens of a text file as a sequence of text states."""

    path: Path
    tokens: str = "words"

    def __post_init__(self) -> None:
        if self.tokens not in TOKENIZERS:
            raise ValueError(f"tokens must be one of {TOKENIZERS}, got {self.tokens!r}.")

    @property
    def name(self) -> str:
        return f"text_{self.path.stem}_{self.tokens}"

    def sample(self, length: int, seed: int) -> Sample:
        del seed  # deterministic once loaded from file
        if length < 1:
            raise ValueError(f"length must be >= 1, got {length}.")
        words = load_tokens(self.path, self.tokens)
        if len(words) < length:
            raise ValueError(f"Requested length={length}, but {self.path} only has {len(words)} tokens.")
        return Sample(states=[TextState(w) for w in words[:length]])
