"""Text states and the reserved start sentinel."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TextState:
    """A state identified by its text; encoded as UTF-8."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"TextState expects str, got {type(self.text).__name__}.")

    def value(self) -> str:
        return self.text

    def size(self) -> int:
        return len(self.bytes())

    def bytes(self) -> bytes:
        return self.text.encode("utf-8")


@dataclass(frozen=True)
class _StartState(TextState):
    # Dataclass equality requires the same class, so this never equals an
    # observed TextState("start").
    text: str = "start"

    def __repr__(self) -> str:
        return "START"


START: TextState = _StartState()
