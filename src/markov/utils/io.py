from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any

from markov.states.protocols import State


def _jsonify(obj: Any) -> Any:
    if isinstance(obj, State):
        return obj.value()

    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)

    if isinstance(obj, Path):
        return str(obj)

    if isinstance(obj, dict):
        return {str(_jsonify(k)): _jsonify(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [_jsonify(v) for v in obj]

    return obj


def save_json(path: Path, obj: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(_jsonify(obj), f, indent=2, sort_keys=True)


def load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)
