"""Plot a saved transition table as a heatmap."""

import argparse
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd


def load_matrix(path: Path, max_states: int = 40) -> pd.DataFrame:
    """
    Pivot ``transitions.csv`` into a source x destination probability table.

    Only the ``max_states`` most frequently departed-from sources (and the same
    number of destinations) are kept, so large vocabularies stay readable.
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing {path}")
    frame = pd.read_csv(path, dtype={"source": str, "destination": str}, keep_default_na=False)
    missing = {"source", "destination", "count", "probability"} - set(frame.columns)
    if missing:
        raise ValueError(f"Missing required columns in {path}: {sorted(missing)}")

    top_sources = frame.groupby("source")["count"].sum().nlargest(max_states).index
    top_dests = frame.groupby("destination")["count"].sum().nlargest(max_states).index
    kept = frame[frame["source"].isin(top_sources) & frame["destination"].isin(top_dests)]
    return kept.pivot_table(index="source", columns="destination", values="probability", fill_value=0.0)


def plot_heatmap(matrix: pd.DataFrame, outpath: Path, title: str = "Transition probabilities") -> None:
    n_rows, n_cols = matrix.shape
    fig, ax = plt.subplots(figsize=(max(4.8, 2.4 + 0.35 * n_cols), max(3.4, 2.2 + 0.3 * n_rows)))
    image = ax.imshow(np.asarray(matrix.values, dtype=float), aspect="auto", interpolation="nearest", vmin=0.0, vmax=1.0)
    ax.set_title(title)
    ax.set_xlabel("Next state")
    ax.set_ylabel("Current state")
    ax.set_xticks(range(n_cols))
    ax.set_xticklabels([str(c) for c in matrix.columns], rotation=90)
    ax.set_yticks(range(n_rows))
    ax.set_yticklabels([str(r) for r in matrix.index])
    cbar = fig.colorbar(image, ax=ax)
    cbar.set_label("P(next | current)")
    fig.tight_layout()
    outpath.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(outpath)
    plt.close(fig)
    print(f"Wrote {outpath}")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--root", type=Path, required=True, help="Run directory containing transitions.csv.")
    parser.add_argument("--max-states", type=int, default=40)
    parser.add_argument("--out", type=Path, default=None, help="Output PNG (default: <root>/transitions.png).")
    args = parser.parse_args()

    if args.max_states < 1:
        raise ValueError("--max-states must be >= 1.")
    matrix = load_matrix(args.root / "transitions.csv", max_states=args.max_states)
    plot_heatmap(matrix, args.out or (args.root / "transitions.png"), title=args.root.name)


if __name__ == "__main__":
    main()
