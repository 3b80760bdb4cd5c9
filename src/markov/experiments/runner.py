from __future__ import annotations

import logging
import math
import time
from pathlib import Path
from typing import Any, Dict

from markov.chain.model import Model
from markov.metrics.branching import mean_branching_entropy_weighted
from markov.metrics.complexity import n_states, statistical_complexity
from markov.metrics.graph import DotStyle, save_dot, to_dot, to_edge_list
from markov.metrics.matrix import to_frame
from markov.metrics.predictive import log_loss
from markov.sources.protocols import Source
from markov.states.text import START
from markov.utils.io import save_json

LOGGER = logging.getLogger(__name__)


def _model_metrics(model: Model, x_test) -> Dict[str, Any]:
    if len(model) == 0:
        LOGGER.warning("Model has no transitions; metrics are undefined.")
        return {
            "model_size": 0,
            "n_states": 0,
            "n_sources": 0,
            "logloss": math.nan,
            "branch_entropy": math.nan,
            "C_mu_empirical": math.nan,
        }

    logloss = log_loss(model, x_test, context=model.current_state) if x_test else math.nan
    if math.isnan(logloss):
        LOGGER.warning("Held-out log-loss is undefined; no test transition starts from a known state.")

    return {
        "model_size": model.size(),
        "n_states": n_states(model),
        "n_sources": len(model),
        "logloss": logloss,
        "branch_entropy": mean_branching_entropy_weighted(model, log_base=2.0),
        "C_mu_empirical": statistical_complexity(model),
    }


def run_experiment(
    source: Source,
    length: int,
    train_frac: float,
    seed: int,
    outdir: Path,
    generate: int = 0,
    save_transitions: bool = False,
) -> Dict[str, Any]:
    """Fit a model on a source sample, score the held-out tail and persist the summary."""
    if not (0.0 < train_frac <= 1.0):
        raise ValueError(f"train_frac must be in (0, 1], got {train_frac}.")
    outdir.mkdir(parents=True, exist_ok=True)
    start = time.perf_counter()

    sample = source.sample(length=length, seed=seed)
    x = list(sample.states)
    if not x:
        raise ValueError(f"Source {source.name} produced no states for length={length}.")
    split = max(1, min(int(len(x) * train_frac), len(x)))
    x_train, x_test = x[:split], x[split:]
    LOGGER.info("Fitting | source=%s seed=%d train=%d test=%d", source.name, seed, len(x_train), len(x_test))

    model = Model()
    model.add_states(x_train)
    metrics = _model_metrics(model, x_test)
    LOGGER.info(
        "Fitted | size=%d bytes n_states=%d sources=%d elapsed=%.2fs",
        metrics["model_size"],
        metrics["n_states"],
        metrics["n_sources"],
        time.perf_counter() - start,
    )

    generated: list[str] = []
    if generate > 0:
        generated = [s.value() for s in model.generate(generate, seed=seed, start=START)]
        LOGGER.info("Generated %d/%d states", len(generated), generate)

    if save_transitions:
        to_frame(model).to_csv(outdir / "transitions.csv", index=False)
        dot = to_dot(
            to_edge_list(model),
            graph_name=f"{source.name}_seed{seed}",
            label=f"{source.name} | seed={seed}",
            style=DotStyle(rankdir="LR"),
        )
        save_dot(outdir / "transitions.dot", dot)
        LOGGER.info("Wrote transitions to %s", outdir)

    summary: Dict[str, Any] = {
        "source": source.name,
        "seed": seed,
        "length": len(x),
        "train_frac": train_frac,
        **metrics,
        "generated": generated,
    }
    save_json(outdir / "summary.json", summary)
    return summary
