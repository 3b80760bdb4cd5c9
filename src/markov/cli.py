import argparse
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from markov.experiments.registry import SOURCE_REGISTRY
from markov.experiments.runner import run_experiment
from markov.sources.protocols import Source
from markov.sources.text_file import TOKENIZERS
from markov.utils.io import save_json
from markov.utils.logging import configure_logging

LOGGER = logging.getLogger(__name__)


def _make_outdir(base: Path, source_name: str, length: int, seed: int, run_id: Optional[str]) -> Path:
    if base != Path("results/run"):
        return base
    timestamp = datetime.utcnow().strftime("%Y-%m-%d_%H%M%S")
    generated_id = run_id or f"{timestamp}_{source_name}__L{length}__s{seed}"
    return Path("results") / generated_id


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a first-order Markov model from a state source.")

    parser.add_argument("--source", required=True, choices=SOURCE_REGISTRY.keys())
    parser.add_argument("--data-path", type=Path, default=None, help="Text file for --source text_file.")
    parser.add_argument("--tokens", choices=TOKENIZERS, default="words", help="Tokenisation for text_file.")
    parser.add_argument("--p01", type=float, default=0.8, help="P(1 | 0) for two_state.")
    parser.add_argument("--p11", type=float, default=0.2, help="P(1 | 1) for two_state.")

    parser.add_argument("--length", type=int, default=10_000)
    parser.add_argument("--train-frac", type=float, default=0.8)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--generate", type=int, default=0, help="Number of states to generate by walking the model.")

    parser.add_argument("--outdir", type=Path, default=Path("results/run"))
    parser.add_argument("--force", action="store_true", help="Allow writing into an existing run directory.")
    parser.add_argument("--run-id", type=str, default=None, help="Optional run ID.")
    parser.add_argument("--save-transitions", action="store_true", help="Write transitions.csv and transitions.dot.")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="CLI logging verbosity.",
    )

    return parser.parse_args(argv)


def _build_source(args: argparse.Namespace) -> Source:
    if args.source == "text_file":
        if args.data_path is None:
            raise ValueError("--data-path is required for --source text_file")
        return SOURCE_REGISTRY[args.source](path=args.data_path, tokens=args.tokens)
    return SOURCE_REGISTRY[args.source](p01=args.p01, p11=args.p11)


def main(argv=None) -> None:
    args = _parse_args(argv)
    configure_logging(getattr(logging, args.log_level))

    if args.length < 1:
        raise ValueError("--length must be >= 1.")
    if not (0.0 < args.train_frac <= 1.0):
        raise ValueError("--train-frac must be in (0, 1].")
    if args.generate < 0:
        raise ValueError("--generate must be >= 0.")

    source = _build_source(args)
    args.outdir = _make_outdir(args.outdir, source.name, args.length, args.seed, args.run_id)
    summary_path = args.outdir / "summary.json"
    if summary_path.exists():
        if not args.force:
            raise FileExistsError(
                f"Output directory {args.outdir} already exists. Use --force or a fresh --outdir."
            )
        summary_path.unlink()

    config = {
        "source": args.source,
        "data_path": str(args.data_path) if args.data_path is not None else None,
        "tokens": args.tokens if args.source == "text_file" else None,
        "two_state": {"p01": args.p01, "p11": args.p11} if args.source == "two_state" else None,
        "length": args.length,
        "train_frac": args.train_frac,
        "seed": args.seed,
        "generate": args.generate,
        "save_transitions": args.save_transitions,
    }
    args.outdir.mkdir(parents=True, exist_ok=True)
    save_json(args.outdir / "config.json", config)
    LOGGER.info("Running markov | source=%s length=%d seed=%d outdir=%s", source.name, args.length, args.seed, args.outdir)

    summary = run_experiment(
        source=source,
        length=args.length,
        train_frac=args.train_frac,
        seed=args.seed,
        outdir=args.outdir,
        generate=args.generate,
        save_transitions=args.save_transitions,
    )

    LOGGER.info("Run complete | summary at %s", summary_path)
    print(f"model_size={summary['model_size']} n_states={summary['n_states']} logloss={summary['logloss']:.4f}")
    if summary["generated"]:
        print(" ".join(summary["generated"]))


if __name__ == "__main__":
    main()
