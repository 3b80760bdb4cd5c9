import json
import math
import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC_ROOT = Path(__file__).resolve().parents[2]


def _module_python() -> str:
    override = os.environ.get("MARKOV_TEST_PYTHON")
    if override:
        return override
    return sys.executable


def _run_module(module: str, args: list[str], tmp_path: Path, check: bool = True) -> subprocess.CompletedProcess[str]:
    env = {
        "HOME": os.environ.get("HOME", ""),
        "PATH": os.environ.get("PATH", ""),
        "PYTHONPATH": str(SRC_ROOT),
        "MPLBACKEND": "Agg",
        "MPLCONFIGDIR": str(tmp_path / "mplconfig"),
        "XDG_CACHE_HOME": str(tmp_path / "xdg-cache"),
    }
    for key in ("TMPDIR", "TMP", "TEMP", "LANG", "LC_ALL"):
        value = os.environ.get(key)
        if value is not None:
            env[key] = value
    return subprocess.run(
        [_module_python(), "-m", module, *args],
        cwd=SRC_ROOT,
        env=env,
        check=check,
        capture_output=True,
        text=True,
    )


def test_two_state_cli_end_to_end(tmp_path: Path) -> None:
    outdir = tmp_path / "two_state_run"
    proc = _run_module(
        "markov.cli",
        [
            "--source",
            "two_state",
            "--length",
            "2000",
            "--seed",
            "0",
            "--generate",
            "25",
            "--outdir",
            str(outdir),
            "--save-transitions",
            "--log-level",
            "INFO",
        ],
        tmp_path,
    )
    assert (outdir / "config.json").exists()
    assert (outdir / "transitions.csv").exists()
    assert (outdir / "transitions.dot").exists()

    summary = json.loads((outdir / "summary.json").read_text(encoding="utf-8"))
    # start(5) + row@start(4 + 5) + two 1-byte sources, each with a 4-byte count and two 5-byte entries
    assert summary["model_size"] == 5 + 9 + 2 * (1 + 4 + 5 + 5)
    assert summary["n_states"] == 3
    assert math.isfinite(summary["logloss"])
    assert len(summary["generated"]) == 25
    assert set(summary["generated"]) <= {"0", "1"}

    # logging.basicConfig writes to stderr by default
    assert "Running markov |" in proc.stderr
    assert "Fitted |" in proc.stderr

    _run_module("markov.analysis.plot_transitions", ["--root", str(outdir)], tmp_path)
    assert (outdir / "transitions.png").exists()


def test_text_file_cli_refuses_existing_outdir(tmp_path: Path) -> None:
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("the cat sat on the mat and the cat ran\n", encoding="utf-8")
    outdir = tmp_path / "text_run"
    args = [
        "--source",
        "text_file",
        "--data-path",
        str(corpus),
        "--length",
        "10",
        "--train-frac",
        "1.0",
        "--outdir",
        str(outdir),
    ]
    _run_module("markov.cli", args, tmp_path)
    summary = json.loads((outdir / "summary.json").read_text(encoding="utf-8"))
    assert summary["n_sources"] == 7
    assert summary["model_size"] > 0

    again = _run_module("markov.cli", args, tmp_path, check=False)
    assert again.returncode != 0
    assert "already exists" in again.stderr

    _run_module("markov.cli", [*args, "--force"], tmp_path)


@pytest.mark.parametrize("bad", [["--length", "0"], ["--train-frac", "0"]])
def test_cli_rejects_invalid_arguments(tmp_path: Path, bad: list[str]) -> None:
    proc = _run_module(
        "markov.cli",
        ["--source", "two_state", "--outdir", str(tmp_path / "bad"), *bad],
        tmp_path,
        check=False,
    )
    assert proc.returncode != 0
