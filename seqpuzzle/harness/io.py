"""
I/O utilities for simulation runs.

Responsibilities:
- write_csv:     flatten per-round results into a tidy CSV (one row per round).
- write_manifest:dump a JSON manifest with config, dictionary report and summary.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def write_csv(results: List[Dict], path: str, levels: int = 3) -> str:
    """
    Serialize a batch of round results to CSV.

    Schema (columns):
      player, round, success, time_ms,
      letters_1, word_1, gave_up_1, attempts_1, fallback_1, ..., (repeated per level)

    Args:
      results : list of dicts returned by the harness per round.
      path    : output CSV path.
      levels  : levels per round (3 in the game).

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["player", "round", "success", "time_ms"]
    for i in range(1, levels + 1):
        fields += [f"letters_{i}", f"word_{i}", f"gave_up_{i}", f"attempts_{i}", f"fallback_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "player": r.get("player_id", "?"),
                "round": r.get("round", ""),
                "success": r["success"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            lv = r.get("levels", [])
            for i in range(1, levels + 1):
                if i <= len(lv):
                    level = lv[i - 1]
                    row[f"letters_{i}"] = level["letters"]
                    row[f"word_{i}"] = level["word"]
                    row[f"gave_up_{i}"] = level["gave_up"]
                    row[f"attempts_{i}"] = level["attempts"]
                    row[f"fallback_{i}"] = level["fallback"]
                else:
                    for k in ("letters", "word", "gave_up", "attempts", "fallback"):
                        row[f"{k}_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dictionary report.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (player, words, rounds, seed, lexicon, outdir)
      - dictionary: output of datasets.describe_wordlist(...)
      - summary: output of harness.stats.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
