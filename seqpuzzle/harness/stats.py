"""
Batch statistics over harness results.

summarize() reports what the game's stats panel shows (rounds played and
won, streaks) plus simulation diagnostics (give-up rate per level, timing
percentiles, fallback usage). Nothing is persisted here.
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np


def longest_streak(flags: List[bool]) -> int:
    """Longest run of consecutive True values."""
    best = cur = 0
    for f in flags:
        cur = cur + 1 if f else 0
        best = max(best, cur)
    return best


def summarize(results: List[Dict], levels: int = 3) -> Dict:
    if not results:
        return {"rounds": 0, "won": 0, "win_rate": 0.0, "max_streak": 0, "current_streak": 0}

    wins = np.array([bool(r["success"]) for r in results])
    times = np.array([float(r["time_ms"]) for r in results], dtype=float)

    gave_up = np.zeros(levels)
    fallback = 0
    word_lengths: List[int] = []
    for r in results:
        for lv in r["levels"][:levels]:
            if lv["gave_up"]:
                gave_up[lv["level"] - 1] += 1
            else:
                word_lengths.append(len(lv["word"]))
            fallback += int(bool(lv["fallback"]))

    # Trailing run of wins, counted from the most recent round.
    current = 0
    for w in wins[::-1]:
        if not w:
            break
        current += 1

    return {
        "rounds": int(len(results)),
        "won": int(wins.sum()),
        "win_rate": float(wins.mean()),
        "max_streak": longest_streak(wins.tolist()),
        "current_streak": current,
        "give_up_rate_by_level": (gave_up / len(results)).round(4).tolist(),
        "fallback_triplets": fallback,
        "mean_word_length": float(np.mean(word_lengths)) if word_lengths else 0.0,
        "time_ms_mean": float(times.mean()),
        "time_ms_median": float(np.median(times)),
        "time_ms_p90": float(np.percentile(times, 90)),
    }


def pretty_summary(summary: Dict) -> str:
    """One-liner, e.g. rounds=100 | won=87 (87.0%) | max streak=21 | fallback=2"""
    if not summary["rounds"]:
        return "rounds=0"
    return (
        f"rounds={summary['rounds']} | won={summary['won']} ({100.0 * summary['win_rate']:.1f}%) "
        f"| max streak={summary['max_streak']} | fallback={summary['fallback_triplets']} "
        f"| median {summary['time_ms_median']:.1f} ms"
    )
