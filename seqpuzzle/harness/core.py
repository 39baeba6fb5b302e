"""
Round harness.

- play_round: one round (three levels) played by a simulated player.
- run_batch:  many rounds back to back with reproducible per-round seeds.

A level ends when a submission is accepted, the player gives up (returns
None), or `max_submissions` words were rejected. A round is won only if no
level was given up; given-up levels reveal the suggester's answers.

These functions are UI-agnostic so a CLI, a notebook or a service can
reuse them unchanged.
"""

from __future__ import annotations
import logging
import time
from typing import Callable, Dict, Iterable, List

logger = logging.getLogger(__name__)

# Submissions allowed per level before the harness gives up for the player.
MAX_SUBMISSIONS = 5


def _assert_submissions(max_submissions: int) -> None:
    """Guardrail: a level needs at least one submission."""
    if max_submissions < 1:
        raise ValueError(f"max_submissions must be >= 1; got {max_submissions}")


def play_round(
        player,
        *,
        corpus,
        generator,
        validator,
        suggester,
        max_submissions: int = MAX_SUBMISSIONS,
        seed: int | None = None,
) -> Dict:
    """
    Generate a round and let `player` play its three levels.

    Args:
        player:          object implementing BasePlayer.next_word(state)
        corpus:          the shared Corpus
        generator:       TripletGenerator
        validator:       SubmissionValidator
        suggester:       AnswerSuggester (used on give-up)
        max_submissions: submissions per level before a forced give-up
        seed:            RNG seed for the player's choices

    Returns:
        dict with keys:
            success (bool), time_ms (float),
            levels (list of dicts: level, letters, word, gave_up, attempts,
                    rejections, suggestions, fallback, time_ms)
    """
    _assert_submissions(max_submissions)
    player.reset(corpus=corpus, seed=seed)

    triplets = generator.generate_round()
    levels: List[Dict] = []

    t0 = time.perf_counter_ns()
    for level, triplet in enumerate(triplets, start=1):
        tried: List[str] = []
        rejections: List[str] = []
        word = None

        lt0 = time.perf_counter_ns()
        while len(tried) < max_submissions:
            state = {
                "level": level,
                "letters": triplet.letters,
                "attempts": len(tried),
                "tried": list(tried),
                "rejections": list(rejections),
            }
            guess = player.next_word(state)
            if guess is None:
                break

            result = validator.validate(guess, triplet)
            tried.append(result.word)
            if result.accepted:
                word = result.word
                break
            rejections.append(result.reason)

        gave_up = word is None
        suggestions = suggester.suggest(triplet) if gave_up else []
        levels.append({
            "level": level,
            "letters": triplet.letters,
            "word": word or "",
            "gave_up": gave_up,
            "attempts": len(tried),
            "rejections": rejections,
            "suggestions": [s.lower() for s in suggestions],
            "fallback": triplet.fallback,
            "time_ms": (time.perf_counter_ns() - lt0) / 1_000_000.0,
        })

    dt = (time.perf_counter_ns() - t0) / 1_000_000.0
    success = not any(lv["gave_up"] for lv in levels)
    logger.debug("round %s: success=%s", [lv["letters"] for lv in levels], success)
    return {"success": success, "time_ms": dt, "levels": levels}


def run_batch(
        player,
        rounds: int,
        *,
        corpus,
        generator,
        validator,
        suggester,
        max_submissions: int = MAX_SUBMISSIONS,
        seed: int | None = None,
        progress: Callable[[Iterable[int]], Iterable[int]] | None = None,
) -> List[Dict]:
    """
    Play `rounds` rounds. Each round's player seed is derived from the base
    seed (seed + index) so runs are reproducible but rounds differ.

    `progress` wraps the round-index iterable (e.g. a tqdm factory) for display.
    Every result is stamped with `round` and the player's `player_id`.
    """
    _assert_submissions(max_submissions)

    indices: Iterable[int] = range(1, rounds + 1)
    if progress is not None:
        indices = progress(indices)

    player_id = getattr(player, "id", "")
    out: List[Dict] = []
    for idx in indices:
        round_seed = None if seed is None else (seed + idx)
        r = play_round(
            player, corpus=corpus, generator=generator, validator=validator,
            suggester=suggester, max_submissions=max_submissions, seed=round_seed,
        )
        r["round"] = idx
        r["player_id"] = player_id
        out.append(r)
    return out
