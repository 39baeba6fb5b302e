# apps/cli/run.py
"""
CLI entry point for simulating sequence-puzzle rounds.

This script:
  1) Reports on the raw dictionary (counts, SHA, suffix drops, corpus size).
  2) Builds the corpus once and wires generator, validator and suggester.
  3) Plays a batch of rounds with the requested simulated player and writes:
       - CSV:  per-round results (triplets, words, give-ups)
       - JSON: manifest with config, dictionary report, summary, git commit

Usage:
    python -m apps.cli.run --words words.txt --rounds 200 --player random_match --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from functools import partial
from pathlib import Path

from tqdm import tqdm

from seqpuzzle.config import get_word_list_path, LEXICON_TIMEOUT_SEC
from seqpuzzle.datasets import Corpus, describe_wordlist, pretty_summary, read_lines
from seqpuzzle.engine import AnswerSuggester, SubmissionValidator
from seqpuzzle.generation import RarityCache, TripletGenerator
from seqpuzzle.harness import run_batch, write_csv, write_manifest
from seqpuzzle.harness.io import timestamp_id, git_commit_or_unknown
from seqpuzzle.harness.stats import summarize, pretty_summary as pretty_stats
from seqpuzzle.lexicon import create_lexicon, get_lexicon_ids
from seqpuzzle.players import create_player, get_player_ids


def main():
    """
    Parse CLI args, report on the dictionary, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="seqpuzzle: simulate rounds with a scripted player")
    ap.add_argument("--words", help="path to the raw dictionary (default: $SEQPUZZLE_WORD_LIST "
                                    "or /usr/share/dict/words)")
    ap.add_argument("--player", default="random_match",
                    help=f"player id (one of: {', '.join(get_player_ids())})")
    ap.add_argument("--lexicon", default="wordset", choices=get_lexicon_ids(),
                    help="wordset = the dictionary itself (offline); dictionaryapi = remote lookups")
    ap.add_argument("--timeout", type=float, default=LEXICON_TIMEOUT_SEC,
                    help="remote lexicon timeout in seconds")
    ap.add_argument("--rounds", type=int, default=100, help="number of rounds to play")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar",
                    help="show a progress bar on stderr")
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Dictionary report
    words_path = get_word_list_path(args.words)
    rep = describe_wordlist(str(words_path))
    print(pretty_summary(rep))
    if not rep["passed"]:
        print("Dictionary unusable: " + "; ".join(rep["issues"]), file=sys.stderr)
        sys.exit(1)

    # 2) Corpus + components (one RNG per concern, all from the base seed)
    raw = read_lines(words_path)
    corpus = Corpus.build(raw)
    if args.lexicon == "wordset":
        lexicon = create_lexicon("wordset", words=raw)
    else:
        lexicon = create_lexicon(args.lexicon, timeout=args.timeout)

    generator = TripletGenerator(corpus, RarityCache(), rng=random.Random(args.seed))
    validator = SubmissionValidator(lexicon)
    suggester = AnswerSuggester(corpus, rng=random.Random(args.seed + 1))
    player = create_player(args.player)

    # 3) Play
    progress = None
    if args.progress == "bar":
        progress = partial(tqdm, ncols=80, desc="Playing", unit="round")

    start = time.time()
    with lexicon:
        results = run_batch(player, args.rounds, corpus=corpus, generator=generator,
                            validator=validator, suggester=suggester, seed=args.seed,
                            progress=progress)
    elapsed = time.time() - start

    # 4) Outputs (CSV + manifest)
    summary = summarize(results)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "corpus_size": len(corpus),
        "rarity_cache_entries": len(generator.cache),
        "elapsed_sec": round(elapsed, 3),
        "summary": summary,
        "player_id": player.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(pretty_stats(summary))
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
