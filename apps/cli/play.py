# apps/cli/play.py
"""
Play one round in the terminal.

Each level shows three letters; type a word of 5+ letters containing them in
order. Type '?' to give up on a level and see possible answers.

Usage:
    python -m apps.cli.play --words words.txt
    python -m apps.cli.play --offline        # validate against the dictionary, no network
"""

from __future__ import annotations

import argparse
import logging
import random

from seqpuzzle.config import get_word_list_path, LEXICON_TIMEOUT_SEC
from seqpuzzle.datasets import Corpus, read_lines
from seqpuzzle.engine import AnswerSuggester, SubmissionValidator
from seqpuzzle.generation import RarityCache, TripletGenerator
from seqpuzzle.lexicon import create_lexicon

GIVE_UP = "?"


def main():
    ap = argparse.ArgumentParser(description="seqpuzzle: play one round")
    ap.add_argument("--words", help="path to the raw dictionary")
    ap.add_argument("--offline", action="store_true",
                    help="accept words from the dictionary instead of the online lookup")
    ap.add_argument("--timeout", type=float, default=LEXICON_TIMEOUT_SEC,
                    help="online lookup timeout in seconds")
    ap.add_argument("--seed", type=int, help="RNG seed (same seed, same round)")
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level.upper())

    raw = read_lines(get_word_list_path(args.words))
    corpus = Corpus.build(raw)
    rng = random.Random(args.seed)

    if args.offline:
        lexicon = create_lexicon("wordset", words=raw)
    else:
        lexicon = create_lexicon("dictionaryapi", timeout=args.timeout)

    generator = TripletGenerator(corpus, RarityCache(), rng=rng)
    suggester = AnswerSuggester(corpus, rng=rng)

    with lexicon:
        solved, total = _play(generator.generate_round(), SubmissionValidator(lexicon), suggester)
    print(f"\nSolved {solved} of {total}.")


def _play(triplets, validator, suggester):
    """Prompt through each level; returns (solved, levels)."""
    solved = 0
    for level, triplet in enumerate(triplets, start=1):
        print(f"\nLevel {level}: {' '.join(triplet.letters)}")
        while True:
            try:
                raw_input = input("> ")
            except EOFError:
                raw_input = GIVE_UP
            if raw_input.strip() == GIVE_UP:
                answers = suggester.suggest(triplet)
                shown = ", ".join(a.lower() for a in answers) or "(none found)"
                print(f"Possible answers: {shown}")
                break
            result = validator.validate(raw_input, triplet)
            print(result.message)
            if result.accepted:
                solved += 1
                break

    return solved, len(triplets)


if __name__ == "__main__":
    main()
