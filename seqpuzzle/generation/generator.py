"""
Triplet generation.

Given:
  - a Corpus
  - a RarityCache shared across calls
  - an injectable random source

Return:
  - a Triplet drawn from a real corpus word that enough other words also
    contain in order, so the puzzle is solvable but not obvious.

Algorithm (one `generate` call):
  1) Difficulty: hard mode with p=0.75 -> (min count 1, source length >= 8),
     otherwise easy -> (min count 2, source length >= 4).
  2) Up to `max_attempts` times: pick a random candidate word, chain three
     increasing indices, build the triplet, and reject it when
       - the third letter is forbidden (S, G, D by default),
       - it appears contiguously in the source word,
       - its rarity count is below the profile's minimum.
     Counts come from the cache, or are computed once over a random sample
     of candidates and stored.
  3) If the budget runs out, synthesize three distinct random letters
     (the fallback triplet, flagged `fallback=True`).

Index chaining is NOT uniform over position triples: each index is drawn
after the previous one, which favours small gaps. Output distribution
depends on it.

Sample draws use their own random stream, derived from the main one at
construction. The main stream (difficulty, words, indices) therefore does
not depend on whether a count was a cache hit, and two generators with the
same seed over the same cache produce the same triplet.
"""

from __future__ import annotations

import logging
import random
import string
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Sequence, Tuple

from seqpuzzle.config import (
    FORBIDDEN_THIRD_LETTERS,
    HARD_MODE_PROBABILITY,
    MAX_ATTEMPTS,
    ROUND_SIZE,
    ROUND_SLOT_RETRIES,
    SAMPLE_SIZE,
)
from seqpuzzle.engine.errors import CorpusEmpty, GenerationExhausted
from seqpuzzle.engine.matching import count_matches
from seqpuzzle.engine.types import Triplet
from .cache import RarityCache

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_uppercase


@dataclass(frozen=True)
class DifficultyProfile:
    hard_mode: bool
    min_count: int
    min_source_length: int

    @classmethod
    def draw(cls, rng: random.Random,
             hard_probability: float = HARD_MODE_PROBABILITY) -> "DifficultyProfile":
        """Bernoulli draw between HARD and EASY."""
        return HARD if rng.random() < hard_probability else EASY


HARD = DifficultyProfile(hard_mode=True, min_count=1, min_source_length=8)
EASY = DifficultyProfile(hard_mode=False, min_count=2, min_source_length=4)


def _floor_draw(rng: random.Random, n: int) -> int:
    """floor(U[0,1) * n); always consumes one draw, returns 0 when n == 0."""
    return int(rng.random() * n)


def chain_indices(rng: random.Random, length: int) -> Tuple[int, int, int]:
    """
    Draw three increasing positions into a word of `length` (>= 3).

    idx1 in [0, length-3], idx2 in [idx1+1, length-1], idx3 in [idx2+1, ...].
    When idx2 lands on the last letter, idx3 == length; callers discard that.
    """
    idx1 = _floor_draw(rng, length - 2)
    idx2 = idx1 + 1 + _floor_draw(rng, length - idx1 - 1)
    idx3 = idx2 + 1 + _floor_draw(rng, length - idx2 - 1)
    return idx1, idx2, idx3


class TripletGenerator:
    """
    Stateful generator bound to one corpus, one cache and one RNG.

    Args:
      corpus                  : seqpuzzle.datasets.Corpus
      cache                   : RarityCache (a fresh one if omitted)
      rng                     : random.Random for every non-sample draw
      sample_rng              : random.Random for rarity sampling (derived from rng if omitted)
      forbidden_third_letters : letters never allowed in the third slot
      sample_size             : candidates sampled (with replacement) per rarity count
      max_attempts            : search budget before falling back
      hard_probability        : chance of hard mode per call
    """

    def __init__(
            self,
            corpus,
            cache: RarityCache | None = None,
            *,
            rng: random.Random | None = None,
            sample_rng: random.Random | None = None,
            forbidden_third_letters: Iterable[str] = FORBIDDEN_THIRD_LETTERS,
            sample_size: int = SAMPLE_SIZE,
            max_attempts: int = MAX_ATTEMPTS,
            hard_probability: float = HARD_MODE_PROBABILITY,
    ):
        if sample_size <= 0:
            raise ValueError(f"sample_size must be positive; got {sample_size}")
        if max_attempts < 0:
            raise ValueError(f"max_attempts must be >= 0; got {max_attempts}")

        self.corpus = corpus
        self.cache = cache if cache is not None else RarityCache()
        self.rng = rng or random.Random()
        self.sample_rng = sample_rng or random.Random(self.rng.getrandbits(64))
        self.forbidden: FrozenSet[str] = frozenset(c.upper() for c in forbidden_third_letters)
        self.sample_size = int(sample_size)
        self.max_attempts = int(max_attempts)
        self.hard_probability = float(hard_probability)

    # ---- public API ----

    def generate(self) -> Triplet:
        """
        One triplet: rarity search first, fallback letters if the budget runs out.
        Raises CorpusEmpty if the corpus has no words at all.
        """
        self._require_corpus()
        profile = DifficultyProfile.draw(self.rng, self.hard_probability)
        try:
            return self.search(profile)
        except GenerationExhausted as e:
            logger.warning("falling back to random letters: %s", e)
            return self.fallback(profile)

    def search(self, profile: DifficultyProfile) -> Triplet:
        """
        Rarity path only. Raises GenerationExhausted when no candidate qualifies
        within `max_attempts` (including when no word is long enough).
        """
        self._require_corpus()
        candidates = self.corpus.words_at_least(profile.min_source_length)
        if not candidates:
            raise GenerationExhausted(0, profile.hard_mode)

        for _ in range(self.max_attempts):
            word = self.rng.choice(candidates)
            i1, i2, i3 = chain_indices(self.rng, len(word))
            if i3 >= len(word):
                continue

            seq = word[i1] + word[i2] + word[i3]
            if seq[2] in self.forbidden:
                continue
            # Contiguous in the source word would make it too easy.
            if seq in word:
                continue

            count = self.cache.get(seq)
            if count is None:
                count = self.cache.put(seq, self.count_in_sample(seq, candidates))
                logger.debug("rarity %s = %d (sampled)", seq, count)
            if count < profile.min_count:
                continue

            return Triplet(seq, source_word=word, indices=(i1, i2, i3), rarity=count,
                           hard_mode=profile.hard_mode)

        raise GenerationExhausted(self.max_attempts, profile.hard_mode)

    def count_in_sample(self, seq: str, candidates: Sequence[str]) -> int:
        """Occurrences of `seq` in a with-replacement sample (or all candidates if few)."""
        n = len(candidates)
        if n > self.sample_size:
            sample = [candidates[self.sample_rng.randrange(n)] for _ in range(self.sample_size)]
        else:
            sample = candidates
        return count_matches(sample, seq)

    def fallback(self, profile: DifficultyProfile | None = None) -> Triplet:
        """Three distinct random letters; the third is never forbidden. No rarity guarantee."""
        letters = ""
        while len(letters) < 3:
            ch = self.rng.choice(ALPHABET)
            if len(letters) == 2 and ch in self.forbidden:
                continue
            if ch not in letters:
                letters += ch
        return Triplet(letters, hard_mode=profile.hard_mode if profile else None, fallback=True)

    def generate_round(self, size: int = ROUND_SIZE,
                       retries: int = ROUND_SLOT_RETRIES) -> List[Triplet]:
        """
        `size` triplets for one round, avoiding repeats within the round.
        Each slot draws at most `retries` times; if every draw repeats, the
        duplicate is kept.
        """
        self._require_corpus()
        out: List[Triplet] = []
        used = set()
        for _ in range(size):
            t = self.generate()
            draws = 1
            while t.letters in used and draws < retries:
                t = self.generate()
                draws += 1
            out.append(t)
            used.add(t.letters)
        logger.info("round generated: %s", " ".join(t.letters for t in out))
        return out

    # ---- internals ----

    def _require_corpus(self) -> None:
        if not self.corpus:
            raise CorpusEmpty("corpus is empty; build it from a non-empty dictionary")


def generate_triplet(corpus, cache: RarityCache, *, rng: random.Random | None = None,
                     **kwargs) -> Triplet:
    """Functional form of TripletGenerator(corpus, cache, ...).generate()."""
    return TripletGenerator(corpus, cache, rng=rng, **kwargs).generate()


def generate_round(corpus, cache: RarityCache, *, rng: random.Random | None = None,
                   **kwargs) -> List[Triplet]:
    """Functional form of TripletGenerator(corpus, cache, ...).generate_round()."""
    return TripletGenerator(corpus, cache, rng=rng, **kwargs).generate_round()
