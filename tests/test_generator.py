import itertools
import random

import pytest

from seqpuzzle.datasets import Corpus
from seqpuzzle.engine import CorpusEmpty, GenerationExhausted, Triplet, is_ordered_subsequence
from seqpuzzle.generation import (
    EASY, HARD, DifficultyProfile, RarityCache, TripletGenerator, chain_indices,
    generate_round, generate_triplet,
)


class ScriptedRandom:
    """Feeds fixed values to random(); enough for chain_indices."""

    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


def _no_recount(*args, **kwargs):
    raise AssertionError("rarity was recomputed")


def test_rarity_path_invariants(corpus):
    gen = TripletGenerator(corpus, RarityCache(), rng=random.Random(1))
    seen = 0
    for _ in range(60):
        t = gen.generate()
        if t.fallback:
            continue
        seen += 1
        w = t.source_word
        assert t.letters[2] not in "SGD"
        assert t.letters not in w
        i1, i2, i3 = t.indices
        assert i1 < i2 < i3 < len(w)
        assert w[i1] + w[i2] + w[i3] == t.letters
        assert is_ordered_subsequence(w, t.letters)
        profile = HARD if t.hard_mode else EASY
        assert len(w) >= profile.min_source_length
        assert t.rarity >= profile.min_count
    assert seen > 0


def test_difficulty_draw_can_be_forced(corpus):
    assert DifficultyProfile.draw(random.Random(0), 1.0) is HARD
    assert DifficultyProfile.draw(random.Random(0), 0.0) is EASY

    hard = TripletGenerator(corpus, rng=random.Random(3), hard_probability=1.0).generate()
    assert hard.hard_mode is True and len(hard.source_word) >= 8

    easy = TripletGenerator(corpus, rng=random.Random(3), hard_probability=0.0).generate()
    assert easy.hard_mode is False
    assert easy.fallback or easy.rarity >= 2


def test_same_seed_same_cache_same_triplet(corpus):
    cache = RarityCache()
    first = TripletGenerator(corpus, cache, rng=random.Random(5)).generate()
    size = len(cache)

    again = TripletGenerator(corpus, cache, rng=random.Random(5))
    again.count_in_sample = _no_recount
    second = again.generate()

    assert second == first
    assert second.source_word == first.source_word
    assert len(cache) == size


def test_cached_low_count_is_rejected_without_recount():
    corpus = Corpus.build(["platform"])
    low = {"".join(c): 0 for c in itertools.combinations("PLATFORM", 3)}
    gen = TripletGenerator(corpus, RarityCache(low), rng=random.Random(2),
                           hard_probability=1.0, max_attempts=200)
    gen.count_in_sample = _no_recount

    with pytest.raises(GenerationExhausted):
        gen.search(HARD)
    t = gen.generate()
    assert t.fallback is True


def test_sampling_counts_with_replacement(corpus):
    gen = TripletGenerator(corpus, rng=random.Random(0), sample_size=5)
    candidates = corpus.words_at_least(4)
    n = gen.count_in_sample("AAA", candidates)
    assert 0 <= n <= 5

    small = TripletGenerator(corpus, rng=random.Random(0))
    assert small.count_in_sample("PLM", ["PLATFORM", "PALM", "ZEBRA"]) == 2


@pytest.mark.parametrize("values,expected", [
    ([0.0, 0.0, 0.0], (0, 1, 2)),
    ([0.5, 0.5, 0.5], (3, 6, 7)),
    ([0.99, 0.99, 0.99], (5, 7, 8)),   # idx2 on the last letter -> idx3 out of range
])
def test_chain_indices(values, expected):
    assert chain_indices(ScriptedRandom(values), 8) == expected


def test_fallback_when_budget_is_zero(corpus):
    for seed in range(30):
        gen = TripletGenerator(corpus, rng=random.Random(seed), max_attempts=0)
        with pytest.raises(GenerationExhausted):
            gen.search(EASY)
        t = gen.generate()
        assert t.fallback is True and t.source_word is None
        assert len(set(t.letters)) == 3
        assert t.letters[2] not in "SGD"


def test_no_long_words_falls_back_in_hard_mode():
    corpus = Corpus.build(["plain", "zebra", "salmon"])
    gen = TripletGenerator(corpus, rng=random.Random(0), hard_probability=1.0)
    with pytest.raises(GenerationExhausted) as exc:
        gen.search(HARD)
    assert exc.value.attempts == 0
    assert gen.generate().fallback is True


def test_empty_corpus_raises():
    empty = Corpus.build([])
    with pytest.raises(CorpusEmpty):
        generate_triplet(empty, RarityCache(), rng=random.Random(0))
    with pytest.raises(CorpusEmpty):
        generate_round(empty, RarityCache(), rng=random.Random(0))
    with pytest.raises(ValueError):
        TripletGenerator(empty).generate()


def test_round_has_three_distinct_triplets(corpus):
    triplets = generate_round(corpus, RarityCache(), rng=random.Random(11))
    assert len(triplets) == 3
    assert len({t.letters for t in triplets}) == 3


def test_round_keeps_duplicate_after_retries(corpus):
    gen = TripletGenerator(corpus, rng=random.Random(0))
    calls = []

    def same():
        calls.append(1)
        return Triplet("ABC")

    gen.generate = same
    triplets = gen.generate_round()
    assert [t.letters for t in triplets] == ["ABC", "ABC", "ABC"]
    assert len(calls) == 1 + 100 + 100


def test_bad_arguments():
    with pytest.raises(ValueError):
        TripletGenerator(Corpus.build(["plain"]), sample_size=0)
