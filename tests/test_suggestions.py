import random

from seqpuzzle.datasets import Corpus
from seqpuzzle.engine import AnswerSuggester, Triplet, is_ordered_subsequence, suggest_answers
from seqpuzzle.engine.suggestions import has_consonant_cluster, is_plausible

LIN_WORDS = [
    "plain", "linen", "saline", "malign", "linoleum", "trampoline", "discipline",
    "multilingual",  # too long
    "spline",        # S-P-L cluster
    "libation",      # -TION
    "aluminium",     # -IUM
    "collision",     # -SION
    "zebra",         # no match
]


def _suggester(seed=0, **kwargs):
    return AnswerSuggester(Corpus.build(LIN_WORDS), rng=random.Random(seed), **kwargs)


def test_no_matches_gives_empty_list():
    corpus = Corpus.build(["zebra", "salmon", "teapot"])
    assert suggest_answers(Triplet("LIN"), corpus, 3) == []


def test_one_word_per_preferred_length():
    for seed in range(10):
        got = _suggester(seed).suggest(Triplet("LIN"), 3)
        assert [len(w) for w in got] == [5, 6, 8]


def test_all_lengths_when_max_is_large():
    got = _suggester(1).suggest("LIN", 10)
    assert [len(w) for w in got] == [5, 6, 8, 10]


def test_filters_and_uniqueness():
    for seed in range(20):
        got = _suggester(seed).suggest("LIN", 10)
        assert len(got) == len(set(got))
        for w in got:
            assert is_ordered_subsequence(w, "LIN")
            assert 5 <= len(w) <= 10
            assert not has_consonant_cluster(w)
            assert not w.endswith(("IUM", "TION", "SION"))
            assert w not in {"MULTILINGUAL", "SPLINE", "LIBATION", "ALUMINIUM", "COLLISION"}


def test_unused_lengths_fill_remaining_slots():
    got = _suggester(2, length_order=(6,)).suggest("LIN", 3)
    assert len(got) == 3
    assert len(got[0]) == 6
    assert len({len(w) for w in got}) == 3


def test_never_more_than_max():
    s = _suggester(3)
    assert s.suggest("LIN", 1) and len(s.suggest("LIN", 1)) == 1
    assert s.suggest("LIN", 0) == []


def test_filter_helpers():
    assert has_consonant_cluster("RHYTHM")
    assert has_consonant_cluster("spline")
    assert not has_consonant_cluster("PLAIN")
    assert is_plausible("PLAIN")
    assert not is_plausible("CAT")
    assert not is_plausible("NATION")
    assert not is_plausible("MULTILINGUAL")
