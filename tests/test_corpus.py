from seqpuzzle.config import PRECOMPUTED_VIEW_LENGTHS
from seqpuzzle.datasets import Corpus


def test_build_filters_and_normalizes():
    raw = ["cat", "at", "dogs", "jumped", "running", "faster", "biggest", "quickly",
           "reddish", "hello-world", "naïve", "Table", "TABLE", "  plain  ", ""]
    c = Corpus.build(raw)
    assert c.words == ("CAT", "TABLE", "PLAIN")


def test_suffix_rule_matches_whole_word_end_only():
    # "ED" inside a word is fine; only the ending counts.
    c = Corpus.build(["edit", "bedroom", "listen", "lyric", "shingle"])
    assert set(c.words) == {"EDIT", "BEDROOM", "LISTEN", "LYRIC", "SHINGLE"}


def test_build_is_deterministic(words):
    assert Corpus.build(words).words == Corpus.build(words).words


def test_empty_input_gives_empty_corpus():
    c = Corpus.build([])
    assert len(c) == 0
    assert not c


def test_words_at_least_and_membership(corpus):
    long_words = corpus.words_at_least(8)
    assert long_words and all(len(w) >= 8 for w in long_words)
    assert "PLATFORM" in long_words and "ZEBRA" not in long_words
    assert corpus.words_at_least(8) is long_words  # cached view
    assert "zebra" in corpus and "ZEBRA" in corpus and "zebras" not in corpus


def test_from_file(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("apple\nbananas\ncherry\n", encoding="utf-8")
    assert Corpus.from_file(p).words == ("APPLE", "CHERRY")


def test_common_length_views_built_with_corpus(corpus):
    assert set(PRECOMPUTED_VIEW_LENGTHS) <= set(corpus._views)
    for n in PRECOMPUTED_VIEW_LENGTHS:
        view = corpus.words_at_least(n)
        assert view is corpus.words_at_least(n)
        assert view == tuple(w for w in corpus.words if len(w) >= n)


def test_other_lengths_filtered_on_demand(corpus):
    assert 7 not in corpus._views
    assert corpus.words_at_least(7) == tuple(w for w in corpus.words if len(w) >= 7)
    assert 7 in corpus._views
