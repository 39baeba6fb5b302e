import pytest

from seqpuzzle.engine import SubmissionValidator, Triplet, is_ordered_subsequence, validate_submission
from seqpuzzle.lexicon import BaseLexicon, WordSetLexicon


class FakeLexicon(BaseLexicon):
    """Returns a fixed outcome and records every word it was asked about."""
    id = "fake"

    def __init__(self, outcome="found"):
        self.outcome = outcome
        self.calls = []

    def _check(self, word):
        self.calls.append(word)
        return self.outcome


LIN = Triplet("LIN")


@pytest.mark.parametrize("outcome", ["found", "not_found", "unavailable"])
def test_too_short_regardless_of_lexicon(outcome):
    lex = FakeLexicon(outcome)
    r = validate_submission("cat", Triplet("CAT"), lex)
    assert r.reason == "too_short" and not r.accepted
    assert lex.calls == []


@pytest.mark.parametrize("raw", ["", "   ", "\n"])
def test_empty_input(raw):
    r = validate_submission(raw, LIN, FakeLexicon())
    assert r.reason == "empty_input"
    assert r.message == "Please enter a word"


def test_order_violation_message():
    r = validate_submission("snail", LIN, FakeLexicon())
    assert r.reason == "order_violation"
    assert r.message == "Word must contain 'LIN' in order"


def test_blocked_never_reaches_lexicon():
    lex = FakeLexicon("found")
    r = validate_submission("asshole", Triplet("ASH"), lex)
    assert r.reason == "blocked"
    assert lex.calls == []


def test_blocklist_is_exact_match_only():
    lex = FakeLexicon("found")
    r = validate_submission("classic", Triplet("CSC"), lex)
    assert r.accepted


def test_hyphenated_word_is_not_real_without_lookup():
    lex = FakeLexicon("found")
    r = validate_submission("plain-song", LIN, lex)
    assert r.reason == "not_a_real_word"
    assert lex.calls == []


@pytest.mark.parametrize("outcome", ["not_found", "unavailable"])
def test_lexicon_failures_collapse_to_not_a_real_word(outcome):
    lex = FakeLexicon(outcome)
    r = validate_submission("plain", LIN, lex)
    assert r.reason == "not_a_real_word"
    assert r.message == "Not a valid English word"
    assert lex.calls == ["plain"]
    # The lexicon itself still tells the two apart.
    assert lex.check("plain") == outcome


def test_accepts_trimmed_lowercased_word():
    r = SubmissionValidator(WordSetLexicon(["plain"])).validate("  PLAIN ", LIN)
    assert r.accepted and r.reason is None
    assert r.word == "plain" and r.raw == "  PLAIN "
    assert r.triplet == LIN
    assert r.message == "Correct!"


def test_accepted_words_satisfy_order_and_length(words):
    validator = SubmissionValidator(WordSetLexicon(words))
    triplet = Triplet("ANT")
    for w in words + ["ant", "pant", "nat", "tan"]:
        r = validator.validate(w, triplet)
        if r.accepted:
            assert is_ordered_subsequence(r.word, triplet.letters)
            assert len(r.word) >= 5


def test_triplet_type_checks():
    assert Triplet.of(" lin ") == Triplet("LIN")
    assert str(Triplet("LIN")) == "LIN"
    # Metadata does not affect equality.
    assert Triplet("LIN", source_word="PLAIN") == Triplet("LIN", fallback=True)
    for bad in ["LI", "LINK", "lin", "L1N"]:
        with pytest.raises(ValueError):
            Triplet(bad)


class RaisingLexicon:
    """Plain object with lookup(word) -> bool that blows up mid-call."""

    def __init__(self, error):
        self.error = error
        self.calls = []

    def lookup(self, word):
        self.calls.append(word)
        raise self.error


@pytest.mark.parametrize("error", [TimeoutError("deadline exceeded"), RuntimeError("boom")])
def test_lexicon_exception_is_not_a_real_word(error, caplog):
    lex = RaisingLexicon(error)
    with caplog.at_level("WARNING", logger="seqpuzzle.engine.validation"):
        r = validate_submission("plain", LIN, lex)
    assert r.reason == "not_a_real_word" and not r.accepted
    assert lex.calls == ["plain"]
    assert "plain" in caplog.text


@pytest.mark.parametrize("raw", [None, 123, b"plain"])
def test_non_string_submission_raises(raw):
    with pytest.raises(ValueError):
        validate_submission(raw, LIN, FakeLexicon())
