import random

import pytest

from seqpuzzle.datasets import Corpus

# Every word is 5+ letters and survives the suffix rule; about half are 8+.
WORDS = [
    "platform", "calendar", "mountain", "elephant", "hospital", "dinosaur", "umbrella",
    "triangle", "chocolate", "adventure", "kangaroo", "pineapple", "volcano", "planet",
    "garden", "basket", "candle", "dolphin", "jungle", "island", "lantern", "meadow",
    "orchard", "pencil", "rabbit", "salmon", "teapot", "violin", "walnut", "zebra",
    "blanket", "crystal", "harbour", "magnet", "notebook", "pumpkin", "rainbow",
    "sandwich", "telescope", "velvet", "whistle", "marathon", "necklace", "parachute",
    "skeleton", "tortoise", "universe", "waterfall", "labyrinth",
]


@pytest.fixture
def words():
    return list(WORDS)


@pytest.fixture
def corpus():
    return Corpus.build(WORDS)


@pytest.fixture
def rng():
    return random.Random(42)
