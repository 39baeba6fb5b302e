"""
Error taxonomy for the puzzle core.

Submission rejections are NOT exceptions (see engine.types.RejectReason);
these classes cover the generation side only.
"""


class PuzzleError(Exception):
    """Base class for puzzle-core errors."""


class CorpusEmpty(PuzzleError, ValueError):
    """The corpus holds no words, so no triplet can ever be drawn from it."""


class GenerationExhausted(PuzzleError):
    """
    The rarity search used its whole attempt budget without finding a triplet.
    Absorbed by TripletGenerator.generate(), which falls back to random letters.
    """

    def __init__(self, attempts: int, hard_mode: bool):
        self.attempts = attempts
        self.hard_mode = hard_mode
        mode = "hard" if hard_mode else "easy"
        super().__init__(f"no qualifying triplet after {attempts} attempts ({mode} mode)")
