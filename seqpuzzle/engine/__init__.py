from .matching import is_ordered_subsequence, count_matches, filter_matches
from .types import Triplet, SubmissionResult, REJECT_REASONS
from .errors import PuzzleError, CorpusEmpty, GenerationExhausted
from .validation import validate_submission, SubmissionValidator
from .suggestions import AnswerSuggester, suggest_answers

__all__ = [
    "is_ordered_subsequence", "count_matches", "filter_matches",
    "Triplet", "SubmissionResult", "REJECT_REASONS",
    "PuzzleError", "CorpusEmpty", "GenerationExhausted",
    "validate_submission", "SubmissionValidator",
    "AnswerSuggester", "suggest_answers",
]
