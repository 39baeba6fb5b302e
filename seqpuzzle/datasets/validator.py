"""
Dictionary report for seqpuzzle.

What this module does:
- Inspect a raw dictionary file (one word per line) before it becomes a Corpus.
- Count valid lines (alphabetic, length >= 3), invalid lines, duplicates.
- Count how many valid words the excluded-suffix rule drops and the resulting corpus size.
- Compute SHA-256 of the raw file for run manifests.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from seqpuzzle.datasets import describe_wordlist, pretty_summary
    rep = describe_wordlist("/usr/share/dict/words")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List
import hashlib

from seqpuzzle.config import EXCLUDED_SUFFIXES, MIN_CORPUS_WORD_LENGTH
from .corpus import ALPHA_ONLY, keep_word


@dataclass
class WordlistReport:
    """Diagnostics and metadata for one raw dictionary file."""
    path: str              # file path (as given)
    exists: bool           # did the file exist on disk?
    sha256: str            # SHA-256 of raw file bytes (empty string if missing)
    raw_count: int         # non-blank lines
    valid_count: int       # alphabetic lines with length >= 3
    unique_count: int      # valid words after case-insensitive dedupe
    invalid_lines: int     # blank, non-alphabetic or too-short lines
    suffix_excluded: int   # unique valid words dropped by the suffix rule
    corpus_size: int       # words a Corpus built from this file would hold
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def describe_wordlist(path: str, *, excluded_suffixes=EXCLUDED_SUFFIXES) -> Dict:
    """
    Inspect a raw dictionary file.

    Parameters
    ----------
    path : str
        Path to the dictionary (one word per line).
    excluded_suffixes : sequence of str
        Suffix rule applied when building the corpus.

    Returns
    -------
    Dict
        JSON-serializable WordlistReport; `passed` requires the file to exist
        and to yield a non-empty corpus. Invalid lines are reported as issues
        but don't fail the check (system dictionaries carry plenty of them).
    """
    p = Path(path)
    issues: List[str] = []

    if not p.exists():
        issues.append(f"dictionary file not found: {path}")
        rep = WordlistReport(path, False, "", 0, 0, 0, 0, 0, 0, False, issues)
        return asdict(rep)

    raw_count = 0
    invalid = 0
    valid: List[str] = []
    with p.open("r", encoding="utf-8", errors="ignore") as f:
        for line in f:
            w = line.strip()
            if not w:
                invalid += 1
                continue
            raw_count += 1
            if len(w) >= MIN_CORPUS_WORD_LENGTH and ALPHA_ONLY.match(w):
                valid.append(w.upper())
            else:
                invalid += 1

    unique = set(valid)
    corpus_words = {w for w in unique if keep_word(w, excluded_suffixes=excluded_suffixes)}
    suffix_excluded = len(unique) - len(corpus_words)

    if not corpus_words:
        issues.append("dictionary yields an empty corpus")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid line(s)")
    if len(valid) != len(unique):
        issues.append("dictionary contains duplicate words")

    rep = WordlistReport(
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        raw_count=raw_count,
        valid_count=len(valid),
        unique_count=len(unique),
        invalid_lines=invalid,
        suffix_excluded=suffix_excluded,
        corpus_size=len(corpus_words),
        passed=bool(corpus_words),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for console/docs.

    Example:
        words=235886 (valid=234371, uniq=233614, sha=abc123...) | suffix-dropped=104233 | corpus=129381 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['raw_count']} (valid={report['valid_count']}, "
        f"uniq={report['unique_count']}, sha={sha}) "
        f"| suffix-dropped={report['suffix_excluded']} "
        f"| corpus={report['corpus_size']} | {status}"
    )
