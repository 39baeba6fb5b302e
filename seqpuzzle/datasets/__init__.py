from .corpus import Corpus
from .validator import describe_wordlist, pretty_summary
from .io import read_lines, write_lines

__all__ = ["Corpus", "describe_wordlist", "pretty_summary", "read_lines", "write_lines"]
