from .core import play_round, run_batch
from .io import write_csv, write_manifest
from .stats import summarize

__all__ = ["play_round", "run_batch", "write_csv", "write_manifest", "summarize"]
