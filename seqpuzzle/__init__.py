"""Sequence puzzle core: triplet generation, submission validation and answer suggestion."""

__version__ = "0.1.0"
