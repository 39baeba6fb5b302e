from .cache import RarityCache
from .generator import (
    TripletGenerator,
    DifficultyProfile,
    HARD,
    EASY,
    chain_indices,
    generate_triplet,
    generate_round,
)

__all__ = [
    "RarityCache", "TripletGenerator", "DifficultyProfile", "HARD", "EASY",
    "chain_indices", "generate_triplet", "generate_round",
]
