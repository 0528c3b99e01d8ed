"""Naming and random-data helpers for Barnyard."""

from barnyard.utils.naming import animal_name, barn_name
from barnyard.utils.rng import coin_flip, generate_seed, random_color

__all__ = [
    "animal_name",
    "barn_name",
    "coin_flip",
    "generate_seed",
    "random_color",
]
