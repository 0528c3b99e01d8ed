"""Deterministic random helpers for generating farm data.

Randomness is derived from a seed string so that demo data and test runs are
reproducible: the same seed always yields the same color or coin flip.

Examples:
    >>> seed = generate_seed("animal", 42)
    >>> seed
    'animal:42'
    >>> random_color(seed) == random_color(seed)
    True
"""

import hashlib
import random

from barnyard.domain.enums import Color


def generate_seed(context: str, index: int) -> str:
    """Generate a deterministic seed string of the form ``context:index``.

    Raises:
        ValueError: If context is empty or index is negative
    """
    if not context:
        raise ValueError("context cannot be empty")
    if index < 0:
        raise ValueError(f"index must be non-negative, got {index}")
    return f"{context}:{index}"


def _seed_to_int(seed: str) -> int:
    """Convert seed string to a stable 64-bit integer for random.Random().

    Args:
        seed: Seed string

    Returns:
        64-bit integer derived from SHA-256(seed)
    """
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big", signed=False)


def random_color(seed: str) -> Color:
    """Pick a color for a generated animal.

    Args:
        seed: Deterministic seed string (from generate_seed)

    Returns:
        One of the members of :class:`Color`
    """
    rng = random.Random(_seed_to_int(seed))
    return rng.choice(list(Color))


def coin_flip(seed: str) -> bool:
    """Return a deterministic boolean, used to pick random subsets of animals."""
    rng = random.Random(_seed_to_int(seed))
    return rng.random() < 0.5
