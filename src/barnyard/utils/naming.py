"""Display names for generated barns and animals."""

DEFAULT_BARN_PREFIX = "barn"
DEFAULT_ANIMAL_PREFIX = "animal"


def barn_name(index: int, prefix: str = DEFAULT_BARN_PREFIX) -> str:
    """Return the label for the ``index``-th barn of a color.

    Examples:
        >>> barn_name(0)
        'barn-0'
        >>> barn_name(3, prefix="stable")
        'stable-3'

    Raises:
        ValueError: If index is negative
    """
    if index < 0:
        raise ValueError(f"index must be non-negative, got {index}")
    return f"{prefix}-{index}"


def animal_name(index: int, prefix: str = DEFAULT_ANIMAL_PREFIX) -> str:
    """Return a generated animal name such as ``animal-7``."""
    if index < 0:
        raise ValueError(f"index must be non-negative, got {index}")
    return f"{prefix}-{index}"
