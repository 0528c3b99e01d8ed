"""Enumerations for the Barnyard domain."""

from __future__ import annotations

from enum import StrEnum


class Color(StrEnum):
    """Favorite colors an animal can have; barns are partitioned by color."""

    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    INDIGO = "indigo"
    VIOLET = "violet"
    DARKER_THAN_BLACK = "darker_than_black"
