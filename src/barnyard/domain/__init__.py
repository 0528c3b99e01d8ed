"""Domain rules for Barnyard.

This package holds everything that can run without a database:

* Enumerations (see :mod:`enums`).
* Error types shared by the service layer (see :mod:`errors`).
* Pure balancing functions over an in-memory barn view (see :mod:`balance`).
"""

from . import balance, enums, errors

__all__ = [
    "balance",
    "enums",
    "errors",
]
