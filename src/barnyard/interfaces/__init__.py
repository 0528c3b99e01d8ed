"""Protocol-based interfaces for Barnyard.

This module exports the store and service protocols, providing a clear
contract for implementations and enabling dependency injection and testing.
"""

from barnyard.interfaces.farm import IAnimalService
from barnyard.interfaces.stores import IAnimalStore, IBarnStore

__all__ = [
    "IAnimalService",
    "IAnimalStore",
    "IBarnStore",
]
