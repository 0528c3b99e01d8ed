"""Farm Service Protocol Interface.

This module defines the protocol (interface) for placing animals into barns
and removing them again while keeping every color's barns balanced.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

from barnyard.models import Animal

if TYPE_CHECKING:
    from barnyard.services.animal_service import BarnOccupancy


class IAnimalService(Protocol):
    """Protocol defining the interface for farm allocation operations.

    After every call, for each color: no barn is empty, no barn exceeds its
    capacity, and barn occupancies differ by at most one.
    """

    def find_all(self) -> list[Animal]:
        """Return every animal on the farm."""
        ...

    def get_animal(self, animal_id: int) -> Animal:
        """Return a stored animal.

        Raises:
            AnimalNotFoundError: If no animal has ``animal_id``
        """
        ...

    def delete_all(self) -> None:
        """Remove every animal and every barn."""
        ...

    def add_to_farm(self, animal: Animal) -> Animal:
        """Place a new animal into a barn of its favorite color.

        Args:
            animal: An unsaved animal that is not in a barn

        Returns:
            The saved animal, now referencing its barn

        Raises:
            ValueError: If the animal already has an id or a barn
        """
        ...

    def add_all_to_farm(self, animals: Iterable[Animal]) -> list[Animal]:
        """Place several animals, one after another."""
        ...

    def remove_from_farm(self, animal: Animal) -> None:
        """Remove an animal from the farm and rebalance its color.

        Raises:
            ValueError: If the animal has no id or is not in a barn
            AnimalNotFoundError: If the animal is not stored
        """
        ...

    def remove_all_from_farm(self, animals: Iterable[Animal]) -> None:
        """Remove several animals, re-reading each one before removal."""
        ...

    def list_barns(self) -> list["BarnOccupancy"]:
        """Return every barn together with its current number of animals."""
        ...
