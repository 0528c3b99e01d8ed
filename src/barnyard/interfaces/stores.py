"""Store Protocol Interfaces.

This module defines the persistence contracts the farm service depends on.
Production code uses the SQLAlchemy implementations in
:mod:`barnyard.repository`; tests inject in-memory fakes.
"""

from collections.abc import Iterable, Sequence
from typing import Protocol

from barnyard.domain.enums import Color
from barnyard.models import Animal, Barn


class IAnimalStore(Protocol):
    """Protocol defining persistence operations for animals."""

    def find_all(self) -> Sequence[Animal]:
        """Return every stored animal."""
        ...

    def find_by_color(self, color: Color) -> Sequence[Animal]:
        """Return every stored animal whose favorite color is ``color``."""
        ...

    def find_by_id(self, animal_id: int) -> Animal | None:
        """Return the animal with ``animal_id``, or ``None`` if it does not exist."""
        ...

    def save(self, animal: Animal) -> Animal:
        """Insert or update an animal, assigning an id if it is new.

        Returns:
            The stored animal, with ``id`` populated
        """
        ...

    def save_all(self, animals: Iterable[Animal]) -> Sequence[Animal]:
        """Insert or update several animals in a single store call."""
        ...

    def delete(self, animal: Animal) -> None:
        """Delete a stored animal."""
        ...

    def delete_all(self) -> None:
        """Delete every stored animal."""
        ...


class IBarnStore(Protocol):
    """Protocol defining persistence operations for barns."""

    def find_all(self) -> Sequence[Barn]:
        """Return every stored barn."""
        ...

    def save(self, barn: Barn) -> Barn:
        """Insert or update a barn, assigning an id if it is new."""
        ...

    def delete(self, barn: Barn) -> None:
        """Delete a barn.

        Stores enforce referential integrity: deleting a barn that animals
        still reference fails.
        """
        ...

    def delete_all(self) -> None:
        """Delete every stored barn."""
        ...

    def count(self) -> int:
        """Return the number of stored barns."""
        ...
