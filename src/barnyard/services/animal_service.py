"""Animal Service for Barnyard.

This module places animals into barns and removes them again. Barns are
partitioned by color and share one capacity. After every operation, within
each color, no barn is empty, no barn is over capacity, and barn occupancies
differ by at most one.

Each call reads the whole color slice from the animal store, works on an
in-memory barn view (see :mod:`barnyard.domain.balance`) and writes the
result back, batching the animals moved by a rebalance into one
``save_all`` call. The caller owns the transaction around a call.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from barnyard.domain import balance
from barnyard.domain.enums import Color
from barnyard.domain.errors import AnimalNotFoundError, InternalConsistencyError
from barnyard.interfaces import IAnimalStore, IBarnStore
from barnyard.models import Animal, Barn
from barnyard.utils.naming import barn_name

logger = logging.getLogger(__name__)

DEFAULT_BARN_CAPACITY = 20


@dataclass(slots=True)
class BarnOccupancy:
    """A barn and the number of animals it currently holds."""

    barn: Barn
    occupancy: int


class AnimalService:
    """Service for allocating animals to barns."""

    def __init__(
        self,
        animals: IAnimalStore,
        barns: IBarnStore,
        *,
        capacity: int = DEFAULT_BARN_CAPACITY,
        barn_namer: Callable[[int], str] = barn_name,
    ):
        if capacity <= 0:
            raise ValueError(f"Barn capacity must be positive, got {capacity}")
        self.animals = animals
        self.barns = barns
        self.capacity = capacity
        self.barn_namer = barn_namer

    def find_all(self) -> list[Animal]:
        return list(self.animals.find_all())

    def get_animal(self, animal_id: int) -> Animal:
        animal = self.animals.find_by_id(animal_id)
        if animal is None:
            raise AnimalNotFoundError(f"Animal with ID {animal_id} not found.")
        return animal

    def delete_all(self) -> None:
        """Remove every animal, then every barn."""
        self.animals.delete_all()
        self.barns.delete_all()

    def add_to_farm(self, animal: Animal) -> Animal:
        """Place a new animal into the least populated barn of its color.

        A new barn is only built when every barn of the color is full; the
        color is then rebalanced so the new barn does not stay at one animal.

        Args:
            animal: An unsaved animal that is not in a barn

        Returns:
            The saved animal

        Raises:
            ValueError: If the animal already has an id or a barn
        """
        if animal.id is not None:
            raise ValueError("The animal must not have an ID.")
        if animal.barn is not None or animal.barn_id is not None:
            raise ValueError("The animal must not be in a barn already.")

        view = self._barn_view(animal.favorite_color)
        least = balance.least_populated(view)

        if least is None or len(least[1]) >= least[0].capacity:
            barn = self.barns.save(
                Barn(
                    name=self.barn_namer(len(view)),
                    color=animal.favorite_color,
                    capacity=self.capacity,
                )
            )
            logger.info("Built %s for color %s", barn.name, barn.color)

            animal.barn = barn
            saved = self.animals.save(animal)
            view[barn] = [saved]

            self._rebalance(view)
            return saved

        animal.barn = least[0]
        return self.animals.save(animal)

    def add_all_to_farm(self, animals: Iterable[Animal]) -> list[Animal]:
        return [self.add_to_farm(animal) for animal in animals]

    def remove_from_farm(self, animal: Animal) -> None:
        """Remove an animal and restore the balance of its color.

        When the animals left in the color exactly fill a whole number of
        barns, the barn the animal came from is retired and its remaining
        animals are spread over the other barns. Otherwise the color is
        rebalanced in place.

        Args:
            animal: A stored animal that is in a barn

        Raises:
            ValueError: If the animal has no id or is not in a barn
            AnimalNotFoundError: If the animal is not stored
        """
        if animal.id is None:
            raise ValueError("The animal must have an ID.")
        if animal.barn is None and animal.barn_id is None:
            raise ValueError("The animal must be in a barn.")

        found = self.get_animal(animal.id)
        origin = found.barn
        if origin is None:
            raise InternalConsistencyError(f"Stored animal {found.id} is not in a barn.")
        color = found.favorite_color

        self.animals.delete(found)

        view = self._barn_view(color)
        remaining = balance.total_animals(view)

        if remaining % self.capacity == 0:
            self._retire_barn(view, origin)
        else:
            self._rebalance(view)

    def remove_all_from_farm(self, animals: Iterable[Animal]) -> None:
        """Remove several animals.

        Each animal is re-read by id first: earlier removals may have moved
        it to another barn.
        """
        for animal in list(animals):
            if animal.id is None:
                raise ValueError("The animal must have an ID.")
            self.remove_from_farm(self.get_animal(animal.id))

    def list_barns(self) -> list[BarnOccupancy]:
        counts: dict[int, int] = {}
        for animal in self.animals.find_all():
            if animal.barn is not None:
                counts[animal.barn.id] = counts.get(animal.barn.id, 0) + 1
        return [BarnOccupancy(barn, counts.get(barn.id, 0)) for barn in self.barns.find_all()]

    def _barn_view(self, color: Color) -> balance.BarnView:
        return balance.group_by_barn(self.animals.find_by_color(color))

    def _rebalance(self, view: balance.BarnView) -> None:
        moved = balance.rebalance(view)
        if moved:
            logger.debug("Rebalance moved %d animal(s)", len(moved))
        # One write for the whole rebalance
        self.animals.save_all(moved)

    def _retire_barn(self, view: balance.BarnView, barn: Barn) -> None:
        """Spread the barn's animals over the rest of its color, then delete it.

        The animals must be saved before the barn is deleted, otherwise the
        foreign key from animals to barns blocks the delete.
        """
        moved = balance.redistribute(view, barn)
        self.animals.save_all(moved)
        self.barns.delete(barn)
        logger.info("Retired %s for color %s, moved %d animal(s)", barn.name, barn.color, len(moved))
