"""Shared pytest configuration and fixtures.

This adds the `src/` directory to `sys.path` so tests can import the
`barnyard` package without requiring an editable install in CI, and provides
in-memory store fakes that honor the store protocols, including the
barn-to-animal foreign key.
"""

import sys
from collections.abc import Iterable
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from barnyard.domain.enums import Color  # noqa: E402
from barnyard.models import Animal, Barn  # noqa: E402
from barnyard.services import AnimalService  # noqa: E402


class ForeignKeyViolation(Exception):
    """Raised by the fakes where a database would reject a write."""


class FakeAnimalStore:
    """Dictionary-backed IAnimalStore that records every batched write."""

    def __init__(self) -> None:
        self.rows: dict[int, Animal] = {}
        self.save_all_calls: list[list[Animal]] = []
        self._next_id = 1

    def find_all(self) -> list[Animal]:
        return list(self.rows.values())

    def find_by_color(self, color: Color) -> list[Animal]:
        return [animal for animal in self.rows.values() if animal.favorite_color == color]

    def find_by_id(self, animal_id: int) -> Animal | None:
        return self.rows.get(animal_id)

    def save(self, animal: Animal) -> Animal:
        if animal.barn is not None and animal.barn.id is None:
            raise ForeignKeyViolation("animal references an unsaved barn")
        if animal.id is None:
            animal.id = self._next_id
            self._next_id += 1
        self.rows[animal.id] = animal
        return animal

    def save_all(self, animals: Iterable[Animal]) -> list[Animal]:
        batch = list(animals)
        self.save_all_calls.append(batch)
        return [self.save(animal) for animal in batch]

    def delete(self, animal: Animal) -> None:
        del self.rows[animal.id]

    def delete_all(self) -> None:
        self.rows.clear()


class FakeBarnStore:
    """Dictionary-backed IBarnStore that refuses to delete occupied barns."""

    def __init__(self, animals: FakeAnimalStore) -> None:
        self.animals = animals
        self.rows: dict[int, Barn] = {}
        self.deleted: list[Barn] = []
        self._next_id = 1

    def find_all(self) -> list[Barn]:
        return list(self.rows.values())

    def save(self, barn: Barn) -> Barn:
        if barn.id is None:
            barn.id = self._next_id
            self._next_id += 1
        self.rows[barn.id] = barn
        return barn

    def delete(self, barn: Barn) -> None:
        if any(
            animal.barn is not None and animal.barn.id == barn.id
            for animal in self.animals.rows.values()
        ):
            raise ForeignKeyViolation(f"barn {barn.id} still holds animals")
        del self.rows[barn.id]
        self.deleted.append(barn)

    def delete_all(self) -> None:
        if any(animal.barn is not None for animal in self.animals.rows.values()):
            raise ForeignKeyViolation("barns still hold animals")
        self.rows.clear()

    def count(self) -> int:
        return len(self.rows)


def check_farm_invariants(service: AnimalService, expected_animals: int | None = None) -> None:
    """Assert every farm invariant over the persisted state of ``service``."""
    animals = list(service.animals.find_all())
    if expected_animals is not None:
        assert len(animals) == expected_animals, "Animal updates should reflect in stored entities."

    by_barn: dict[Barn, list[Animal]] = {}
    for animal in animals:
        assert animal.barn is not None, "Stored animals should be in a barn."
        by_barn.setdefault(animal.barn, []).append(animal)

    for barn, members in by_barn.items():
        assert len(members) <= barn.capacity, "Barns should not exceed capacity."
        assert all(
            animal.favorite_color == barn.color for animal in members
        ), "Animals should match the barn color."

    assert service.barns.count() == len(by_barn), "No barns should be empty."

    by_color: dict[Color, list[Barn]] = {}
    for barn in by_barn:
        by_color.setdefault(barn.color, []).append(barn)

    for barns in by_color.values():
        unused = [barn.capacity - len(by_barn[barn]) for barn in barns]
        min_capacity = min(barn.capacity for barn in barns)
        assert min_capacity > sum(unused), "Optimal barns should exist for capacity requirements."
        assert max(unused) - min(unused) <= 1, "Animal distribution should be balanced."


@pytest.fixture
def animal_store() -> FakeAnimalStore:
    return FakeAnimalStore()


@pytest.fixture
def barn_store(animal_store) -> FakeBarnStore:
    return FakeBarnStore(animal_store)


@pytest.fixture
def make_service(animal_store, barn_store):
    """Build an AnimalService over the fake stores with a chosen capacity."""

    def factory(capacity: int = 20) -> AnimalService:
        return AnimalService(animal_store, barn_store, capacity=capacity)

    return factory


@pytest.fixture
def fresh_service():
    """Build an AnimalService over brand new fake stores on every call.

    Stateless, so it is safe to use from hypothesis tests.
    """

    def factory(capacity: int = 20) -> AnimalService:
        animals = FakeAnimalStore()
        return AnimalService(animals, FakeBarnStore(animals), capacity=capacity)

    return factory


@pytest.fixture
def check_farm():
    return check_farm_invariants
