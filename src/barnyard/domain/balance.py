"""Pure balancing rules for barns of a single color.

Every function here works on a *barn view*: a mapping of barn to the mutable
list of animals it currently holds, built fresh for one service call and
discarded afterwards. Nothing in this module touches a store; callers persist
the animals the functions report as moved.

The view never contains a barn without members, because it is derived from
the animals of the color rather than from the barns.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, TypeAlias

from .errors import InternalConsistencyError

if TYPE_CHECKING:
    from barnyard.models import Animal, Barn

BarnView: TypeAlias = "dict[Barn, list[Animal]]"
BarnEntry: TypeAlias = "tuple[Barn, list[Animal]]"


def occupancy(entry: BarnEntry) -> int:
    """Comparison key used for every least/most populated lookup."""
    return len(entry[1])


def group_by_barn(animals: Iterable[Animal]) -> BarnView:
    """Build a barn view from a flat list of placed animals.

    Raises:
        InternalConsistencyError: If a stored animal is not in any barn
    """
    view: BarnView = {}
    for animal in animals:
        if animal.barn is None:
            raise InternalConsistencyError(f"Stored animal {animal.id} is not in a barn.")
        view.setdefault(animal.barn, []).append(animal)
    return view


def least_populated(view: BarnView) -> BarnEntry | None:
    """Return the barn with the fewest animals, or ``None`` for an empty view."""
    return min(view.items(), key=occupancy, default=None)


def most_populated(view: BarnView) -> BarnEntry | None:
    """Return the barn with the most animals, or ``None`` for an empty view."""
    return max(view.items(), key=occupancy, default=None)


def spread(view: BarnView) -> int:
    """Difference between the fullest and the emptiest barn in the view."""
    if not view:
        return 0
    sizes = [len(members) for members in view.values()]
    return max(sizes) - min(sizes)


def total_animals(view: BarnView) -> int:
    return sum(len(members) for members in view.values())


def _require(entry: BarnEntry | None) -> BarnEntry:
    if entry is None:
        raise InternalConsistencyError("The barn view should not be empty at this point.")
    return entry


def rebalance(view: BarnView) -> list[Animal]:
    """Move animals one at a time until the spread is at most one.

    Each step takes the first animal of the most populated barn and moves it
    into the least populated barn, updating both the view and the animal's
    barn reference.

    Args:
        view: Barn view for one color; mutated in place

    Returns:
        The animals whose barn changed, each listed once, in move order
    """
    moved: dict[Animal, None] = {}

    while spread(view) > 1:
        _, fullest = _require(most_populated(view))
        target, emptiest = _require(least_populated(view))

        animal = fullest.pop(0)
        animal.barn = target
        emptiest.append(animal)
        moved[animal] = None

    return list(moved)


def _same_barn(candidate: Barn, barn: Barn) -> bool:
    if candidate is barn:
        return True
    return candidate.id is not None and candidate.id == barn.id


def redistribute(view: BarnView, barn: Barn) -> list[Animal]:
    """Empty ``barn`` into the remaining barns of the view.

    The barn's entry is dropped from the view and each of its former members
    is placed, one after another, into whichever remaining barn is currently
    the least populated. An empty view means the color has no animals left, so
    there is nothing to move.

    Args:
        view: Barn view for one color; mutated in place
        barn: Barn being retired

    Returns:
        The animals that were reassigned

    Raises:
        InternalConsistencyError: If the view is non-empty but does not hold
            ``barn``, or no barn is left to receive its members
    """
    if not view:
        return []

    retired = next((key for key in view if _same_barn(key, barn)), None)
    if retired is None:
        raise InternalConsistencyError(f"Barn {barn.id} is missing from the barn view.")

    members = view.pop(retired)
    for animal in members:
        target, target_members = _require(least_populated(view))
        animal.barn = target
        target_members.append(animal)

    return members
