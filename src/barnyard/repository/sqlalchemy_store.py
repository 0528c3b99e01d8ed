"""SQLAlchemy-backed stores for animals and barns.

Both stores flush after each write so identities are assigned and foreign key
violations surface immediately. They never commit: the session owner decides
the transaction boundary.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from barnyard.domain.enums import Color
from barnyard.models import Animal, Barn


class SqlAlchemyAnimalStore:
    """Persist animals through a SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_all(self) -> Sequence[Animal]:
        return self.session.scalars(select(Animal).order_by(Animal.id)).all()

    def find_by_color(self, color: Color) -> Sequence[Animal]:
        stmt = select(Animal).where(Animal.favorite_color == color).order_by(Animal.id)
        return self.session.scalars(stmt).all()

    def find_by_id(self, animal_id: int) -> Animal | None:
        return self.session.get(Animal, animal_id)

    def save(self, animal: Animal) -> Animal:
        self.session.add(animal)
        self.session.flush()
        return animal

    def save_all(self, animals: Iterable[Animal]) -> Sequence[Animal]:
        batch = list(animals)
        if batch:
            self.session.add_all(batch)
            self.session.flush()
        return batch

    def delete(self, animal: Animal) -> None:
        self.session.delete(animal)
        self.session.flush()

    def delete_all(self) -> None:
        self.session.execute(delete(Animal))


class SqlAlchemyBarnStore:
    """Persist barns through a SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_all(self) -> Sequence[Barn]:
        return self.session.scalars(select(Barn).order_by(Barn.id)).all()

    def save(self, barn: Barn) -> Barn:
        self.session.add(barn)
        self.session.flush()
        return barn

    def delete(self, barn: Barn) -> None:
        self.session.delete(barn)
        self.session.flush()

    def delete_all(self) -> None:
        self.session.execute(delete(Barn))

    def count(self) -> int:
        result = self.session.execute(select(func.count()).select_from(Barn)).scalar()
        return result or 0
