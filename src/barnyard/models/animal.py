"""Animal model for the Barnyard system."""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from barnyard.domain.enums import Color

from .barn import COLOR_TYPE
from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .barn import Barn


class Animal(Base, TimestampMixin):
    """Represents an animal living on the farm.

    An animal without an id has never been persisted; an animal without a
    barn is not currently placed. Whenever it is placed, ``favorite_color``
    equals the color of its barn.

    Attributes:
        id: Primary key, assigned by the store on first save
        name: Display name
        favorite_color: Color fixed at creation; selects the barn partition
        barn_id: Foreign key to the barn currently holding the animal
    """

    __tablename__ = "animals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    barn_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("barns.id"), nullable=True)

    name: Mapped[str] = mapped_column(String, nullable=False)
    favorite_color: Mapped[Color] = mapped_column(COLOR_TYPE, nullable=False)

    barn: Mapped[Optional["Barn"]] = relationship("Barn")

    __table_args__ = (
        Index("idx_animals_color", "favorite_color"),
        Index("idx_animals_barn", "barn_id"),
    )

    def __repr__(self) -> str:
        return f"<Animal(id={self.id}, name='{self.name}', color='{self.favorite_color}')>"
