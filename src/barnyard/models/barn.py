"""Barn model for the Barnyard system.

A barn is a capacity-bounded, color-typed holder of animals. Membership is
stored on the animal side (``animals.barn_id``); the barn itself carries no
collection so that deleting a barn never silently detaches its members.
"""

from sqlalchemy import CheckConstraint, Enum, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, validates

from barnyard.domain.enums import Color

from .base import Base, TimestampMixin

COLOR_TYPE = Enum(
    Color,
    name="color",
    native_enum=False,
    length=32,
    values_callable=lambda enum: [member.value for member in enum],
)


class Barn(Base, TimestampMixin):
    """Represents a barn on the farm.

    Attributes:
        id: Primary key
        name: Display label (e.g. ``barn-3``)
        color: Color of every animal the barn may hold
        capacity: Maximum number of animals the barn can hold
    """

    __tablename__ = "barns"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    name: Mapped[str] = mapped_column(String, nullable=False)
    color: Mapped[Color] = mapped_column(COLOR_TYPE, nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint("capacity > 0", name="ck_barns_capacity"),
        Index("idx_barns_color", "color"),
    )

    @validates("capacity")
    def validate_capacity(self, key: str, value: int) -> int:  # noqa: ARG002
        """Reject non-positive capacities before they reach the database."""
        if value <= 0:
            raise ValueError(f"Barn capacity must be positive, got {value}")
        return value

    def __repr__(self) -> str:
        return f"<Barn(id={self.id}, name='{self.name}', color='{self.color}')>"
