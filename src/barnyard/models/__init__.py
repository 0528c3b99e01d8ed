"""SQLAlchemy models for the Barnyard system.

This module exports all database models and the declarative base.
"""

from .animal import Animal
from .barn import Barn
from .base import Base, TimestampMixin

__all__ = [
    "Animal",
    "Barn",
    "Base",
    "TimestampMixin",
]
