"""Persistence adapters for Barnyard."""

from barnyard.repository.sqlalchemy_store import SqlAlchemyAnimalStore, SqlAlchemyBarnStore

__all__ = [
    "SqlAlchemyAnimalStore",
    "SqlAlchemyBarnStore",
]
