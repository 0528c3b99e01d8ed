"""Service Factory for Barnyard.

This module provides factory functions for creating service instances with
proper dependency wiring. Use these functions in production code to ensure
the service is backed by the SQLAlchemy stores and configured capacity.

For testing, inject protocol-based fakes instead of using these factories.

Example:
    # Production usage
    from barnyard.factory import create_animal_service
    service = create_animal_service(session)

    # Testing usage
    from barnyard.services import AnimalService
    service = AnimalService(FakeAnimalStore(), FakeBarnStore(), capacity=4)
"""

from functools import partial

from sqlalchemy.orm import Session

from barnyard.config import Settings, get_settings
from barnyard.repository import SqlAlchemyAnimalStore, SqlAlchemyBarnStore
from barnyard.services import AnimalService
from barnyard.utils.naming import barn_name


def create_animal_service(session: Session, settings: Settings | None = None) -> AnimalService:
    """Create an AnimalService with all dependencies.

    Args:
        session: Database session
        settings: Settings to read capacity and naming from; defaults to the
            cached application settings

    Returns:
        Fully initialized AnimalService
    """
    settings = settings or get_settings()
    return AnimalService(
        SqlAlchemyAnimalStore(session),
        SqlAlchemyBarnStore(session),
        capacity=settings.barn_capacity,
        barn_namer=partial(barn_name, prefix=settings.barn_name_prefix),
    )
