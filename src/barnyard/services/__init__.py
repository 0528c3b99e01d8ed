"""Service layer for Barnyard.

Services depend on Protocol interfaces (IAnimalStore, IBarnStore) rather than
on a database session:

- Use factory.py for production dependency wiring
- Inject protocol-based fakes for testing (avoid complex mocking)

Production Usage:
    from barnyard.factory import create_animal_service
    service = create_animal_service(session)
    service.add_to_farm(Animal(name="Daisy", favorite_color=Color.RED))
    session.commit()

Testing Usage:
    from barnyard.services import AnimalService

    service = AnimalService(FakeAnimalStore(), FakeBarnStore(), capacity=4)
"""

from barnyard.services.animal_service import DEFAULT_BARN_CAPACITY, AnimalService, BarnOccupancy

__all__ = [
    "DEFAULT_BARN_CAPACITY",
    "AnimalService",
    "BarnOccupancy",
]
