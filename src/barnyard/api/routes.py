"""HTTP routes for the Barnyard API."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session

from barnyard.api.runtime import ApiState
from barnyard.database import check_database_health
from barnyard.domain.enums import Color
from barnyard.domain.errors import AnimalNotFoundError, InternalConsistencyError
from barnyard.factory import create_animal_service
from barnyard.models import Animal
from barnyard.services import AnimalService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]


def get_session(state: ApiStateDep) -> Iterator[Session]:
    session = state.session_factory()
    try:
        yield session
    finally:
        session.close()


SessionDep = Annotated[Session, Depends(get_session)]


def get_service(state: ApiStateDep, session: SessionDep) -> AnimalService:
    return create_animal_service(session, state.settings)


AnimalServiceDep = Annotated[AnimalService, Depends(get_service)]


class AnimalCreateRequest(BaseModel):
    name: str = Field(min_length=1)
    favorite_color: Color


class AnimalBatchRequest(BaseModel):
    animals: list[AnimalCreateRequest] = Field(min_length=1)


class AnimalSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    favorite_color: Color
    barn_id: int | None


class BarnSummary(BaseModel):
    id: int
    name: str
    color: Color
    capacity: int
    occupancy: int


def _internal_error(exc: InternalConsistencyError) -> HTTPException:
    logger.error("farm state is inconsistent: %s", exc)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


@router.get("/health")
async def health(state: ApiStateDep, session: SessionDep) -> dict[str, object]:
    return {
        "status": "ok",
        "database": check_database_health(session),
        "barn_capacity": state.settings.barn_capacity,
    }


@router.get("/animals", response_model=list[AnimalSummary])
async def list_animals(service: AnimalServiceDep) -> list[AnimalSummary]:
    return [AnimalSummary.model_validate(animal) for animal in service.find_all()]


@router.post("/animals", response_model=AnimalSummary, status_code=status.HTTP_201_CREATED)
async def add_animal(
    request: AnimalCreateRequest, service: AnimalServiceDep, session: SessionDep
) -> AnimalSummary:
    try:
        animal = service.add_to_farm(
            Animal(name=request.name, favorite_color=request.favorite_color)
        )
    except InternalConsistencyError as exc:
        raise _internal_error(exc) from exc
    session.commit()
    return AnimalSummary.model_validate(animal)


@router.post(
    "/animals/batch",
    response_model=list[AnimalSummary],
    status_code=status.HTTP_201_CREATED,
)
async def add_animals(
    request: AnimalBatchRequest, service: AnimalServiceDep, session: SessionDep
) -> list[AnimalSummary]:
    try:
        animals = service.add_all_to_farm(
            Animal(name=item.name, favorite_color=item.favorite_color) for item in request.animals
        )
    except InternalConsistencyError as exc:
        raise _internal_error(exc) from exc
    session.commit()
    return [AnimalSummary.model_validate(animal) for animal in animals]


@router.delete("/animals/{animal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_animal(
    animal_id: int, service: AnimalServiceDep, session: SessionDep
) -> Response:
    try:
        service.remove_from_farm(service.get_animal(animal_id))
    except AnimalNotFoundError as exc:
        logger.warning("animal %s not found", animal_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except InternalConsistencyError as exc:
        raise _internal_error(exc) from exc
    session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/animals", status_code=status.HTTP_204_NO_CONTENT)
async def clear_farm(service: AnimalServiceDep, session: SessionDep) -> Response:
    service.delete_all()
    session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/barns", response_model=list[BarnSummary])
async def list_barns(service: AnimalServiceDep) -> list[BarnSummary]:
    return [
        BarnSummary(
            id=entry.barn.id,
            name=entry.barn.name,
            color=entry.barn.color,
            capacity=entry.barn.capacity,
            occupancy=entry.occupancy,
        )
        for entry in service.list_barns()
    ]
