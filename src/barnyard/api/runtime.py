"""Runtime state backing the Barnyard HTTP API."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session, sessionmaker

from barnyard.config import Settings, get_settings
from barnyard.database import get_engine, get_session_factory, init_db


@dataclass(slots=True)
class ApiState:
    """Settings and session factory shared by every request."""

    settings: Settings
    session_factory: sessionmaker[Session]


def build_state() -> ApiState:
    """Create the production state, creating tables on first use."""

    init_db(get_engine())
    return ApiState(settings=get_settings(), session_factory=get_session_factory())
