"""
Global test configuration for LineUp.

Provides fixed reference instants, event factories and an in-memory SQLite
database bound to the unit-of-work session.
"""

import sys
from datetime import UTC, datetime
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Ensure the project src directory is importable without relying on external environment.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from lineup.domain.models import Event  # noqa: E402
from lineup.infra import db as db_module  # noqa: E402

# Sunday 2026-10-18 starts the reference week; Monday is 2026-10-19.
SUNDAY = datetime(2026, 10, 18, tzinfo=UTC)
MONDAY = datetime(2026, 10, 19, tzinfo=UTC)
TUESDAY = datetime(2026, 10, 20, tzinfo=UTC)


def at(day: datetime, hour: int, minute: int = 0) -> datetime:
    return day.replace(hour=hour, minute=minute)


def make_event(
    event_id: str,
    start: datetime,
    end: datetime,
    screens: tuple[str, ...] = (),
    *,
    name: str | None = None,
    location: str = "",
    tags: tuple[str, ...] = (),
) -> Event:
    return Event(
        id=event_id,
        name=name or event_id,
        start=start,
        end=end,
        location=location,
        target_screen_ids=frozenset(screens),
        tags=frozenset(tags),
    )


@pytest.fixture
def scenario_events() -> list[Event]:
    """E1/E2 overlap on Monday morning, E3 runs Tuesday afternoon."""
    return [
        make_event("E3", at(TUESDAY, 14), at(TUESDAY, 15), ("S2",)),
        make_event("E2", at(MONDAY, 9, 30), at(MONDAY, 11), ("S1", "S2")),
        make_event("E1", at(MONDAY, 9), at(MONDAY, 10), ("S1",)),
    ]


@pytest.fixture
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    db_module.create_schema(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def TestSessionLocal(engine, monkeypatch):
    """Point the unit-of-work session at the in-memory database."""
    factory = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    monkeypatch.setattr(db_module, "SessionLocal", factory)
    return factory


@pytest.fixture
def db(TestSessionLocal):
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
