import io
from datetime import datetime

import pytest
from peewee import SqliteDatabase

from models.event import Event
from src.event_manager import EventManager
from src.ui import UI

MODELS = [Event]


@pytest.fixture(autouse=True, scope="session")
def test_database():
    test_db = SqliteDatabase(":memory:")
    test_db.bind(MODELS, bind_refs=False, bind_backrefs=False)
    test_db.connect()
    test_db.create_tables(MODELS)
    yield test_db
    test_db.close()


@pytest.fixture()
def db():
    yield
    Event.delete().execute()


@pytest.fixture()
def manager(db):
    return EventManager()


@pytest.fixture()
def make_ui():
    """Build a UI reading the given lines, the output is available on `ui.writer`."""

    def _make_ui(*lines):
        reader = io.StringIO("".join(f"{line}\n" for line in lines))
        return UI(reader=reader, writer=io.StringIO())

    return _make_ui


@pytest.fixture()
def events(manager):
    """Three events added to the manager, in order."""
    details = [
        ("Standup", "2024/03/04 09:00", "2024/03/04 09:15", "Room 1", "Daily standup"),
        ("Review", "2024/03/04 14:00", "2024/03/04 15:00", "Room 2", "Sprint review MEETING"),
        ("Lunch", "2024/03/05 12:00", "2024/03/05 13:00", "Cafe", "Team lunch"),
    ]
    return [
        manager.add_event(
            Event(
                name=name,
                start=_get_dt(start),
                end=_get_dt(end),
                location=location,
                description=description,
            )
        )
        for name, start, end, location, description in details
    ]


def _get_dt(value: str) -> datetime:
    return datetime.strptime(value, "%Y/%m/%d %H:%M")
