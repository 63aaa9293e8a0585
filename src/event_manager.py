import logging

from models.event import Event
from src.event_parser import validate_event
from src.exceptions import SyncError

logger = logging.getLogger(__name__)


class EventManager:
    """Ordered collection of events, addressed by 0-based position."""

    def __init__(self):
        database = Event._meta.database
        database.connect(reuse_if_open=True)
        database.create_tables([Event])

    def __len__(self):
        return self.size()

    def size(self) -> int:
        return Event.select().count()

    def get_events(self) -> list[Event]:
        """Get all events in the order they were added."""
        return list(Event.select().order_by(Event.id))

    def validate_index(self, index: int) -> None:
        if not 0 <= index < self.size():
            raise SyncError("Invalid event index.")

    def get_event(self, index: int) -> Event:
        self.validate_index(index)
        return Event.select().order_by(Event.id).offset(index).limit(1).get()

    def add_event(self, event: Event) -> Event:
        event.save()
        logger.info("Added event %s", event)
        return event

    def remove_event(self, index: int) -> Event:
        event = self.get_event(index)
        event.delete_instance()
        logger.info("Removed event %s", event)
        return event

    def update_event(self, index: int, **fields) -> Event:
        """Overwrite the given fields of the event at `index`.

        Nothing is saved if the resulting start is after the end.
        """
        event = self.get_event(index)
        start = fields.get("start", event.start)
        end = fields.get("end", event.end)
        validate_event(start, end)

        for field, value in fields.items():
            setattr(event, field, value)
        event.save()
        logger.info("Updated event %d to %s", index + 1, event)
        return event

    def find_events(self, keyword: str) -> list[Event]:
        """Get events whose description contains `keyword`, ignoring case."""
        keyword = keyword.lower()
        return [event for event in self.get_events() if keyword in event.description.lower()]

    def clear(self) -> None:
        Event.delete().execute()
