from peewee import AutoField, DateTimeField, Model, TextField

from models import db
from src.constants import DATE_FORMAT


class Event(Model):
    # Only records insertion order, users address events by position.
    id = AutoField()
    name = TextField()
    start = DateTimeField()
    end = DateTimeField()
    location = TextField(default="")
    description = TextField(default="")

    class Meta:
        database = db

    def copy(self, **overrides) -> "Event":
        """Return an unsaved event with the same details, except for `overrides`."""
        details = {
            "name": self.name,
            "start": self.start,
            "end": self.end,
            "location": self.location,
            "description": self.description,
        }
        details.update(overrides)
        return Event(**details)

    def __str__(self):
        return (
            f"{self.name} | "
            f"{self.start.strftime(DATE_FORMAT)} -> "
            f"{self.end.strftime(DATE_FORMAT)} | "
            f"{self.location} | "
            f"{self.description}"
        )
