import sys
from typing import Iterable, TextIO

from models.event import Event
from src.constants import DATE_FORMAT_HINT

SEPARATOR = "-" * 60


class UI:
    """Console presentation layer.

    Reads and writes go through the given streams, so the whole tracker can be driven with
    in-memory streams.
    """

    def __init__(self, reader: TextIO = sys.stdin, writer: TextIO = sys.stdout):
        self.reader = reader
        self.writer = writer

    def _print(self, text: str = "") -> None:
        self.writer.write(f"{text}\n")

    def read_line(self, prompt: str = "") -> str:
        """Read one line, without the trailing newline. Raise EOFError at the end of the input."""
        if prompt:
            self.writer.write(prompt)
            self.writer.flush()
        line = self.reader.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def read_command(self) -> str:
        return self.read_line("> ")

    def show_welcome(self) -> None:
        self._print(SEPARATOR)
        self._print("Welcome to EventSync! Type a command: add, delete, duplicate, edit, find, list or bye.")
        self._print(SEPARATOR)

    def show_goodbye(self) -> None:
        self._print("Bye! See you soon.")

    def show_add_format(self) -> None:
        self._print(
            f"Enter event details: name | {DATE_FORMAT_HINT} | {DATE_FORMAT_HINT} | location | description"
        )

    def show_edit_format(self, event: Event) -> None:
        self._print(f"Editing: {event}")
        self._print(
            f"Enter new details: name | {DATE_FORMAT_HINT} | {DATE_FORMAT_HINT} | location | description"
        )
        self._print("Leave a field empty to keep its current value.")

    def show_error(self, error: Exception) -> None:
        self._print(f"Error: {error}")

    def _print_numbered(self, events: Iterable[Event]) -> None:
        for position, event in enumerate(events, start=1):
            self._print(f"{position}. {event}")

    def print_events(self, events: list[Event]) -> None:
        if not events:
            self._print("No events found.")
            return
        self._print(f"Events ({len(events)}):")
        self._print(SEPARATOR)
        self._print_numbered(events)
        self._print(SEPARATOR)

    def print_matching_events(self, events: list[Event]) -> None:
        if not events:
            self._print("No matching events found.")
            return
        self._print(f"Matching events ({len(events)}):")
        self._print(SEPARATOR)
        self._print_numbered(events)
        self._print(SEPARATOR)

    def show_event_added(self, event: Event) -> None:
        self._print(f"Event added: {event}")

    def show_event_deleted(self, event: Event) -> None:
        self._print(f"Event deleted: {event}")

    def show_event_duplicated(self, event: Event) -> None:
        self._print(f"Event duplicated: {event}")

    def show_event_edited(self, event: Event) -> None:
        self._print(f"Event updated: {event}")
