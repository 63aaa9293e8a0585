import logging
import re

from models.event import Event
from src.commands import (
    AddEventCommand,
    ByeCommand,
    Command,
    DeleteCommand,
    DuplicateCommand,
    EditEventCommand,
    FindCommand,
    ListCommand,
)
from src.constants import FIND_PREFIX
from src.event_manager import EventManager
from src.event_parser import parse_event_details
from src.exceptions import SyncError
from src.ui import UI

logger = logging.getLogger(__name__)

INVALID_INDEX_FORMAT = "Invalid index format. Use a number."
INDEX_PATTERN = re.compile(r"-?[0-9]+")


def _parse_index(value: str) -> int:
    """Convert a 1-based index typed by the user to a 0-based one."""
    if not INDEX_PATTERN.fullmatch(value):
        raise ValueError(f"invalid literal for int() with base 10: {value!r}")
    return int(value) - 1


class Parser:
    """Turn one command line, plus any follow-up input, into a Command.

    Follow-up input is read through the UI. There is no retry: a malformed follow-up line
    fails the whole command.
    """

    def __init__(self, event_manager: EventManager, ui: UI):
        self.event_manager = event_manager
        self.ui = ui
        self._builders = {
            "bye": ByeCommand,
            "list": ListCommand,
            "add": self.create_add_event_command,
            "delete": self.create_delete_command,
            "duplicate": self.create_duplicate_command,
            "edit": self.create_edit_command,
        }

    def parse(self, user_input: str) -> Command:
        keyword = user_input.strip().lower()
        if keyword.split(maxsplit=1)[:1] == [FIND_PREFIX]:
            return self.create_find_command(user_input)

        builder = self._builders.get(keyword)
        if builder is None:
            raise SyncError(SyncError.invalid_command_message(user_input))

        command = builder()
        logger.debug("Parsed %r into %r", user_input, command)
        return command

    @staticmethod
    def parse_find_keyword(user_input: str) -> str:
        keyword = user_input.strip()[len(FIND_PREFIX) :].strip().lower()
        if not keyword:
            raise SyncError("Keyword empty! Type properly.")
        return keyword

    def create_find_command(self, user_input: str) -> FindCommand:
        return FindCommand(self.parse_find_keyword(user_input))

    def find(self, user_input: str) -> list[Event]:
        """Search event descriptions for the keyword in `find <keyword>` and show the matches."""
        matching_events = self.event_manager.find_events(self.parse_find_keyword(user_input))
        self.ui.print_matching_events(matching_events)
        return matching_events

    def create_add_event_command(self) -> AddEventCommand:
        self.ui.show_add_format()
        details = parse_event_details(self.ui.read_line())
        return AddEventCommand(Event(**details))

    def create_delete_command(self) -> DeleteCommand:
        try:
            index = _parse_index(self.ui.read_line("Enter event index to delete: "))
        except ValueError:
            raise SyncError(INVALID_INDEX_FORMAT) from None
        return DeleteCommand(index)

    def create_duplicate_command(self) -> DuplicateCommand:
        user_input = self.ui.read_line("Enter duplicate command (format: index New Event Name): ")
        parts = user_input.strip().split(" ", 1)
        if len(parts) < 2:
            raise SyncError("Invalid duplicate command format. Use: index New Event Name")

        index, new_name = parts
        try:
            index = _parse_index(index)
        except ValueError:
            raise SyncError(INVALID_INDEX_FORMAT) from None

        event_to_duplicate = self.event_manager.get_event(index)
        return DuplicateCommand(event_to_duplicate, new_name.strip())

    def create_edit_command(self) -> EditEventCommand:
        try:
            index = _parse_index(self.ui.read_line("Enter event index to edit: "))
        except ValueError as e:
            raise SyncError(f"Error in editing event: {e}") from None
        return EditEventCommand(index)
