from abc import ABC, abstractmethod

from models.event import Event
from src.event_manager import EventManager
from src.event_parser import parse_event_updates
from src.ui import UI


class Command(ABC):
    """A parsed user intent, ready to be applied to the events."""

    is_exit = False

    @abstractmethod
    def execute(self, manager: EventManager, ui: UI) -> None:
        ...

    def __repr__(self):
        attrs = ", ".join(f"{key}={value!r}" for key, value in vars(self).items())
        return f"{type(self).__name__}({attrs})"


class AddEventCommand(Command):
    def __init__(self, event: Event):
        self.event = event

    def execute(self, manager: EventManager, ui: UI) -> None:
        ui.show_event_added(manager.add_event(self.event))


class DeleteCommand(Command):
    def __init__(self, index: int):
        self.index = index

    def execute(self, manager: EventManager, ui: UI) -> None:
        ui.show_event_deleted(manager.remove_event(self.index))


class DuplicateCommand(Command):
    def __init__(self, event: Event, new_name: str):
        self.event = event
        self.new_name = new_name

    def execute(self, manager: EventManager, ui: UI) -> None:
        duplicate = manager.add_event(self.event.copy(name=self.new_name))
        ui.show_event_duplicated(duplicate)


class EditEventCommand(Command):
    def __init__(self, index: int):
        self.index = index

    def execute(self, manager: EventManager, ui: UI) -> None:
        # Fail on a bad index before asking for the new details.
        event = manager.get_event(self.index)
        ui.show_edit_format(event)
        updates = parse_event_updates(ui.read_line())
        ui.show_event_edited(manager.update_event(self.index, **updates))


class ListCommand(Command):
    def execute(self, manager: EventManager, ui: UI) -> None:
        ui.print_events(manager.get_events())


class FindCommand(Command):
    def __init__(self, keyword: str):
        self.keyword = keyword

    def execute(self, manager: EventManager, ui: UI) -> None:
        ui.print_matching_events(manager.find_events(self.keyword))


class ByeCommand(Command):
    is_exit = True

    def execute(self, manager: EventManager, ui: UI) -> None:
        ui.show_goodbye()
