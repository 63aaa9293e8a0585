import logging

from src.event_manager import EventManager
from src.exceptions import SyncError
from src.parser import Parser
from src.ui import UI

logger = logging.getLogger(__name__)


def run_tracker(manager: EventManager, ui: UI, parser: Parser = None) -> None:
    """Read, parse and execute commands until `bye` or the end of the input."""
    parser = parser or Parser(manager, ui)
    ui.show_welcome()
    while True:
        try:
            user_input = ui.read_command()
            if not user_input.strip():
                continue
            command = parser.parse(user_input)
            command.execute(manager, ui)
        except SyncError as e:
            logger.info("Command %r failed: %s", user_input, e)
            ui.show_error(e)
            continue
        except EOFError:
            logger.debug("End of input reached")
            break

        if command.is_exit:
            break
