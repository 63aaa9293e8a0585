from src.constants import DATE_FORMAT_HINT

AVAILABLE_COMMANDS = ("add", "delete", "duplicate", "edit", "find", "list", "bye")


class SyncError(Exception):
    """Usage error raised for any command that can't be parsed or executed."""

    @staticmethod
    def invalid_command_message(command: str) -> str:
        return f"Invalid command: '{command}'. Available commands: {', '.join(AVAILABLE_COMMANDS)}."

    @staticmethod
    def invalid_event_details_message() -> str:
        return (
            "Invalid event details. Use: "
            f"name | {DATE_FORMAT_HINT} | {DATE_FORMAT_HINT} | location | description"
        )
