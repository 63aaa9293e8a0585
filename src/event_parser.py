import re
from datetime import datetime

from src.constants import DATE_FORMAT, DATE_PATTERN, EVENT_DETAILS_DELIMITER, EVENT_FIELD_COUNT, EVENT_FIELDS
from src.exceptions import SyncError


def validate_event(start_time: datetime, end_time: datetime) -> None:
    if start_time > end_time:
        raise SyncError("Event end can't be before event start.")


def _split_event_details(event_details: str) -> dict:
    """Split the pipe separated details line into a dict of trimmed strings."""
    parts = event_details.split(EVENT_DETAILS_DELIMITER)
    if len(parts) != EVENT_FIELD_COUNT:
        raise SyncError(SyncError.invalid_event_details_message())
    return dict(zip(EVENT_FIELDS, (part.strip() for part in parts)))


def _parse_date(value: str) -> datetime:
    if not re.fullmatch(DATE_PATTERN, value):
        raise SyncError(SyncError.invalid_event_details_message())
    try:
        return datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        raise SyncError(SyncError.invalid_event_details_message()) from None


def parse_event_details(event_details: str) -> dict:
    """Parse `name | start | end | location | description` into python datatypes."""
    details = _split_event_details(event_details)
    details["start"] = _parse_date(details["start"])
    details["end"] = _parse_date(details["end"])

    validate_event(details["start"], details["end"])
    return details


def parse_event_updates(event_details: str) -> dict:
    """Parse a details line where empty fields mean "keep the current value".

    Only the fields that were filled in are returned. Dates are not checked against each other
    here, since one of them may come from the event being edited.
    """
    details = _split_event_details(event_details)
    updates = {field: value for field, value in details.items() if value}
    for field in ("start", "end"):
        if field in updates:
            updates[field] = _parse_date(updates[field])
    return updates
