import logging

from src.tracker import run_tracker


def test_run_tracker_session(manager, make_ui):
    ui = make_ui(
        "add",
        "Standup | 2024/03/04 09:00 | 2024/03/04 09:15 | Room 1 | Daily standup",
        "add",
        "Review | 2024/03/04 14:00 | 2024/03/04 15:00 | Room 2 | Sprint review",
        "duplicate",
        "1 Standup again",
        "edit",
        "2",
        " | | | Room 3 | ",
        "delete",
        "1",
        "list",
        "bye",
        "list",
    )

    run_tracker(manager, ui)

    events = manager.get_events()
    assert [event.name for event in events] == ["Review", "Standup again"]
    assert events[0].location == "Room 3"
    assert events[1].description == "Daily standup"
    output = ui.writer.getvalue()
    assert output.count("Events (2):") == 1
    assert output.rstrip().endswith("Bye! See you soon.")


def test_run_tracker_keeps_going_after_errors(manager, make_ui, caplog):
    ui = make_ui(
        "dance",
        "delete",
        "abc",
        "delete",
        "1",
        "add",
        "Broken | 2024/03/04 | 2024/03/04 09:15 | Room 1 | Oops",
        "find",
        "",
        "add",
        "Standup | 2024/03/04 09:00 | 2024/03/04 09:15 | Room 1 | Daily standup",
        "bye",
    )

    with caplog.at_level(logging.INFO, logger="src.tracker"):
        run_tracker(manager, ui)

    output = ui.writer.getvalue()
    assert "Error: Invalid command: 'dance'" in output
    assert "Error: Invalid index format. Use a number." in output
    assert "Error: Invalid event index." in output
    assert "Error: Invalid event details" in output
    assert "Error: Keyword empty! Type properly." in output
    assert [event.name for event in manager.get_events()] == ["Standup"]
    assert len([record for record in caplog.records if "failed" in record.getMessage()]) == 5


def test_run_tracker_stops_at_end_of_input(manager, make_ui):
    ui = make_ui("add", "Standup | 2024/03/04 09:00 | 2024/03/04 09:15 | Room 1 | Daily standup", "list")

    run_tracker(manager, ui)

    assert len(manager) == 1
    assert "1. Standup" in ui.writer.getvalue()


def test_run_tracker_stops_when_input_ends_mid_command(manager, make_ui):
    ui = make_ui("add")

    run_tracker(manager, ui)

    assert len(manager) == 0
    assert "Enter event details" in ui.writer.getvalue()
