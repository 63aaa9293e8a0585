import argparse
import logging

from src.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT
from src.event_manager import EventManager
from src.tracker import run_tracker
from src.ui import UI


def main():
    parser = argparse.ArgumentParser(description="Keep track of your events from the command line.")
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level, logs go to stderr",
    )
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    run_tracker(EventManager(), UI())


if __name__ == "__main__":
    main()
