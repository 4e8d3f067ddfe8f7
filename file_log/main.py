"""file-log - Main Entry Point.

Appends each argument (or each stdin line) to LOG_FILE_PATH as an
info line.
"""

import sys
from typing import Optional
from . import config
from .errors import CannotCreateFile
from .interfaces import Level
from .logger import file_logger


def main(argv: Optional[list[str]] = None) -> int:
    """Write messages to the configured log file."""
    messages = sys.argv[1:] if argv is None else argv

    # Validate config (early return)
    if not config.LOG_FILE_PATH:
        print("ERROR: LOG_FILE_PATH not set", file=sys.stderr)
        return 1

    try:
        level = Level.parse(config.LOG_LEVEL)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    try:
        logger = file_logger(
            config.LOG_LABEL, config.LOG_FILE_PATH, encoding=config.LOG_ENCODING
        )
    except CannotCreateFile:
        return 1
    except OSError as e:
        print(f"ERROR: cannot open log file: {e}", file=sys.stderr)
        return 1
    except LookupError as e:
        print(f"ERROR: bad LOG_ENCODING: {e}", file=sys.stderr)
        return 1

    logger.log_level = level

    if not messages:
        messages = [line.rstrip("\n") for line in sys.stdin if line.strip()]

    with logger.handler:
        for message in messages:
            logger.info(message)

    return 0


if __name__ == "__main__":
    sys.exit(main())
