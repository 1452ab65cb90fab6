import os
import sys
import logging
from typing import List, Optional
from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from ..pipeline.count_vertical_lines import count_vertical_lines
from ..repositories.image_repository import ImageRepository

logger = logging.getLogger(__name__)

USAGE = "Usage: count-lines <Absolute_Path_To_Image>"

EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_USAGE = 2
EXIT_NOT_FOUND = 3
EXIT_ACCESS = 4
EXIT_IO = 5


def configure_logging() -> None:
    # Logs go to stderr; stdout carries only the count or the error line.
    level = getattr(logging, os.getenv("LINE_COUNTER_LOG_LEVEL", "WARNING").upper(), logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )
    ImageRepository.set_decoder_log_level(level)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Print the number of vertical black lines in the image named on the command line.

    Exactly one line is written to stdout: the count, or one error message.

    Returns:
        int: Process exit code (0 on success).
    """
    configure_logging()
    args = sys.argv[1:] if argv is None else argv

    if len(args) != 1:
        print("Invalid number of arguments.")
        print(USAGE)
        return EXIT_USAGE

    try:
        result = count_vertical_lines(args[0])
    except FileNotFoundError as err:
        print(f"File Error: {err}")
        return EXIT_NOT_FOUND
    except PermissionError:
        print("Access Error: The application lacks permission to read this file.")
        return EXIT_ACCESS
    except OSError as err:
        print(f"Input/Output Error: {err}")
        return EXIT_IO
    except Exception as err:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Unexpected Error: {err}")
        return EXIT_UNEXPECTED

    print(result.line_count)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
