import logging
import sys


def setup_logging(level: str = "WARNING") -> None:
    logger = logging.getLogger("dumpsplit")
    logger.setLevel(level.upper())

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    # Replace handlers from earlier calls (stderr may have been swapped since)
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
