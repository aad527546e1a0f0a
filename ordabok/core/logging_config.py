import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger; uvicorn's own loggers are left alone."""
    logging.basicConfig(
        stream=sys.stdout,
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
