import logging
import sys
from pathlib import Path

from slugroute.core.paths import LOGS_DIR


def setup_logging(log_level: str = "INFO", log_file: Path | None = LOGS_DIR / "slugroute.log"):
    """
    Configures logging for the application.

    Passing ``log_file=None`` logs to stdout only.
    """
    log_level = log_level.upper()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        # Ensure the logs directory exists
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.insert(0, logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )

    # Quieten down noisy libraries
    logging.getLogger("pydantic").setLevel(logging.WARNING)
    logging.getLogger("ibis").setLevel(logging.WARNING)