"""Logging setup for guestbook.

Modules create their loggers the standard way:

    import logging
    logger = logging.getLogger(__name__)

The CLI calls ``setup_logging`` once to attach a stderr handler. The Textual
shell calls ``get_logger`` instead so log lines go to a rotating file and do
not corrupt the terminal.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure the ``guestbook`` logger for CLI use.

    WARNING by default, DEBUG with ``verbose``, ERROR with ``quiet``.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logger = logging.getLogger("guestbook")
    logger.setLevel(level)

    # Replace any handler from an earlier call so it tracks the current stderr
    for handler in [h for h in logger.handlers if getattr(h, "_guestbook_cli", False)]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    handler._guestbook_cli = True  # type: ignore[attr-defined]
    logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger that writes to <config dir>/guestbook.log."""
    # Imported here so logging can be set up before config is touched
    from guestbook.config.ui_config import get_config_dir

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        log_dir = get_config_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "guestbook.log"

        handler = RotatingFileHandler(
            log_file, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
        )
        handler.setLevel(logging.INFO)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))

        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger
