"""Application log for user actions on the text buffer."""

import logging

from utils import config

logging.basicConfig(filename=config.LOG_FILE, level=getattr(logging, config.LOG_LEVEL, logging.INFO),
                    format="[%(asctime)s] %(levelname)s – %(message)s")


def log_event(name: str, details: dict | None = None):
    logging.info("%s – %s", name, details or {})


def log_action(action: str, text: str, **extra) -> None:
    """Record a toolbar action together with the size of the buffer it saw.

    Only sizes are logged, never the text itself.
    """
    details = {"chars": len(text), "words": len(text.split())}
    details.update(extra)
    log_event(action, details)
