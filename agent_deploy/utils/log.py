"""
Centralized logging configuration for the agent-deploy tools.

Call setup_logging() once from a command-line entry point. Individual
modules obtain their own loggers via logging.getLogger() with a short
descriptive name ("descriptor", "emoji", ...).
"""
import logging
import logging.handlers
import os

_configured = False

TIMESTAMP_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
PLAIN_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_formatter(timestamps=True):
    """Return the project formatter, with or without a leading timestamp."""
    if timestamps:
        return logging.Formatter(TIMESTAMP_FORMAT, datefmt=DATE_FORMAT)
    return logging.Formatter(PLAIN_FORMAT)


def setup_logging(level=logging.INFO, log_file=None, timestamps=True):
    """Configure project-wide logging.  Safe to call multiple times.

    Args:
        level: Root logger level (default INFO).
        log_file: Optional path to a rotating log file.
        timestamps: Prefix each line with a timestamp, mirroring the
                    descriptor's ``time`` flag (default True).
    """
    global _configured
    if _configured:
        return
    _configured = True

    formatter = build_formatter(timestamps)

    root = logging.getLogger()
    root.setLevel(level)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=1_000_000, backupCount=3,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
