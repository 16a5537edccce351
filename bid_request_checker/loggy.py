"""Logging configuration for the application."""

import logging


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Setup basic logging and return the package logger."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # Jinja2 template loading is chatty at DEBUG
    logging.getLogger("jinja2").setLevel(logging.WARNING)
    return logging.getLogger("bid_request_checker")
