"""Logging configuration."""

import logging

from kidquiz.shared.config import Settings, get_settings


def setup_logging(settings: Settings | None = None, verbose: bool = False) -> None:
    """Configure application logging.

    Sets up structured JSON logging for production
    and human-readable format for development.
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    if verbose:
        log_level = logging.DEBUG

    if settings.is_production:
        log_format = (
            '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
            '"logger": "%(name)s", "message": "%(message)s"}'
        )
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S%z",
        force=True,
    )

    # Request lines from the HTTP client are noise outside debugging
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
