"""
Module: logger.py
Description: structlog setup shared by every mns_client module.

Events are rendered as one JSON object per line on stdout. Level
filtering happens in the bound logger, so disabled debug calls on the
request path cost almost nothing. Any event key that names a
credential (the Authorization header, the access key secret) is
masked before rendering.

Key Components:
- configure_logging(): (Re)apply the processor chain at a given level
- redact_credentials(): Processor masking credential-bearing keys
- get_logger(): Module-level logger factory

Dependencies: structlog
"""

import logging

import structlog

REDACTED = "<redacted>"
SENSITIVE_KEYS = frozenset({"authorization", "access_key_secret", "secret"})


def redact_credentials(logger, method_name, event_dict):
    """Mask values whose key names a credential, whatever its case."""
    for key in event_dict:
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = REDACTED
    return event_dict


def configure_logging(level: str = "INFO") -> None:
    """
    Configure structlog for JSON output at the given level.

    Safe to call more than once; loggers are not cached, so a new level
    applies to module loggers created earlier.

    Args:
        level: Standard level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Raises:
        ValueError: If level is not a known level name
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"unknown log level: {level!r}")

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
            structlog.processors.add_log_level,
            redact_credentials,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.WriteLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        cache_logger_on_first_use=False,
    )


configure_logging()


def get_logger(name: str):
    """
    Get a logger bound to the shared configuration.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Response received", method="GET", status_code=200)
    """
    return structlog.get_logger(name)
