"""structlog setup for the API process."""

import logging

import structlog


def configure_logging(level: str = "INFO") -> None:
    """Route structlog events through stdlib logging as JSON lines.
    
    Args:
        level: Minimum stdlib log level name, e.g. ``"INFO"``.
    """
    logging.basicConfig(level=level.upper(), format="%(message)s")
    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
