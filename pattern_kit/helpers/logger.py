import logging
import sys
from typing import Optional

import structlog

from pattern_kit.models.config import LoggingConfig, LogRenderer

logging.getLogger("pattern_kit").addHandler(logging.NullHandler())


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for pattern_kit using structlog.

    Args:
        config: Logging configuration. If None, it is read from the
                PATTERN_KIT_LOG_* environment variables.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        config = LoggingConfig.from_env()

    if config.renderer == LogRenderer.JSON:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    # Remove any existing handlers and add ours
    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, config.level))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logger = get_logger("pattern_kit")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_renderer=config.renderer.value,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger backed by the stdlib logger of the same name.

    Output follows the host application's logging setup; until one exists
    (or setup_logging() is called) pattern_kit events go nowhere.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
