"""
Audit Logger

DESIGN DECISION: Every rejected domain action (an underage job or spouse
assignment, a refused child, an unsupported currency) is logged as a
structured event. Rejections never raise, so the log is the only trace
they leave.

Logging goes through structlog on top of the standard library logger, so
level filtering is controlled by LoggingSettings. Handlers are left to the
application; only the "domain_model" logger level is set here.
"""

import logging
from typing import Optional

import structlog

from domain_model.config import AppSettings, LoggingSettings, get_settings


def configure_logging(
    settings: Optional[LoggingSettings] = None,
    app: Optional[AppSettings] = None,
) -> None:
    """
    Configure structlog output.

    Called once on import with the environment settings. Call again with
    explicit settings to reconfigure; loggers are not cached, so existing
    module loggers pick up the new configuration.

    Debug mode forces DEBUG level and console output.
    """
    settings = settings or get_settings().logging
    app = app or get_settings().app

    level = "DEBUG" if app.debug_mode else settings.level
    json_output = settings.json_output and not app.debug_mode

    logging.getLogger("domain_model").setLevel(level)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

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
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Return a structured logger bound to the given module name."""
    return structlog.get_logger(name)


configure_logging()
