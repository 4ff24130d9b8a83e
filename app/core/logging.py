import logging
import sys
from typing import Optional

from app.core.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# Third-party loggers that only add per-request noise
QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure stdout logging for the registry-agents service.

    Args:
        level: Overrides settings.log_level when given (e.g. "DEBUG" in tests)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel((level or settings.log_level).upper())

    # Replace whatever the host runtime installed
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        f"Logging configured for {settings.service_name} ({settings.environment})"
    )
