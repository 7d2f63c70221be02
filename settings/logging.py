"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR


def _is_audit(record) -> bool:
    return record["extra"].get("audit", False)


def setup_logging(level: str = "INFO", to_file: bool = True, audit: bool = True):
    """Configure console logging, optional daily file and election audit trail.

    Committed state changes are logged through ``logger.bind(audit=True)`` and
    land in a separate ``audit_*.log`` file when ``audit`` is enabled.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if not to_file:
        return logger

    LOG_DIR.mkdir(exist_ok=True)
    logger.add(
        LOG_DIR / "election_{time:YYYY-MM-DD}.log",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
        level="DEBUG",
        rotation="00:00",
        retention="30 days",
        compression="gz",
    )

    if audit:
        logger.add(
            LOG_DIR / "audit_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {message}",
            level="INFO",
            filter=_is_audit,
            rotation="00:00",
            retention="1 year",
        )

    logger.info("Logging to {}", LOG_DIR)
    return logger
