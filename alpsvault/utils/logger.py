"""Logging configuration using Loguru."""

import sys
from pathlib import Path

from loguru import logger

from alpsvault.config import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[module]}:{function}:{line} - {message}"
)


def setup_logging(config: LoggingConfig | None = None) -> None:
    """
    Route vault logs to stderr and, when enabled, a rotating file sink.

    Args:
        config: Logging section of the vault configuration; defaults apply if omitted
    """
    config = config or LoggingConfig()
    logger.remove()

    logger.add(
        sys.stderr,
        level=config.level,
        format=CONSOLE_FORMAT,
        colorize=True,
        filter=_ensure_module,
    )

    if not config.log_to_file:
        return

    log_path = Path(config.log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_path / "alpsvault_{time:YYYY-MM-DD}.log",
        level=config.level,
        format=FILE_FORMAT,
        rotation=config.file_rotation,
        retention=config.file_retention,
        compression=config.compression,
        serialize=config.serialize,
        enqueue=True,
        filter=_ensure_module,
    )


def _ensure_module(record) -> bool:
    # Records from unbound loggers have no module in extra
    record["extra"].setdefault("module", record["name"])
    return True


def get_logger(name: str):
    """Logger bound to a module name, shown in every record it emits."""
    return logger.bind(module=name)
