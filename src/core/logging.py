"""
Structured logging для Frobenius core.

structlog поверх stdlib logging:
- JSON или console рендеринг
- Уровень задаётся через LoggingConfig

Пример:
    >>> from src.core.logging import LoggingConfig, get_logger, setup_logging
    >>> setup_logging(LoggingConfig(level="DEBUG", format="json"))
    >>> logger = get_logger(__name__)
    >>> logger.info("frobenius_solved", value=43)
"""

import logging
import sys
from dataclasses import dataclass
from typing import Final

import structlog

LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS: Final[tuple[str, ...]] = ("json", "console")

# Библиотека не пишет в stdout/stderr, пока приложение не настроит logging
logging.getLogger("src.core").addHandler(logging.NullHandler())


@dataclass(frozen=True)
class LoggingConfig:
    """Конфигурация логирования."""

    level: str = "INFO"
    format: str = "console"

    def __post_init__(self) -> None:
        if self.level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {LOG_LEVELS}, got {self.level!r}")
        if self.format not in LOG_FORMATS:
            raise ValueError(f"format must be one of {LOG_FORMATS}, got {self.format!r}")


def setup_logging(config: LoggingConfig | None = None) -> None:
    """
    Настройка structlog и root logger.

    Args:
        config: LoggingConfig (default: INFO, console)
    """
    config = config or LoggingConfig()
    log_level = getattr(logging, config.level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    root_logger.addHandler(handler)

    if config.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Structured logger для модуля (обычно __name__).

    Всегда поверх stdlib logger: без setup_logging события уходят в
    NullHandler пакета и ничего не печатают.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )
