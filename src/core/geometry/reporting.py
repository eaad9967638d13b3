"""
Reporters — вывод диагностики вырожденной геометрии

Чистые запросы (queries) не зависят от reporter'ов: сообщение выводится
только lenient-фасадом CoordinateGeometry.

- ConsoleReporter: строка сообщения в stdout (поведение по умолчанию)
- LoggingReporter: запись через logging
- NullReporter: без вывода
"""

import logging
import sys
from typing import Optional, Protocol, TextIO

from src.core.domain.geometry_result import GeometryResult


class DiagnosticReporter(Protocol):
    """Получатель сообщений о вырожденной геометрии"""

    def report(self, result: GeometryResult) -> None: ...


class ConsoleReporter:
    """Печать сообщения в stdout (или в переданный поток)."""

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Args:
            stream: поток вывода; None → sys.stdout на момент вызова
        """
        self.stream = stream

    def report(self, result: GeometryResult) -> None:
        print(result.message, file=self.stream or sys.stdout, flush=True)


class LoggingReporter:
    """Запись сообщения через logging."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.WARNING):
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def report(self, result: GeometryResult) -> None:
        self.logger.log(
            self.level,
            "%s",
            result.message,
            extra={"geometry_outcome": result.outcome.value},
        )


class NullReporter:
    """Подавление сообщений."""

    def report(self, result: GeometryResult) -> None:
        return None
