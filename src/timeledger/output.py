"""Diagnostic sink used by the ledger to report warnings and text."""
from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Protocol, TextIO

from timeledger.logging_utils import LOGGER, TRACE


class LogLevel(Enum):
    ERROR = logging.ERROR
    WARN = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    TRACE = TRACE


class Output(Protocol):
    """Anything that can print text and accept leveled log messages."""

    def write(self, text: str) -> None: ...

    def log(self, level: LogLevel, message: str) -> None: ...


class ConsoleOutput:
    """Writes text to a stream and forwards log messages to ``logging``."""

    def __init__(self, stream: TextIO | None = None, logger: logging.Logger | None = None):
        self.stream = stream
        self.logger = logger or LOGGER

    def write(self, text: str) -> None:
        stream = self.stream or sys.stdout
        stream.write(text)
        if not text.endswith("\n"):
            stream.write("\n")
        stream.flush()

    def log(self, level: LogLevel, message: str) -> None:
        self.logger.log(level.value, "%s", message)


__all__ = ["ConsoleOutput", "LogLevel", "Output"]
