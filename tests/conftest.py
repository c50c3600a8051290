import logging
from pathlib import Path
from typing import List, Tuple

import pytest

from timeledger.logging_utils import LOGGER_NAME
from timeledger.output import LogLevel

DATA_DIR = Path(__file__).parent / "data"


class RecordingOutput:
    """Keeps every written line and log message in memory."""

    def __init__(self) -> None:
        self.written: List[str] = []
        self.logged: List[Tuple[LogLevel, str]] = []

    def write(self, text: str) -> None:
        self.written.append(text)

    def log(self, level: LogLevel, message: str) -> None:
        self.logged.append((level, message))

    @property
    def messages(self) -> List[str]:
        return [message for _, message in self.logged]


@pytest.fixture
def out() -> RecordingOutput:
    return RecordingOutput()


@pytest.fixture
def sample_ledger_path() -> Path:
    return DATA_DIR / "sample_ledger.json"


@pytest.fixture(autouse=True)
def reset_project_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
