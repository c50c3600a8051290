"""Raw on-disk shape of a ledger document."""
from __future__ import annotations

from typing import Annotated, Dict, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError

RawTask = Annotated[List[str], Field(min_length=3)]
DayBlock = Dict[str, List[RawTask]]


class LedgerError(RuntimeError):
    """Base class for fatal ledger loading failures."""


class LedgerParseError(LedgerError):
    """Raised when a ledger document is malformed."""


class LedgerDocument(BaseModel):
    """Ordered list of day blocks, each mapping dates to raw task tuples.

    A raw task tuple is ``[start, end, description, tag...]`` with times
    written as ``HH:MM``. Dates inside one block keep the order in which they
    appear in the source text.
    """

    model_config = ConfigDict(extra="ignore")

    timeledger: List[DayBlock]


def load_document(text: str | bytes) -> LedgerDocument:
    """Parse JSON text into a :class:`LedgerDocument`."""

    try:
        return LedgerDocument.model_validate_json(text)
    except ValidationError as exc:
        raise LedgerParseError(f"Malformed ledger document: {exc}") from exc


__all__ = ["DayBlock", "LedgerDocument", "LedgerError", "LedgerParseError", "RawTask", "load_document"]
