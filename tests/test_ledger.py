from datetime import datetime, timedelta, timezone

import pytest

from timeledger.document import LedgerError, LedgerParseError
from timeledger.ledger import Ledger, LedgerReadError
from timeledger.models import Day, Task


def test_from_file_reads_sample(out, sample_ledger_path):
    ledger = Ledger.from_file(out, sample_ledger_path)

    assert [day.date.date().isoformat() for day in ledger.days] == ["2019-08-05", "2019-08-06", "2019-08-12"]
    assert ledger.days[0].total_duration == timedelta(minutes=78)
    assert ledger.issues == ()


def test_from_file_missing_raises_read_error(out, tmp_path):
    missing = tmp_path / "nope.json"

    with pytest.raises(LedgerReadError) as excinfo:
        Ledger.from_file(out, missing)
    assert excinfo.value.path == missing
    assert str(missing) in str(excinfo.value)
    assert isinstance(excinfo.value, LedgerError)


def test_from_file_malformed_raises_parse_error(out, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text('{"timeledger": [', encoding="utf-8")

    with pytest.raises(LedgerParseError):
        Ledger.from_file(out, path)
    assert out.logged == []


def test_task_equality_ignores_description_and_tags():
    start = datetime(2019, 8, 5, 9, tzinfo=timezone.utc)
    end = start + timedelta(minutes=30)

    assert Task(start, end, "One", ("a",)) == Task(start, end, "Two", ("b", "c"))
    assert Task(start, end, "One") < Task(start, end + timedelta(minutes=1), "One")
    assert Task(start, end, "Focus").display() == "2019-08-05 09:00:00 UTC - 2019-08-05 09:30:00 UTC: Focus"


def test_day_ordering_uses_date_only():
    monday = datetime(2019, 8, 5, tzinfo=timezone.utc)
    task = Task(monday, monday + timedelta(hours=1), "A")

    assert Day(monday, (task,)) == Day(monday)
    assert Day(monday) < Day(monday + timedelta(days=1), (task,))


def test_ledger_is_immutable(out, sample_ledger_path):
    ledger = Ledger.from_file(out, sample_ledger_path)

    assert isinstance(ledger.days, tuple)
    assert isinstance(ledger.days[0].tasks, tuple)
    with pytest.raises(AttributeError):
        ledger.days[0].date = datetime(2020, 1, 1, tzinfo=timezone.utc)
