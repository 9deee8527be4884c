# tests/test_codec.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from yatl.codec import UNIT_SEPARATOR, decode, decode_task, encode, encode_task
from yatl.errors import CorruptedTaskListError
from yatl.schema import Priority, Task

US = UNIT_SEPARATOR


def _task(priority: str, message: str, created_on: datetime | None = None) -> Task:
    return Task(priority=Priority.parse(priority), message=message, created_on=created_on)


def test_encode_layout() -> None:
    assert encode([]) == ""
    assert encode_task(_task("max", "buy milk")) == f"max{US}buy milk"

    stamp = datetime(2024, 5, 1, 9, 30, tzinfo=timezone(timedelta(hours=2)))
    assert encode([_task("7", "walk dog", stamp)]) == (
        f"7{US}walk dog{US}2024-05-01T09:30:00+02:00\n"
    )


def test_round_trip_preserves_tasks() -> None:
    tasks = [
        _task("min", "  padded message  "),
        _task("0", "zero", datetime(2023, 12, 31, 23, 59, 59, 123456, tzinfo=timezone.utc)),
        _task("18446744073709551615", "huge | pipes | and ünïcødé"),
        _task("max", "", datetime(2024, 2, 29, 12, 0, tzinfo=timezone(timedelta(hours=-5)))),
        _task("max", "sanitized\x1fseparator\nnewline"),
    ]
    assert decode(encode(tasks)) == tasks


def test_decode_accepts_records_without_timestamp() -> None:
    tasks = decode(f"5{US}legacy\nmax{US}also legacy\n")
    assert [t.message for t in tasks] == ["legacy", "also legacy"]
    assert all(t.created_on is None for t in tasks)


def test_decode_handles_crlf_and_missing_final_newline() -> None:
    tasks = decode(f"1{US}a\r\n2{US}b")
    assert [(str(t.priority), t.message) for t in tasks] == [("1", "a"), ("2", "b")]


def test_decode_empty_file() -> None:
    assert decode("") == []


@pytest.mark.parametrize(
    "record",
    [
        "max",                                    # no message field
        f"urgent{US}bad priority",
        f"max{US}msg{US}not-a-date",
        f"max{US}msg{US}2024-01-01T00:00:00{US}extra",
        "",                                       # blank record
    ],
)
def test_decode_task_rejects_malformed(record: str) -> None:
    with pytest.raises(CorruptedTaskListError):
        decode_task(record)


def test_decode_aborts_on_first_bad_record() -> None:
    with pytest.raises(CorruptedTaskListError) as exc:
        decode(f"1{US}ok\n\n2{US}never reached\n")
    assert exc.value.line == 2
    assert "corrupted" in str(exc.value)


def test_decode_very_long_priority_is_corruption() -> None:
    with pytest.raises(CorruptedTaskListError) as exc:
        decode("9" * 5000 + f"{US}x\n")
    assert exc.value.line == 1
