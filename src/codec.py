"""
YATL - Task List File Codec
===========================
One record per line, fields separated by the ASCII unit separator:

    <priority> US <message> [US <created_on>] LF

created_on is ISO 8601 with its UTC offset. Messages never contain a
separator (Task replaces control characters with spaces), so the
encoding is unambiguous.
"""

from datetime import datetime
from typing import Iterable, List

from .errors import CorruptedTaskListError, PriorityParseError
from .schema import Priority, Task

RECORD_SEPARATOR = "\n"
UNIT_SEPARATOR = "\x1f"


def encode_task(task: Task) -> str:
    fields = [str(task.priority), task.message]
    if task.created_on is not None:
        fields.append(task.created_on.isoformat())
    return UNIT_SEPARATOR.join(fields)


def encode(tasks: Iterable[Task]) -> str:
    return "".join(encode_task(task) + RECORD_SEPARATOR for task in tasks)


def decode_task(record: str) -> Task:
    """Decode one record; any malformed field raises CorruptedTaskListError"""
    fields = record.split(UNIT_SEPARATOR)
    if len(fields) not in (2, 3):
        raise CorruptedTaskListError()

    try:
        priority = Priority.parse(fields[0])
    except PriorityParseError:
        raise CorruptedTaskListError() from None

    created_on = None
    if len(fields) == 3:
        try:
            created_on = datetime.fromisoformat(fields[2])
        except ValueError:
            raise CorruptedTaskListError() from None

    return Task(priority=priority, message=fields[1], created_on=created_on)


def decode(text: str) -> List[Task]:
    """Decode a whole file; the first bad record aborts the load"""
    records = text.split(RECORD_SEPARATOR)
    if records and records[-1] == "":
        records.pop()

    tasks = []
    for line, record in enumerate(records, start=1):
        if record.endswith("\r"):
            record = record[:-1]
        try:
            tasks.append(decode_task(record))
        except CorruptedTaskListError:
            raise CorruptedTaskListError(line) from None
    return tasks
