"""
YATL - Task Schema Definition
=============================
Priority, Task and the priority-ordered TaskList.

The TaskList is kept in ascending priority order. Tasks are addressed by
ordinal: 1-based, counted from the END of the list, so ordinal 1 is always
the highest-priority task. Ordinals are derived from positions on every
lookup and never stored.
"""

import bisect
import re
import unicodedata
from datetime import datetime
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import InvalidTaskIdError, PriorityParseError

# Largest numeric priority (unsigned 64-bit word)
MAX_PRIORITY_VALUE = 2**64 - 1

_NUMBER_RE = re.compile(r"\+?[0-9]+")

# Decimal digits in MAX_PRIORITY_VALUE
MAX_PRIORITY_DIGITS = len(str(MAX_PRIORITY_VALUE))


class PriorityKind(str, Enum):
    """Priority variants"""
    MIN = "min"       # Below every number
    VALUE = "value"   # Plain whole number
    MAX = "max"       # Above every number


class Priority(BaseModel):
    """
    Totally ordered priority tag.

    max > any number > min, max == max, min == min,
    numbers compare numerically.
    """
    model_config = ConfigDict(frozen=True)

    kind: PriorityKind
    value: Optional[int] = Field(default=None, ge=0, le=MAX_PRIORITY_VALUE)

    @model_validator(mode="after")
    def check_variant(self) -> "Priority":
        if self.kind == PriorityKind.VALUE and self.value is None:
            raise ValueError("a numeric priority requires a value")
        if self.kind != PriorityKind.VALUE and self.value is not None:
            raise ValueError(f"the '{self.kind.value}' priority takes no value")
        return self

    # ========================================
    # CONSTRUCTORS
    # ========================================

    @classmethod
    def maximum(cls) -> "Priority":
        return cls(kind=PriorityKind.MAX)

    @classmethod
    def minimum(cls) -> "Priority":
        return cls(kind=PriorityKind.MIN)

    @classmethod
    def number(cls, value: int) -> "Priority":
        return cls(kind=PriorityKind.VALUE, value=value)

    @classmethod
    def parse(cls, text: str) -> "Priority":
        """Parse 'max', 'min' or a whole number in [0, MAX_PRIORITY_VALUE]"""
        text = text.strip()
        if text == "max":
            return cls.maximum()
        if text == "min":
            return cls.minimum()

        if not _NUMBER_RE.fullmatch(text):
            raise PriorityParseError("expected 'min', 'max' or a whole number")

        # Length check first: int() refuses very long numerals
        digits = text.lstrip("+").lstrip("0") or "0"
        if len(digits) > MAX_PRIORITY_DIGITS or int(digits) > MAX_PRIORITY_VALUE:
            raise PriorityParseError(
                "the number is too big, you might want to use 'max' instead"
            )
        return cls.number(int(digits))

    # ========================================
    # ORDERING
    # ========================================

    def _rank(self) -> Tuple[int, int]:
        if self.kind == PriorityKind.MIN:
            return (0, 0)
        if self.kind == PriorityKind.MAX:
            return (2, 0)
        return (1, self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self._rank() < other._rank()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self._rank() <= other._rank()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self._rank() > other._rank()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self._rank() >= other._rank()

    def __str__(self) -> str:
        if self.kind == PriorityKind.VALUE:
            return str(self.value)
        return self.kind.value

    def __repr__(self) -> str:
        return f"Priority({str(self)!r})"


def compare(a: Priority, b: Priority) -> int:
    """-1, 0 or 1 as a is less than, equal to or greater than b"""
    return (a > b) - (a < b)


def _clean_char(char: str) -> str:
    category = unicodedata.category(char)
    if category == "Cc":
        return " "
    if category == "Cs":
        # Lone surrogate, e.g. from an undecodable command-line byte
        return "\ufffd"
    return char


def sanitize_message(message: str) -> str:
    """
    Replace control characters (including the file's separators) with
    spaces and lone surrogates with U+FFFD, so every message encodes
    as UTF-8.
    """
    return "".join(_clean_char(char) for char in message)


class Task(BaseModel):
    """Individual task"""
    model_config = ConfigDict(validate_assignment=True)

    priority: Priority
    message: str
    created_on: Optional[datetime] = None  # Absent in lists written without timestamps

    @field_validator("message")
    @classmethod
    def clean_message(cls, value: str) -> str:
        return sanitize_message(value)

    @field_validator("created_on")
    @classmethod
    def ensure_zoned(cls, value: Optional[datetime]) -> Optional[datetime]:
        # Naive timestamps are taken as local time
        if value is not None and value.tzinfo is None:
            return value.astimezone()
        return value


class TaskList(BaseModel):
    """
    Tasks in ascending priority order.

    Equal priorities keep their relative order; a new task goes in front
    of every task sharing its priority, so older tasks keep the lower
    ordinals.
    """
    tasks: List[Task] = Field(default_factory=list)

    @model_validator(mode="after")
    def sort_by_priority(self) -> "TaskList":
        # Stable, so a hand-edited file keeps its order among equals
        self.tasks.sort(key=lambda task: task.priority)
        return self

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task]) -> "TaskList":
        return cls(tasks=list(tasks))

    @classmethod
    def load(cls, text: str) -> "TaskList":
        """Decode a persisted task list and re-sort it"""
        from .codec import decode

        return cls.from_tasks(decode(text))

    def encode(self) -> str:
        from .codec import encode

        return encode(self.tasks)

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    @property
    def is_empty(self) -> bool:
        return not self.tasks

    def is_sorted(self) -> bool:
        return all(a.priority <= b.priority for a, b in zip(self.tasks, self.tasks[1:]))

    # ========================================
    # ORDINAL ADDRESSING
    # ========================================

    def _index(self, ordinal: int) -> int:
        """Storage index of an ordinal, or InvalidTaskIdError"""
        if not 1 <= ordinal <= len(self.tasks):
            raise InvalidTaskIdError(ordinal, len(self.tasks))
        return len(self.tasks) - ordinal

    def get(self, ordinal: int) -> Task:
        return self.tasks[self._index(ordinal)]

    def entries(self) -> List[Tuple[int, Task]]:
        """(ordinal, task) pairs, ordinal 1 first"""
        return list(enumerate(reversed(self.tasks), start=1))

    # ========================================
    # MUTATIONS
    # ========================================

    def insert(
        self,
        priority: Priority,
        message: str,
        created_on: Optional[datetime] = None
    ) -> Task:
        """Insert a task before every task of equal priority"""
        task = Task(
            priority=priority,
            message=message,
            created_on=created_on or datetime.now().astimezone()
        )
        position = bisect.bisect_left(self.tasks, priority, key=lambda t: t.priority)
        self.tasks.insert(position, task)
        return task

    def set_priority(self, ordinal: int, priority: Priority) -> Task:
        """Change a task's priority and re-sort; ordinals may shift"""
        task = self.tasks[self._index(ordinal)]
        task.priority = priority
        self.tasks.sort(key=lambda t: t.priority)
        return task

    def remove(self, ordinal: int) -> Task:
        return self.tasks.pop(self._index(ordinal))
