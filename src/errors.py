"""
YATL - Errors
=============
Every failure the task list can report to the operator.

I/O failures are left as plain OSError and surfaced verbatim by the CLI.
"""

from typing import Optional


class YatlError(Exception):
    """Base class for task list errors"""


class TaskListNotFoundError(YatlError):
    """No task list file in the working directory or any of its ancestors"""

    def __init__(self, message: str = "this directory has no task list associated with it"):
        super().__init__(message)


class TaskListExistsError(YatlError):
    """init was asked to create a task list where one already exists"""

    def __init__(self, path):
        self.path = path
        super().__init__(f"this directory already has a task list ({path})")


class CorruptedTaskListError(YatlError):
    """A persisted record could not be decoded; the whole load is aborted"""

    def __init__(self, line: Optional[int] = None):
        self.line = line
        message = "the task list file is corrupted"
        if line is not None:
            message += f" (line {line})"
        super().__init__(message)


# ============================================================
# VALIDATION ERRORS
# ============================================================

class ValidationError(YatlError):
    """Bad operator input, raised before the task list file is touched"""


class PriorityParseError(ValidationError, ValueError):
    """Priority literal is neither a sentinel nor an in-range whole number"""


class InvalidTaskIdError(ValidationError):
    """Ordinal does not address a task in the list"""

    def __init__(self, ordinal: int, upper_bound: int):
        self.ordinal = ordinal
        self.upper_bound = upper_bound
        if upper_bound == 0:
            message = f"invalid task ID '{ordinal}': the task list is empty"
        else:
            message = (
                f"invalid task ID '{ordinal}': "
                f"expected a value between 1 and {upper_bound}"
            )
        super().__init__(message)


class MissingModificationError(ValidationError):
    """modify was called without anything to change"""

    def __init__(self, message: str = "at least one modification is required (e.g. -p/--priority)"):
        super().__init__(message)
