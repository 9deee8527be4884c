"""
YATL - Yet Another Terminal-based Task List
===========================================

A per-directory task list kept sorted by priority.

Usage:
    from yatl import TaskManager, Priority

    manager = TaskManager()          # bound to the current directory
    manager.init()
    manager.add_task("buy milk", priority=Priority.maximum())
    manager.add_task("walk dog")

    for ordinal, task in manager.list_tasks():
        print(ordinal, task.message)

    manager.modify_task(2, priority=Priority.number(3))
    manager.remove_task(1)
"""

from .errors import (
    YatlError,
    TaskListNotFoundError,
    TaskListExistsError,
    CorruptedTaskListError,
    ValidationError,
    PriorityParseError,
    InvalidTaskIdError,
    MissingModificationError
)

from .schema import (
    MAX_PRIORITY_VALUE,
    PriorityKind,
    Priority,
    Task,
    TaskList,
    compare
)

from .manager import TaskManager

__version__ = "1.0.0"
__all__ = [
    "TaskManager",
    "TaskList",
    "Task",
    "Priority",
    "PriorityKind",
    "MAX_PRIORITY_VALUE",
    "compare",
    "YatlError",
    "TaskListNotFoundError",
    "TaskListExistsError",
    "CorruptedTaskListError",
    "ValidationError",
    "PriorityParseError",
    "InvalidTaskIdError",
    "MissingModificationError"
]
