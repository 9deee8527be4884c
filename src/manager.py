"""
YATL - Task Manager
===================
Finds, loads and saves the task list file, and runs one command against it.

Each command reads the file once, mutates the in-memory TaskList and
overwrites the file once. There is no locking: if two invocations race,
the last writer wins.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .config import DEFAULT_FILENAME
from .errors import (
    CorruptedTaskListError,
    MissingModificationError,
    TaskListExistsError,
    TaskListNotFoundError,
)
from .schema import Priority, Task, TaskList

logger = logging.getLogger("yatl")


class TaskManager:
    """
    Task list bound to a working directory.

    The task list file is the nearest one found walking up from
    working_dir, so any subdirectory of a project shares its list.
    """

    def __init__(
        self,
        working_dir: Optional[Union[str, Path]] = None,
        filename: Optional[str] = None
    ):
        self.working_dir = Path(working_dir) if working_dir is not None else Path.cwd()
        self.filename = filename or DEFAULT_FILENAME

    # ========================================
    # FILE DISCOVERY
    # ========================================

    def local_task_file(self) -> Path:
        """Task list path inside working_dir itself"""
        return self.working_dir / self.filename

    def has_local_task_list(self) -> bool:
        return self.local_task_file().exists()

    def find_task_file(self) -> Path:
        """Nearest task list file in working_dir or its ancestors"""
        directory = self.working_dir.resolve()

        for candidate_dir in (directory, *directory.parents):
            candidate = candidate_dir / self.filename
            if candidate.is_file():
                logger.debug(f"Found task list: {candidate}")
                return candidate

        raise TaskListNotFoundError()

    # ========================================
    # PERSISTENCE OPERATIONS
    # ========================================

    def init(self, overwrite: bool = False) -> Path:
        """Create an empty task list in working_dir"""
        path = self.local_task_file()
        if path.exists() and not overwrite:
            raise TaskListExistsError(path)

        path.write_text("", encoding="utf-8")
        logger.info(f"Initiated task list: {path}")
        return path

    def load(self, path: Optional[Path] = None) -> TaskList:
        """Load and re-sort the task list"""
        path = path or self.find_task_file()
        try:
            text = path.read_bytes().decode("utf-8")
        except UnicodeDecodeError as e:
            raise CorruptedTaskListError() from e
        task_list = TaskList.load(text)

        logger.debug(f"Loaded task list: {path} ({len(task_list)} tasks)")
        return task_list

    def save(self, task_list: TaskList, path: Optional[Path] = None) -> None:
        """Overwrite the task list file"""
        path = path or self.find_task_file()
        # Encode before opening, so a failure cannot truncate the file
        data = task_list.encode().encode("utf-8")
        path.write_bytes(data)

        logger.debug(f"Saved task list: {path} ({len(task_list)} tasks)")

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def add_task(self, message: str, priority: Optional[Priority] = None) -> Task:
        """Add a task; priority defaults to min"""
        path = self.find_task_file()
        task_list = self.load(path)

        task = task_list.insert(priority or Priority.minimum(), message)
        self.save(task_list, path)

        logger.info(f"Added task with priority {task.priority}")
        return task

    def list_tasks(self) -> List[Tuple[int, Task]]:
        """(ordinal, task) pairs, ordinal 1 first"""
        return self.load().entries()

    def get_task(self, ordinal: int) -> Task:
        return self.load().get(ordinal)

    def modify_task(self, ordinal: int, priority: Optional[Priority] = None) -> Task:
        """
        Apply the given modifications to a task.

        Changing the priority re-sorts the list, so ordinals of this and
        other tasks may change.
        """
        if priority is None:
            raise MissingModificationError()

        path = self.find_task_file()
        task_list = self.load(path)

        task = task_list.set_priority(ordinal, priority)
        self.save(task_list, path)

        logger.info(f"Modified task {ordinal}: priority is now {priority}")
        return task

    def remove_task(self, ordinal: int) -> Task:
        path = self.find_task_file()
        task_list = self.load(path)

        task = task_list.remove(ordinal)
        self.save(task_list, path)

        logger.info(f"Removed task {ordinal}")
        return task
