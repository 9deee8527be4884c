# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from yatl.manager import TaskManager

FILENAME = ".yatl"


@pytest.fixture()
def manager(tmp_path: Path) -> TaskManager:
    """
    TaskManager bound to a fresh tmp directory holding an empty task list.

    The filename is passed explicitly so YATL_FILENAME in the environment
    cannot change what the tests read and write.
    """
    mgr = TaskManager(working_dir=tmp_path, filename=FILENAME)
    mgr.init()
    return mgr


@pytest.fixture()
def task_file(manager: TaskManager) -> Path:
    return manager.local_task_file()
