#!/usr/bin/env python3
"""
YATL - CLI Interface
====================
Command-line tool for a per-directory, priority-ordered task list.

Usage:
    yatl init
    yatl add "buy milk" -p max
    yatl list
    yatl info 1
    yatl modify -p 3 2
    yatl remove 1
"""

import argparse
import contextlib
import locale
import logging
import re
import sys
from typing import List, Optional

from colorama import Fore, Style, init as colorama_init

from . import __version__
from .config import Settings
from .errors import PriorityParseError, TaskListExistsError, YatlError
from .manager import TaskManager
from .schema import MAX_PRIORITY_DIGITS, MAX_PRIORITY_VALUE, Priority, Task

_TASK_ID_RE = re.compile(r"\+?[0-9]+")


# ============================================================
# ARGUMENT TYPES
# ============================================================

def parse_priority(text: str) -> Priority:
    try:
        return Priority.parse(text)
    except PriorityParseError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_task_id(text: str) -> int:
    """Non-zero whole number"""
    text = text.strip()
    digits = text.lstrip("+").lstrip("0")
    if not _TASK_ID_RE.fullmatch(text) or not digits:
        raise argparse.ArgumentTypeError("expected a non-zero whole number")

    # Length check first: int() refuses very long numerals
    if len(digits) > MAX_PRIORITY_DIGITS or int(digits) > MAX_PRIORITY_VALUE:
        raise argparse.ArgumentTypeError("the number is too big to be a valid ID")
    return int(digits)


# ============================================================
# OUTPUT
# ============================================================

class Painter:
    """Wraps text in colorama styles unless color is off"""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        if enabled:
            colorama_init()

    def __call__(self, text: str, *styles: str) -> str:
        if not self.enabled or not styles:
            return text
        return f"{''.join(styles)}{text}{Style.RESET_ALL}"

    def error(self, message: str) -> None:
        print(f"{self('error:', Fore.RED, Style.BRIGHT)} {message}", file=sys.stderr)

    def warning(self, message: str) -> None:
        print(f"{self('warning:', Fore.YELLOW, Style.BRIGHT)} {message}", file=sys.stderr)

    def done(self, verb: str, rest: str) -> None:
        print(f"{self(verb, Fore.GREEN, Style.BRIGHT)} {rest}")


def format_created_on(task: Task) -> str:
    if task.created_on is None:
        return "unknown"
    # Locale-dependent date and time
    return task.created_on.astimezone().strftime("%c")


def format_list(entries, paint: Painter, verbose: bool = False) -> str:
    width = len(str(len(entries)))
    priority_width = max((len(str(task.priority)) for _, task in entries), default=0)

    lines = []
    for ordinal, task in entries:
        columns = [paint(f"{ordinal:^{width}}", Fore.YELLOW)]
        if verbose:
            columns.append(paint(f"{str(task.priority):>{priority_width}}", Fore.CYAN))
        columns.append(paint(task.message, Fore.GREEN))
        lines.append(" " + " | ".join(columns))
    return "\n".join(lines)


def format_info(ordinal: int, task: Task, paint: Painter) -> str:
    lines = [
        f"{paint('ID:', Style.BRIGHT)}       {paint(str(ordinal), Fore.YELLOW)}",
        f"{paint('Priority:', Style.BRIGHT)} {paint(str(task.priority), Fore.CYAN)}",
        f"{paint('Message:', Style.BRIGHT)}  {paint(task.message, Fore.GREEN)}",
        f"{paint('Created:', Style.BRIGHT)}  {format_created_on(task)}",
    ]
    return "\n".join(lines)


def confirm(prompt: str) -> bool:
    """Ask a [y/N] question on the terminal; anything but y/Y is no"""
    print(prompt, end=" ", file=sys.stderr, flush=True)
    answer = sys.stdin.readline()
    return answer[:1] in ("y", "Y")


# ============================================================
# PARSER
# ============================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yatl",
        description="YATL - Yet Another Terminal-based Task List",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  yatl init                     Start a task list in the current directory
  yatl add "buy milk" -p max    Add a task with the highest priority
  yatl add "walk dog"           Add a task with the lowest priority
  yatl list                     List tasks, highest priority first
  yatl info 1                   Show details of task 1
  yatl modify -p 3 2            Set the priority of task 2 to 3
  yatl remove 1                 Remove task 1

Priorities are 'min', 'max' or a whole number.
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--file-name", help="Task list file name (default: .yatl)")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--log-level", help="Logging level (default: WARNING)")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # INIT command
    subparsers.add_parser("init", help="Initiate a new task list in the current directory")

    # ADD command
    add_parser = subparsers.add_parser("add", help="Add a task")
    add_parser.add_argument("message", help="Message associated with the task")
    add_parser.add_argument(
        "-p", "--priority", type=parse_priority, default=Priority.minimum(),
        help="Priority ('min', 'max' or a whole number, default: min)"
    )

    # LIST command
    list_parser = subparsers.add_parser("list", help="List all the tasks")
    list_parser.add_argument("-v", "--verbose", action="store_true", help="Show priorities")

    # INFO command
    info_parser = subparsers.add_parser("info", help="Show the details of a task")
    info_parser.add_argument("task_id", type=parse_task_id, help="ID of the task")

    # MODIFY command
    modify_parser = subparsers.add_parser("modify", help="Modify a task")
    modify_parser.add_argument("task_id", type=parse_task_id, help="ID of the task")
    modify_parser.add_argument(
        "-p", "--priority", type=parse_priority,
        help="New priority ('min', 'max' or a whole number)"
    )

    # REMOVE command
    remove_parser = subparsers.add_parser("remove", help="Remove a task")
    remove_parser.add_argument("task_id", type=parse_task_id, help="ID of the task")

    return parser


# ============================================================
# COMMANDS
# ============================================================

def run(args: argparse.Namespace, manager: TaskManager, paint: Painter) -> int:
    if args.command == "init":
        try:
            manager.init()
        except TaskListExistsError:
            if not confirm(
                f"{paint('warning:', Fore.YELLOW, Style.BRIGHT)} this directory already has a task list\n"
                f"Do you wish to overwrite it? {paint('[y/N]:', Fore.CYAN, Style.BRIGHT)}"
            ):
                return 0
            manager.init(overwrite=True)
        paint.done("Initiated", "a new task list in the current directory")

    elif args.command == "add":
        manager.add_task(args.message, priority=args.priority)
        paint.done("Added", "a new task")

    elif args.command == "list":
        entries = manager.list_tasks()
        if not entries:
            print("The task list is empty")
            return 0
        print(format_list(entries, paint, verbose=args.verbose))

    elif args.command == "info":
        task = manager.get_task(args.task_id)
        print(format_info(args.task_id, task, paint))

    elif args.command == "modify":
        manager.modify_task(args.task_id, priority=args.priority)
        paint.done("Modified", "the specified task")
        paint.warning("the priority was changed and as a result the task IDs might have also changed")

    elif args.command == "remove":
        manager.remove_task(args.task_id)
        paint.done("Removed", "the specified task")

    return 0


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    settings = settings or Settings.from_env()
    level_name = (args.log_level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s"
    )

    with contextlib.suppress(locale.Error):
        locale.setlocale(locale.LC_TIME, "")

    paint = Painter(enabled=settings.color and not args.no_color)
    manager = TaskManager(filename=args.file_name or settings.filename)

    try:
        return run(args, manager, paint)
    except KeyboardInterrupt:
        return 130
    except (YatlError, OSError) as e:
        paint.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
