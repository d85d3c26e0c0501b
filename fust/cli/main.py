"""
Command-line entry point for fust.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from rich.console import Console

from fust import __version__
from fust.cli import commands
from fust.cli.fud import format_fs_error
from fust.config.settings import Settings
from fust.container import DependencyContainer
from fust.entities.task import TaskPriority, TaskStatus
from fust.exceptions import BaseAppError, FsError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

Handler = Callable[[argparse.Namespace, commands.CliContext], int]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fust",
        description="Track projects and tasks from the command line.",
    )
    parser.add_argument(
        "--version", action="version", version=f"fust {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    parser.add_argument(
        "-c", "--config", default=None, help="Configuration file path"
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    p = sub.add_parser("init", help="Initialize a new workspace")
    p.add_argument("path", nargs="?", default=None, help="Workspace path (default: .)")
    p.set_defaults(handler=commands.cmd_init)

    p = sub.add_parser("list", help="List all projects")
    p.set_defaults(handler=commands.cmd_list)

    p = sub.add_parser("add", help="Add a new project")
    p.add_argument("name", help="Project name")
    p.add_argument("path", help="Project path")
    p.add_argument("-d", "--description", default=None, help="Project description")
    p.add_argument(
        "-t", "--tag", action="append", default=[], help="Tag (repeatable)"
    )
    p.set_defaults(handler=commands.cmd_add)

    p = sub.add_parser("remove", help="Remove a project")
    p.add_argument("project", help="Project name or ID")
    p.set_defaults(handler=commands.cmd_remove)

    p = sub.add_parser("show", help="Show project information")
    p.add_argument("project", help="Project name or ID")
    p.set_defaults(handler=commands.cmd_show)

    p = sub.add_parser("search", help="Search projects")
    p.add_argument("query", help="Search query")
    p.set_defaults(handler=commands.cmd_search)

    config_parser = sub.add_parser("config", help="Configure the application")
    config_sub = config_parser.add_subparsers(dest="config_command", metavar="ACTION")
    config_sub.required = True
    p = config_sub.add_parser("show", help="Show current configuration")
    p.set_defaults(handler=commands.cmd_config_show)
    p = config_sub.add_parser("get", help="Get a configuration value")
    p.add_argument("key", help="Configuration key")
    p.set_defaults(handler=commands.cmd_config_get)
    p = config_sub.add_parser("set", help="Set a configuration value")
    p.add_argument("key", help="Configuration key")
    p.add_argument("value", help="Configuration value")
    p.set_defaults(handler=commands.cmd_config_set)

    task_parser = sub.add_parser("task", help="Manage tasks")
    task_sub = task_parser.add_subparsers(dest="task_command", metavar="ACTION")
    task_sub.required = True
    p = task_sub.add_parser("add", help="Add a task")
    p.add_argument("title", help="Task title")
    p.add_argument("-d", "--description", default=None, help="Task description")
    p.add_argument(
        "-p",
        "--priority",
        choices=[priority.value for priority in TaskPriority],
        default=TaskPriority.MEDIUM.value,
        help="Task priority (default: medium)",
    )
    p.add_argument("--project", default=None, help="Project name or ID")
    p.set_defaults(handler=commands.cmd_task_add)
    p = task_sub.add_parser("list", help="List tasks")
    p.add_argument(
        "-s",
        "--status",
        choices=[status.value for status in TaskStatus],
        default=None,
        help="Only tasks with this status",
    )
    p.add_argument("--project", default=None, help="Only tasks of this project")
    p.set_defaults(handler=commands.cmd_task_list)
    p = task_sub.add_parser("start", help="Start a task")
    p.add_argument("task", help="Task ID or ID prefix")
    p.set_defaults(handler=commands.cmd_task_start)
    p = task_sub.add_parser("complete", help="Complete a task")
    p.add_argument("task", help="Task ID or ID prefix")
    p.set_defaults(handler=commands.cmd_task_complete)

    dir_parser = sub.add_parser("dir", help="Create, rename or delete directories")
    dir_sub = dir_parser.add_subparsers(dest="dir_command", metavar="ACTION")
    dir_sub.required = True
    p = dir_sub.add_parser("create", help="Create a directory and its parents")
    p.add_argument("path", help="Directory to create")
    p.set_defaults(handler=commands.cmd_dir_create)
    p = dir_sub.add_parser("rename", help="Rename a directory")
    p.add_argument("old_path", help="Existing directory")
    p.add_argument("new_path", help="New path (must not exist)")
    p.set_defaults(handler=commands.cmd_dir_rename)
    p = dir_sub.add_parser("delete", help="Delete a directory recursively")
    p.add_argument("path", help="Directory to delete")
    p.set_defaults(handler=commands.cmd_dir_delete)

    p = sub.add_parser("fud", help="List directories in a path")
    p.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path to list directories from (defaults to current directory)",
    )
    p.set_defaults(handler=commands.cmd_fud)

    return parser


def configure_logging(level: int) -> None:
    """Send log records to stderr so stdout only carries command output."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings()
    except BaseAppError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(logging.DEBUG if args.verbose else settings.log_level)
    logger.info("Starting fust CLI")

    config_path = Path(args.config) if args.config else settings.config_path
    handler: Handler = args.handler
    try:
        ctx = commands.CliContext(
            container=DependencyContainer(settings),
            config_path=config_path,
            console=Console(soft_wrap=True),
        )
        code = handler(args, ctx)
    except FsError as e:
        logger.debug(f"Command failed: {e!r}")
        print(format_fs_error(e), file=sys.stderr)
        return 1
    except BaseAppError as e:
        logger.debug(f"Command failed: {e!r}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info("fust CLI completed")
    return code


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
