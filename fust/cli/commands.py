"""
Handlers for the fust subcommands.

Each handler takes the parsed arguments and a CliContext and returns an exit
code. Errors propagate to `fust.cli.main`, which reports them.
"""

import argparse
import logging
import os
from pathlib import Path
from typing import Optional

from rich.console import Console

from fust.cli import display
from fust.cli.fud import FudCommand
from fust.config.cli_config import CliConfig
from fust.container import DependencyContainer
from fust.entities.project import ProjectId
from fust.entities.task import TaskPriority, TaskStatus
from fust.exceptions import ConfigurationError, GitError
from fust.services.domain_services import WorkspaceService

logger = logging.getLogger(__name__)

WORKSPACE_DIR_NAME = ".fust"


class CliContext:
    """
    Everything a handler needs, built once per invocation.

    The configuration file is read on first access, so commands that never
    touch it keep working when it is unreadable.
    """

    def __init__(
        self,
        container: DependencyContainer,
        config_path: Optional[Path],
        console: Console,
    ):
        self.container = container
        self.config_path = config_path
        self.console = console
        self._config: Optional[CliConfig] = None

    @property
    def config(self) -> CliConfig:
        if self._config is None:
            self._config = CliConfig.load(self.config_path)
        return self._config


def cmd_init(args: argparse.Namespace, ctx: CliContext) -> int:
    workspace = os.path.abspath(args.path or ".")
    ctx.container.get_directory_service().create(
        os.path.join(workspace, WORKSPACE_DIR_NAME)
    )
    ctx.config.workspace_path = workspace
    ctx.config.save(ctx.config_path)
    ctx.console.print(f"Workspace initialized at: {workspace}", markup=False)
    return 0


def cmd_list(args: argparse.Namespace, ctx: CliContext) -> int:
    projects = ctx.container.get_project_use_case().list_projects()
    if not projects:
        ctx.console.print("No projects found. Use 'fust add' to add your first project.")
        return 0
    ctx.console.print(display.projects_table(projects))
    return 0


def cmd_add(args: argparse.Namespace, ctx: CliContext) -> int:
    path = os.path.abspath(args.path)
    WorkspaceService.validate_workspace_path(path)
    project = ctx.container.get_project_use_case().create_project(
        args.name, path, description=args.description, tags=args.tag
    )
    ctx.console.print(
        f"Project '{project.name}' added successfully ({project.id})", markup=False
    )
    return 0


def cmd_remove(args: argparse.Namespace, ctx: CliContext) -> int:
    use_case = ctx.container.get_project_use_case()
    project = use_case.resolve_project(args.project)
    use_case.delete_project(project.id)
    ctx.console.print(f"Project '{project.name}' removed successfully", markup=False)
    return 0


def cmd_show(args: argparse.Namespace, ctx: CliContext) -> int:
    project = ctx.container.get_project_use_case().resolve_project(args.project)
    git = ctx.container.get_git_service()
    branch: Optional[str] = None
    remote: Optional[str] = None
    try:
        if git.is_git_repository(project.path):
            branch = git.get_current_branch(project.path)
            remote = git.get_remote_url(project.path)
    except GitError as e:
        logger.warning(f"Git information unavailable for {project.path}: {e}")
    tasks = ctx.container.get_task_use_case().find_tasks_by_project(project.id)
    display.print_project(ctx.console, project, branch, remote, len(tasks))
    return 0


def cmd_search(args: argparse.Namespace, ctx: CliContext) -> int:
    projects = ctx.container.get_project_use_case().search_projects(args.query)
    if not projects:
        ctx.console.print(f"No results found for '{args.query}'.", markup=False)
        return 0
    ctx.console.print(
        display.projects_table(projects, title=f"Search results for '{args.query}'")
    )
    return 0


def cmd_config_show(args: argparse.Namespace, ctx: CliContext) -> int:
    display.print_config(ctx.console, ctx.config)
    return 0


def cmd_config_get(args: argparse.Namespace, ctx: CliContext) -> int:
    value = ctx.config.get_value(args.key)
    if value is None:
        raise ConfigurationError(f"Configuration key '{args.key}' not found")
    ctx.console.print(value, markup=False)
    return 0


def cmd_config_set(args: argparse.Namespace, ctx: CliContext) -> int:
    ctx.config.set_value(args.key, args.value)
    ctx.config.save(ctx.config_path)
    ctx.console.print(
        f"Configuration updated: {args.key} = {args.value}", markup=False
    )
    return 0


def cmd_task_add(args: argparse.Namespace, ctx: CliContext) -> int:
    project_id: Optional[ProjectId] = None
    project_ref = args.project or ctx.config.default_project
    if project_ref:
        project_id = ctx.container.get_project_use_case().resolve_project(project_ref).id
    task = ctx.container.get_task_use_case().create_task(
        args.title,
        description=args.description,
        priority=TaskPriority(args.priority),
        project_id=project_id,
    )
    ctx.console.print(f"Task '{task.title}' added ({task.id})", markup=False)
    return 0


def cmd_task_list(args: argparse.Namespace, ctx: CliContext) -> int:
    use_case = ctx.container.get_task_use_case()
    if args.project:
        project = ctx.container.get_project_use_case().resolve_project(args.project)
        tasks = use_case.find_tasks_by_project(project.id)
        if args.status:
            tasks = [t for t in tasks if t.status == TaskStatus(args.status)]
    else:
        tasks = use_case.list_tasks(TaskStatus(args.status) if args.status else None)
    if not tasks:
        ctx.console.print("No tasks found.")
        return 0
    ctx.console.print(display.tasks_table(tasks))
    return 0


def cmd_task_start(args: argparse.Namespace, ctx: CliContext) -> int:
    use_case = ctx.container.get_task_use_case()
    task = use_case.start_task(use_case.resolve_task(args.task).id)
    ctx.console.print(f"Task '{task.title}' started", markup=False)
    return 0


def cmd_task_complete(args: argparse.Namespace, ctx: CliContext) -> int:
    use_case = ctx.container.get_task_use_case()
    task = use_case.complete_task(use_case.resolve_task(args.task).id)
    ctx.console.print(f"Task '{task.title}' completed", markup=False)
    return 0


def cmd_dir_create(args: argparse.Namespace, ctx: CliContext) -> int:
    ctx.container.get_directory_service().create(args.path)
    ctx.console.print(f"Created {args.path}", markup=False)
    return 0


def cmd_dir_rename(args: argparse.Namespace, ctx: CliContext) -> int:
    ctx.container.get_directory_service().rename(args.old_path, args.new_path)
    ctx.console.print(f"Renamed {args.old_path} -> {args.new_path}", markup=False)
    return 0


def cmd_dir_delete(args: argparse.Namespace, ctx: CliContext) -> int:
    ctx.container.get_directory_service().delete(args.path)
    ctx.console.print(f"Deleted {args.path}", markup=False)
    return 0


def cmd_fud(args: argparse.Namespace, ctx: CliContext) -> int:
    return FudCommand(ctx.container.get_list_directories_use_case()).run(args.path)
