"""
Rich rendering helpers for CLI output.
"""

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fust.config.cli_config import CliConfig
from fust.entities.project import Project
from fust.entities.task import Task, TaskStatus

_STATUS_STYLES = {
    TaskStatus.TODO: "yellow",
    TaskStatus.IN_PROGRESS: "cyan",
    TaskStatus.COMPLETED: "green",
    TaskStatus.CANCELLED: "dim",
}


def projects_table(projects: list[Project], title: str = "Projects") -> Table:
    table = Table(title=title, box=box.SIMPLE, expand=False)
    table.add_column("Name", style="bold")
    table.add_column("Path")
    table.add_column("Tags", style="magenta")
    table.add_column("ID", style="dim")
    for project in projects:
        table.add_row(
            escape(project.name),
            escape(project.path),
            escape(", ".join(project.tags)),
            project.id.value[:8],
        )
    return table


def tasks_table(tasks: list[Task]) -> Table:
    table = Table(title="Tasks", box=box.SIMPLE, expand=False)
    table.add_column("Title", style="bold")
    table.add_column("Status")
    table.add_column("Priority")
    table.add_column("ID", style="dim")
    for task in tasks:
        style = _STATUS_STYLES.get(task.status, "")
        table.add_row(
            escape(task.title),
            f"[{style}]{task.status.value}[/{style}]" if style else task.status.value,
            task.priority.value,
            task.id.value[:8],
        )
    return table


def print_project(
    console: Console,
    project: Project,
    branch: Optional[str],
    remote: Optional[str],
    task_count: int,
) -> None:
    console.print(f"[bold]Project:[/bold] {escape(project.name)}")
    console.print(f"  ID: {project.id}")
    console.print(f"  Path: {escape(project.path)}")
    if project.description:
        console.print(f"  Description: {escape(project.description)}")
    if project.tags:
        console.print(f"  Tags: {escape(', '.join(project.tags))}")
    for key, value in sorted(project.metadata.items()):
        console.print(f"  {escape(key)}: {escape(value)}")
    console.print(f"  Created: {project.created_at:%Y-%m-%d %H:%M}")
    console.print(f"  Branch: {branch or '-'}")
    if remote:
        console.print(f"  Remote: {remote}")
    console.print(f"  Tasks: {task_count}")


def print_config(console: Console, config: CliConfig) -> None:
    console.print("[bold]Configuration:[/bold]")
    for key in CliConfig.keys():
        value = config.get_value(key)
        console.print(f"  {key}: {escape(value) if value is not None else '-'}")
