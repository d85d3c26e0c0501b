"""
Use case for managing tracked projects.
"""

import logging
import uuid
from typing import Optional

from fust.entities.project import Project, ProjectId
from fust.entities.value_objects import ProjectName, Tag
from fust.exceptions import DomainError, EntityNotFoundError
from fust.ports.repositories.project_repository_port import ProjectRepositoryPort
from fust.services.domain_services import ProjectService


class ProjectUseCase:
    """Create, look up, search and delete projects."""

    def __init__(
        self,
        project_repository: ProjectRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._project_repository = project_repository
        self._logger = logger or logging.getLogger(__name__)

    def create_project(
        self,
        name: str,
        path: str,
        description: Optional[str] = None,
        tags: Optional[list[str]] = None,
    ) -> Project:
        """
        Create and store a new project with a generated id.

        Args:
            name: Project name
            path: Project location on disk
            description: Optional free text
            tags: Optional tags, normalized before storing

        Returns:
            The stored project

        Raises:
            ValidationError: If the name, path or a tag is invalid
            DomainError: If another project already uses this path
        """
        project_name = ProjectName.parse(name)
        if self._project_repository.find_by_path(path) is not None:
            raise DomainError(f"A project is already registered at {path}")

        project = Project(
            id=ProjectId(str(uuid.uuid4())),
            name=project_name.value,
            path=path,
            description=description or None,
        )
        for raw_tag in tags or []:
            project.add_tag(Tag.parse(raw_tag).value)

        ProjectService.validate_project(project)
        self._project_repository.save(project)
        self._logger.info(f"Created project {project.name} ({project.id})")
        return project

    def get_project(self, project_id: ProjectId) -> Optional[Project]:
        return self._project_repository.find_by_id(project_id)

    def list_projects(self) -> list[Project]:
        return sorted(
            self._project_repository.find_all(), key=lambda p: p.name.lower()
        )

    def resolve_project(self, name_or_id: str) -> Project:
        """
        Find a project by id, falling back to a case-insensitive name match.

        Raises:
            EntityNotFoundError: If nothing matches
        """
        project = self._project_repository.find_by_id(ProjectId(name_or_id))
        if project is not None:
            return project
        wanted = name_or_id.strip().lower()
        for candidate in self._project_repository.find_all():
            if candidate.name.lower() == wanted:
                return candidate
        raise EntityNotFoundError("Project", name_or_id)

    def delete_project(self, project_id: ProjectId) -> bool:
        project = self._project_repository.find_by_id(project_id)
        if project is not None and not ProjectService.can_delete_project(project):
            raise DomainError("Project cannot be deleted")
        removed = self._project_repository.delete(project_id)
        self._logger.info(f"Delete project {project_id}: removed={removed}")
        return removed

    def find_projects_by_tag(self, tag: str) -> list[Project]:
        return self._project_repository.find_by_tag(Tag.parse(tag).value)

    def search_projects(self, query: str) -> list[Project]:
        """Match a query against names, descriptions, paths and tags (case-insensitive)."""
        needle = query.strip().lower()
        if not needle:
            return self.list_projects()
        return [
            p
            for p in self.list_projects()
            if needle in p.name.lower()
            or needle in (p.description or "").lower()
            or needle in p.path.lower()
            or any(needle in t for t in p.tags)
        ]
