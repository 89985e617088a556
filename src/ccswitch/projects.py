"""Project catalog: named local directories the assistant can be launched in."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from ccswitch.config import Paths, default_paths
from ccswitch.errors import (
    DuplicateNameError,
    DuplicatePathError,
    NotFoundError,
    ParseError,
)
from ccswitch.storage import ensure_json_file, read_json, write_json

logger = logging.getLogger(__name__)


@dataclass
class Project:
    """A registered project directory."""

    name: str
    path: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> Project:
        return cls(name=d["name"], path=d["path"])


class ProjectStore:
    """Access to ~/.claude/ccs-project.json.

    Paths are stored exactly as given. Callers resolve them to absolute form
    and check that they are directories before calling add_project.
    """

    def __init__(self, paths: Paths | None = None):
        self.paths = paths or default_paths()

    @property
    def projects_path(self) -> Path:
        return self.paths.projects_file

    def ensure_file(self) -> None:
        ensure_json_file(self.projects_path, [])

    def get_projects(self) -> list[Project]:
        self.ensure_file()
        data = read_json(self.projects_path)
        if not isinstance(data, list):
            raise ParseError(
                f"{self.projects_path} must contain a JSON array, "
                f"got {type(data).__name__}"
            )
        try:
            return [Project.from_dict(p) for p in data]
        except (KeyError, TypeError) as e:
            raise ParseError(f"Malformed project record in {self.projects_path}") from e

    def _save(self, projects: list[Project]) -> None:
        write_json(self.projects_path, [p.to_dict() for p in projects])

    def add_project(self, project: Project) -> None:
        projects = self.get_projects()

        if any(p.name == project.name for p in projects):
            raise DuplicateNameError(f"Project name '{project.name}' already exists")
        if any(p.path == project.path for p in projects):
            raise DuplicatePathError(f"Project path '{project.path}' already exists")

        projects.append(project)
        self._save(projects)
        logger.debug("added project %s -> %s", project.name, project.path)

    def remove_project(self, name: str) -> None:
        projects = self.get_projects()
        remaining = [p for p in projects if p.name != name]

        if len(remaining) == len(projects):
            raise NotFoundError(f"Project '{name}' does not exist")

        self._save(remaining)
        logger.debug("removed project %s", name)

    def get_project(self, name: str) -> Project | None:
        for p in self.get_projects():
            if p.name == name:
                return p
        return None

    def get_project_path(self, name: str) -> str | None:
        project = self.get_project(name)
        return project.path if project else None
