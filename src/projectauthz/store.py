"""In-memory project store and lookup helpers.

The engine only needs a ``get_project(name) -> Project`` callable. This
module supplies:
- ``ProjectStore``: a thread-safe name → Project mapping usable as that callable.
- ``guarded_lookup()``: wraps any lookup so foreign exceptions surface as
  ``ProjectLookupError`` instead of leaking store-specific types.
"""

from __future__ import annotations

import functools
import logging
import threading
from typing import Any, Callable, Iterable, Iterator, Mapping

from .exceptions import ProjectAuthzError, ProjectLookupError, ProjectNotFoundError
from .permissions.models import Project

logger = logging.getLogger(__name__)


class ProjectStore:
    """Thread-safe in-memory mapping of project names to projects.

    Projects are frozen, so a ``get`` always returns a consistent snapshot
    even while another thread replaces the entry.

    Example::

        store = ProjectStore.from_manifests(json.load(fp)["items"])
        is_source_permitted(store.get("team-a"), source, store.get)
    """

    def __init__(self, projects: Iterable[Project] = ()) -> None:
        self._lock = threading.RLock()
        self._projects: dict[str, Project] = {}
        for project in projects:
            self.add(project)

    @classmethod
    def from_manifests(cls, manifests: Iterable[Mapping[str, Any]]) -> ProjectStore:
        """Build a store from project manifests (see ``Project.from_manifest``)."""
        return cls(Project.from_manifest(manifest) for manifest in manifests)

    def add(self, project: Project) -> None:
        """Insert or replace a project."""
        with self._lock:
            if project.name in self._projects:
                logger.debug("replacing project %s", project.name)
            self._projects[project.name] = project

    def remove(self, name: str) -> Project:
        """Remove and return a project.

        Raises:
            ProjectNotFoundError: If no project has that name.
        """
        with self._lock:
            try:
                return self._projects.pop(name)
            except KeyError:
                raise ProjectNotFoundError(f'project "{name}" not found', name=name) from None

    def get(self, name: str) -> Project:
        """Look up a project by name.

        Raises:
            ProjectNotFoundError: If no project has that name.
        """
        with self._lock:
            project = self._projects.get(name)
        if project is None:
            raise ProjectNotFoundError(f'project "{name}" not found', name=name)
        return project

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._projects)

    def __call__(self, name: str) -> Project:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._projects

    def __len__(self) -> int:
        with self._lock:
            return len(self._projects)

    def __iter__(self) -> Iterator[Project]:
        with self._lock:
            return iter(list(self._projects.values()))


def guarded_lookup(get_project: Callable[[str], Any]) -> Callable[[str], Project]:
    """Wrap a lookup so every failure is a ``ProjectAuthzError``.

    - ``ProjectAuthzError`` (including ``ProjectNotFoundError``) passes through.
    - Any other exception becomes ``ProjectLookupError`` chained from it.
    - A result that is not a ``Project`` becomes ``ProjectLookupError``.

    No retries are attempted; retry policy belongs to the wrapped lookup.

    Example::

        get_project = guarded_lookup(remote_client.fetch_project)
        is_destination_permitted(root, destination, get_project)
    """

    @functools.wraps(get_project)
    def wrapper(name: str) -> Project:
        try:
            project = get_project(name)
        except ProjectAuthzError:
            raise
        except Exception as e:
            logger.warning("lookup of project %s failed: %s", name, e)
            raise ProjectLookupError(
                f'failed to get project "{name}": {e}',
                name=name,
                cause=type(e).__name__,
            ) from e

        if not isinstance(project, Project):
            raise ProjectLookupError(
                f'lookup of project "{name}" returned {type(project).__name__}, not a Project',
                name=name,
            )
        return project

    return wrapper


__all__ = [
    "ProjectStore",
    "guarded_lookup",
]
