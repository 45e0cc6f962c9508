"""Restriction closure traversal.

A project is restricted by every project named in its ``restricted_by``
list, and transitively by everything those projects are restricted by.
:func:`check_restricted_by` visits that closure once per project and
requires a caller-supplied check to pass for each of them.
"""

from __future__ import annotations

from collections import deque
from typing import Callable

from ..logging import get_project_logger
from .models import Project

ProjectGetter = Callable[[str], Project]
ProjectCheck = Callable[[Project], bool]


def check_restricted_by(root: Project, get_project: ProjectGetter, check_project: ProjectCheck) -> bool:
    """Require ``check_project`` to pass for every project restricting ``root``.

    Traversal is breadth-first over ``restricted_by`` names. The root itself
    is never fetched or checked; its own rule is the caller's job. Each other
    name is fetched and checked at most once, however many paths reach it,
    so cycles and self-references terminate.

    The first ``False`` stops traversal and is the result. Exceptions from
    ``get_project`` (including ``ProjectNotFoundError``) or from
    ``check_project`` stop traversal and propagate unchanged.

    Args:
        root: Project whose restriction closure is checked.
        get_project: Lookup by name; raises ``ProjectNotFoundError`` for
            unknown names.
        check_project: Predicate applied to each ancestor on its own.

    Returns:
        True if every project in the closure passes (vacuously True when
        ``root.restricted_by`` is empty).

    Example::

        >>> check_restricted_by(
        ...     root, store.get, lambda p: is_source_allowed_locally(p, url)
        ... )
        False
    """
    logger = get_project_logger(__name__, project=root.name)

    visited: set[str] = {root.name}
    queue: deque[str] = deque(root.restricted_by)

    while queue:
        name = queue.popleft()
        if name in visited:
            continue
        visited.add(name)

        ancestor = get_project(name)
        if not check_project(ancestor):
            logger.info("denied by restricting project %s", name)
            return False

        logger.debug("restricting project %s permits", name)
        queue.extend(ancestor.restricted_by)

    return True


__all__ = [
    "ProjectCheck",
    "ProjectGetter",
    "check_restricted_by",
]
