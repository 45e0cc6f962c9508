"""Authorization decisions over a project and its restriction closure.

Each decision applies one rule to the project itself, then requires the same
rule, applied to each restricting project on its own, to pass across the
whole closure. A lookup or evaluation error is raised, never folded into a
``False`` verdict.
"""

from __future__ import annotations

import logging

from .models import Destination, GroupKind, Project, Source
from .restrictions import ProjectGetter, check_restricted_by
from .rules import (
    is_destination_allowed_locally,
    is_group_kind_allowed_locally,
    is_source_allowed_locally,
)

logger = logging.getLogger(__name__)


def is_group_kind_permitted(
    root: Project,
    group_kind: GroupKind,
    namespaced: bool,
    get_project: ProjectGetter,
) -> bool:
    """Check whether ``root`` may manage resources of ``group_kind``.

    Args:
        root: The deployable unit's own project.
        group_kind: Resource kind being applied.
        namespaced: True for namespaced kinds, False for cluster-scoped kinds.
        get_project: Lookup used to resolve restricting projects.

    Returns:
        True if ``root`` and every project restricting it allow the kind.

    Raises:
        ProjectNotFoundError: A restricting project does not exist.
        ProjectAuthzError: Any other lookup or evaluation failure.

    Example::

        is_group_kind_permitted(root, GroupKind(group="", kind="ConfigMap"), True, store.get)
    """
    if not is_group_kind_allowed_locally(root, group_kind, namespaced):
        logger.debug("project %s does not allow %s (namespaced=%s)", root.name, group_kind, namespaced)
        return False
    return check_restricted_by(
        root,
        get_project,
        lambda project: is_group_kind_allowed_locally(project, group_kind, namespaced),
    )


def is_destination_permitted(root: Project, destination: Destination, get_project: ProjectGetter) -> bool:
    """Check whether ``root`` may deploy to ``destination``."""
    if not is_destination_allowed_locally(root, destination):
        logger.debug("project %s does not allow destination %s", root.name, destination)
        return False
    return check_restricted_by(
        root,
        get_project,
        lambda project: is_destination_allowed_locally(project, destination),
    )


def is_source_permitted(root: Project, source: Source, get_project: ProjectGetter) -> bool:
    """Check whether ``root`` may pull from ``source.repo_url``."""
    if not is_source_allowed_locally(root, source.repo_url):
        logger.debug("project %s does not allow source repository", root.name)
        return False
    return check_restricted_by(
        root,
        get_project,
        lambda project: is_source_allowed_locally(project, source.repo_url),
    )


def is_resource_permitted(
    root: Project,
    group_kind: GroupKind,
    namespace: str,
    destination: Destination,
    get_project: ProjectGetter,
) -> bool:
    """Check whether one concrete resource may be placed by ``root``.

    An empty ``namespace`` means a cluster-scoped resource: only the
    cluster-scoped kind rules apply, since cluster placement is authorized
    for the deployable unit as a whole rather than per resource.

    Otherwise the namespaced kind rules and the destination rules must both
    pass, with the destination's namespace replaced by ``namespace``.
    The kind check runs first; the destination check is skipped if it fails.
    """
    if not namespace:
        return is_group_kind_permitted(root, group_kind, False, get_project)

    if not is_group_kind_permitted(root, group_kind, True, get_project):
        return False
    return is_destination_permitted(root, destination.with_namespace(namespace), get_project)


__all__ = [
    "is_destination_permitted",
    "is_group_kind_permitted",
    "is_resource_permitted",
    "is_source_permitted",
]
