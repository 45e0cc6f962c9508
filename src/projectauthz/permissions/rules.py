"""Project-local rules.

Each predicate looks at one project's own configuration only. Ancestry is
handled by :mod:`.restrictions`; these functions never call a lookup.
"""

from __future__ import annotations

from typing import Iterable

from .glob import glob_match
from .models import Destination, GroupKind, Project


def _group_kind_in_list(group_kind: GroupKind, entries: Iterable[GroupKind]) -> bool:
    return any(
        glob_match(entry.group, group_kind.group) and glob_match(entry.kind, group_kind.kind) for entry in entries
    )


def is_group_kind_allowed_locally(project: Project, group_kind: GroupKind, namespaced: bool) -> bool:
    """Check a resource kind against one project's allow/deny lists.

    A deny (blacklist) match always blocks. Otherwise the kind must match the
    allow (whitelist) list, except that an empty namespaced allow list allows
    every namespaced kind. Cluster-scoped kinds need an explicit allow entry.

    Args:
        project: Project whose own lists are consulted.
        group_kind: Resource kind to check.
        namespaced: True for namespaced kinds, False for cluster-scoped kinds.

    Returns:
        True if the project's own lists permit the kind.
    """
    if namespaced:
        allow = project.namespace_resource_whitelist
        deny = project.namespace_resource_blacklist
        allowed_by_default = True
    else:
        allow = project.cluster_resource_whitelist
        deny = project.cluster_resource_blacklist
        allowed_by_default = False

    if _group_kind_in_list(group_kind, deny):
        return False
    if not allow:
        return allowed_by_default
    return _group_kind_in_list(group_kind, allow)


def destination_matches(pattern: Destination, destination: Destination) -> bool:
    """Check one destination rule against a concrete destination.

    The cluster matches if the rule's server pattern matches the candidate's
    server, or the rule's name pattern matches the candidate's name. Empty
    fields on either side never match. The namespace must match as well.
    """
    server_matched = bool(pattern.server and destination.server) and glob_match(pattern.server, destination.server)
    name_matched = bool(pattern.name and destination.name) and glob_match(pattern.name, destination.name)
    if not (server_matched or name_matched):
        return False
    return glob_match(pattern.namespace, destination.namespace)


def is_destination_allowed_locally(project: Project, destination: Destination) -> bool:
    """True iff one of the project's destination rules matches ``destination``."""
    return any(destination_matches(pattern, destination) for pattern in project.destinations)


def is_source_allowed_locally(project: Project, repo_url: str) -> bool:
    """True iff one of the project's source patterns matches ``repo_url``."""
    return any(glob_match(pattern, repo_url) for pattern in project.source_repos)


__all__ = [
    "destination_matches",
    "is_destination_allowed_locally",
    "is_group_kind_allowed_locally",
    "is_source_allowed_locally",
]
