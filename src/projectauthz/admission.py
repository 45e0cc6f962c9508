"""Admission helpers for services that create or update deployable units.

Turns engine verdicts into exceptions with operator-facing messages:
- ``resolve_project()``: fetch the project a unit references.
- ``validate_application()``: source and destination must be permitted.
- ``validate_resource()``: one concrete resource must be permitted.

A ``PermissionDeniedError`` is an authoritative denial; any other
``ProjectAuthzError`` means the verdict could not be determined.
"""

from __future__ import annotations

import logging

from .exceptions import ConfigurationError, PermissionDeniedError, ProjectNotFoundError
from .logging import redact_secrets
from .permissions import (
    Destination,
    GroupKind,
    Project,
    ProjectGetter,
    Source,
    is_destination_permitted,
    is_resource_permitted,
    is_source_permitted,
)

logger = logging.getLogger(__name__)


def _is_templated(name: str) -> bool:
    return name.startswith("{{") and name.endswith("}}")


def resolve_project(project_name: str, get_project: ProjectGetter) -> Project:
    """Fetch the project a deployable unit references.

    Raises:
        ConfigurationError: The name is empty or still a template expression.
        ProjectNotFoundError: No such project.
    """
    if not project_name:
        raise ConfigurationError("project name must not be empty")
    if _is_templated(project_name):
        raise ConfigurationError(
            "cannot use a templated value for the project field",
            project=project_name,
        )

    try:
        return get_project(project_name)
    except ProjectNotFoundError as e:
        raise ProjectNotFoundError(
            f"application references project {project_name} which does not exist",
            name=project_name,
        ) from e


def validate_application(
    project: Project,
    source: Source,
    destination: Destination,
    get_project: ProjectGetter,
) -> None:
    """Require ``source`` and ``destination`` to be permitted for ``project``.

    Raises:
        PermissionDeniedError: The source or destination is denied.
        ProjectAuthzError: A restricting project could not be resolved.
    """
    if not is_source_permitted(project, source, get_project):
        repo = redact_secrets(source.repo_url)
        logger.info("project %s denies source %s", project.name, repo)
        raise PermissionDeniedError(
            f"application repo {repo} is not permitted in project '{project.name}'",
            project=project.name,
            check="source",
        )

    if not is_destination_permitted(project, destination, get_project):
        cluster = destination.server or destination.name
        logger.info("project %s denies destination %s/%s", project.name, cluster, destination.namespace)
        raise PermissionDeniedError(
            f"application destination {{{cluster} {destination.namespace}}} "
            f"is not permitted in project '{project.name}'",
            project=project.name,
            check="destination",
        )


def validate_resource(
    project: Project,
    group_kind: GroupKind,
    namespace: str,
    destination: Destination,
    get_project: ProjectGetter,
) -> None:
    """Require one concrete resource to be permitted for ``project``.

    Raises:
        PermissionDeniedError: The resource is denied.
        ProjectAuthzError: A restricting project could not be resolved.
    """
    if is_resource_permitted(project, group_kind, namespace, destination, get_project):
        return

    if namespace:
        message = f"resource {group_kind} is not permitted in namespace {namespace} by project '{project.name}'"
    else:
        message = f"cluster-scoped resource {group_kind} is not permitted by project '{project.name}'"
    raise PermissionDeniedError(
        message,
        project=project.name,
        check="resource",
        group_kind=str(group_kind),
        namespace=namespace,
    )


__all__ = [
    "resolve_project",
    "validate_application",
    "validate_resource",
]
