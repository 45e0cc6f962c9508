"""Data models for projects and the things they scope.

These are frozen Pydantic models: the authorization engine reads projects
through a lookup callback and never mutates them. Field aliases follow the
camelCase keys of project manifests so a manifest can be validated directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Mapping

from pydantic import BaseModel, Field, ValidationError

from ..exceptions import ConfigurationError

if TYPE_CHECKING:
    ProjectGetter = Callable[[str], "Project"]

_MODEL_CONFIG = {
    "frozen": True,
    "populate_by_name": True,
    "extra": "ignore",
}


class GroupKind(BaseModel):
    """API resource type: group plus kind. Either field may be a glob."""

    model_config = _MODEL_CONFIG

    group: str = ""
    kind: str

    @classmethod
    def parse(cls, value: str) -> GroupKind:
        """Parse ``"apps/Deployment"`` or ``"ConfigMap"`` (core group)."""
        group, _, kind = value.rpartition("/")
        return cls(group=group, kind=kind)

    def __str__(self) -> str:
        return f"{self.group}/{self.kind}" if self.group else self.kind


class Destination(BaseModel):
    """Target cluster (by server URL or by name) plus namespace.

    As a project rule every field is a glob pattern; as a candidate every
    field is a concrete value.
    """

    model_config = _MODEL_CONFIG

    server: str = ""
    name: str = ""
    namespace: str = ""

    def with_namespace(self, namespace: str) -> Destination:
        return self.model_copy(update={"namespace": namespace})


class Source(BaseModel):
    """Source repository a deployable unit pulls manifests from."""

    model_config = _MODEL_CONFIG

    repo_url: str = Field(alias="repoURL")
    path: str = ""
    target_revision: str = Field(default="", alias="targetRevision")


class Project(BaseModel):
    """Tenancy unit that scopes what its deployable units may touch.

    ``restricted_by`` names other projects whose rules must also permit
    anything this project permits. The names may be missing from the store,
    may form cycles, and may include this project's own name.

    Example::

        project = Project.from_manifest({
            "metadata": {"name": "team-a"},
            "spec": {
                "restrictedBy": ["org-defaults"],
                "sourceRepos": ["https://github.com/team-a/*"],
                "destinations": [{"name": "dev-*", "namespace": "team-a-*"}],
            },
        })
        project.is_source_permitted(
            Source(repo_url="https://github.com/team-a/app.git"), store.get
        )
    """

    model_config = _MODEL_CONFIG

    name: str = ""
    description: str = ""
    restricted_by: tuple[str, ...] = Field(default=(), alias="restrictedBy")
    source_repos: tuple[str, ...] = Field(default=(), alias="sourceRepos")
    destinations: tuple[Destination, ...] = ()
    namespace_resource_whitelist: tuple[GroupKind, ...] = Field(default=(), alias="namespaceResourceWhitelist")
    namespace_resource_blacklist: tuple[GroupKind, ...] = Field(default=(), alias="namespaceResourceBlacklist")
    cluster_resource_whitelist: tuple[GroupKind, ...] = Field(default=(), alias="clusterResourceWhitelist")
    cluster_resource_blacklist: tuple[GroupKind, ...] = Field(default=(), alias="clusterResourceBlacklist")

    @classmethod
    def from_manifest(cls, manifest: Mapping[str, Any]) -> Project:
        """Build a project from a manifest mapping.

        Accepts a full object (``{"metadata": {"name": ...}, "spec": {...}}``)
        or a flat mapping with a ``name`` key next to the spec fields.

        Raises:
            ConfigurationError: If the manifest or its spec/metadata is not a
                mapping, has no name, or fails validation.
        """
        if not isinstance(manifest, Mapping):
            raise ConfigurationError(f"project manifest must be a mapping, got {type(manifest).__name__}")

        if "spec" in manifest or "metadata" in manifest:
            spec = manifest.get("spec") or {}
            metadata = manifest.get("metadata") or {}
            for key, section in (("spec", spec), ("metadata", metadata)):
                if not isinstance(section, Mapping):
                    raise ConfigurationError(
                        f"project manifest {key} must be a mapping, got {type(section).__name__}",
                        section=key,
                    )
            data = dict(spec)
            data["name"] = metadata.get("name", "")
        else:
            data = dict(manifest)

        if not data.get("name"):
            raise ConfigurationError("project manifest is missing a name")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"invalid manifest for project {data['name']!r}: {e.error_count()} validation error(s)",
                project=data["name"],
                errors=e.errors(include_url=False),
            ) from e

    # ── Composite checks (whole restriction closure) ──

    def is_group_kind_permitted(self, group_kind: GroupKind, namespaced: bool, get_project: ProjectGetter) -> bool:
        from .access import is_group_kind_permitted

        return is_group_kind_permitted(self, group_kind, namespaced, get_project)

    def is_destination_permitted(self, destination: Destination, get_project: ProjectGetter) -> bool:
        from .access import is_destination_permitted

        return is_destination_permitted(self, destination, get_project)

    def is_source_permitted(self, source: Source, get_project: ProjectGetter) -> bool:
        from .access import is_source_permitted

        return is_source_permitted(self, source, get_project)

    def is_resource_permitted(
        self,
        group_kind: GroupKind,
        namespace: str,
        destination: Destination,
        get_project: ProjectGetter,
    ) -> bool:
        from .access import is_resource_permitted

        return is_resource_permitted(self, group_kind, namespace, destination, get_project)


__all__ = [
    "Destination",
    "GroupKind",
    "Project",
    "Source",
]
