"""Hierarchical project authorization.

Defines:
- glob_match(): anchored ``*`` glob used by every rule
- Project, GroupKind, Destination, Source: the models rules are written over
- is_*_allowed_locally(): one project's own rules
- check_restricted_by(): walk the restriction closure once per project
- is_*_permitted(): project rule AND every restricting project's rule
"""

from .access import (
    is_destination_permitted,
    is_group_kind_permitted,
    is_resource_permitted,
    is_source_permitted,
)
from .glob import WILDCARD, glob_match
from .models import Destination, GroupKind, Project, Source
from .restrictions import ProjectCheck, ProjectGetter, check_restricted_by
from .rules import (
    destination_matches,
    is_destination_allowed_locally,
    is_group_kind_allowed_locally,
    is_source_allowed_locally,
)

__all__ = [
    "WILDCARD",
    "Destination",
    "GroupKind",
    "Project",
    "ProjectCheck",
    "ProjectGetter",
    "Source",
    "check_restricted_by",
    "destination_matches",
    "glob_match",
    "is_destination_allowed_locally",
    "is_destination_permitted",
    "is_group_kind_allowed_locally",
    "is_group_kind_permitted",
    "is_resource_permitted",
    "is_source_allowed_locally",
    "is_source_permitted",
]
