from .admission import resolve_project, validate_application, validate_resource
from .config import AuthzConfig, LogLevel, load_config_from_env
from .exceptions import (
    ConfigurationError,
    EvaluationError,
    PatternError,
    PermissionDeniedError,
    ProjectAuthzError,
    ProjectLookupError,
    ProjectNotFoundError,
)
from .logging import (
    ProjectAuthzFormatter,
    ProjectLoggerAdapter,
    get_project_logger,
    redact_secrets,
    safe_log_value,
    safe_preview,
    setup_logging,
)
from .permissions import (
    Destination,
    GroupKind,
    Project,
    Source,
    check_restricted_by,
    glob_match,
    is_destination_allowed_locally,
    is_destination_permitted,
    is_group_kind_allowed_locally,
    is_group_kind_permitted,
    is_resource_permitted,
    is_source_allowed_locally,
    is_source_permitted,
)
from .store import ProjectStore, guarded_lookup

__all__ = [
    'Project',
    'GroupKind',
    'Destination',
    'Source',
    'glob_match',
    'is_group_kind_allowed_locally',
    'is_destination_allowed_locally',
    'is_source_allowed_locally',
    'check_restricted_by',
    'is_group_kind_permitted',
    'is_destination_permitted',
    'is_source_permitted',
    'is_resource_permitted',
    'ProjectStore',
    'guarded_lookup',
    'resolve_project',
    'validate_application',
    'validate_resource',
    'AuthzConfig',
    'LogLevel',
    'load_config_from_env',
    'ProjectAuthzError',
    'ConfigurationError',
    'ProjectNotFoundError',
    'ProjectLookupError',
    'EvaluationError',
    'PatternError',
    'PermissionDeniedError',
    'safe_preview',
    'redact_secrets',
    'safe_log_value',
    'ProjectAuthzFormatter',
    'ProjectLoggerAdapter',
    'setup_logging',
    'get_project_logger',
]
