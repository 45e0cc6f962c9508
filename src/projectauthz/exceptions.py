"""Unified exception hierarchy for projectauthz.

All errors inherit from ProjectAuthzError. This module provides:
- Base exception hierarchy with stable error codes
- ErrorRegistry for protocol mapping
- gRPC status-code mapping for callers that surface errors over gRPC

A raised error always means "cannot determine, fail closed". It is never
equivalent to a plain ``False`` verdict, which is an authoritative denial.

Usage:
    from projectauthz.exceptions import (
        ProjectAuthzError,
        ProjectNotFoundError,
        ProjectLookupError,
    )
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar, cast

__all__ = [
    # Base hierarchy
    "ProjectAuthzError",
    "ConfigurationError",
    "ProjectNotFoundError",
    "ProjectLookupError",
    "EvaluationError",
    "PatternError",
    "PermissionDeniedError",
    # Registry
    "ErrorRegistry",
    "error_registry",
    "register_error",
    # gRPC helpers
    "get_grpc_status_code",
]


# ---- Exception Hierarchy ----------------------------------------------------


class ProjectAuthzError(Exception):
    """Base exception for the project authorization engine.

    Attributes:
        code: Stable error code string for protocol mapping (e.g. "PROJECT_NOT_FOUND").
        message: Human-readable error description.
        details: Additional context as keyword arguments.
    """

    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(self, message: str | None = None, code: str | None = None, **kwargs: Any) -> None:
        self.message = message or self.message
        self.code = code or self.code
        self.details = kwargs
        super().__init__(self.message)


class ConfigurationError(ProjectAuthzError):
    """Invalid configuration or malformed project manifest."""

    code: str = "CONFIGURATION_ERROR"


class ProjectNotFoundError(ProjectAuthzError):
    """A project name does not resolve to an existing project."""

    code: str = "PROJECT_NOT_FOUND"
    message: str = "project not found"


class ProjectLookupError(ProjectAuthzError):
    """Project lookup failed for a reason other than absence (I/O, decode, timeout)."""

    code: str = "LOOKUP_FAILURE"
    message: str = "project lookup failed"


class EvaluationError(ProjectAuthzError):
    """A local or ancestor rule could not be evaluated."""

    code: str = "EVALUATION_ERROR"


class PatternError(EvaluationError):
    """A glob pattern or its candidate value is malformed."""

    code: str = "INVALID_PATTERN"


class PermissionDeniedError(ProjectAuthzError):
    """An admission check was authoritatively denied by the project hierarchy."""

    code: str = "PERMISSION_DENIED"
    message: str = "permission denied"


# ---- Error Registry for Protocol Mapping ------------------------------------

_E = TypeVar("_E", bound=type[ProjectAuthzError])


class ErrorRegistry:
    """Registry for mapping internal errors to external protocol codes."""

    def __init__(self) -> None:
        self._errors: dict[str, type[ProjectAuthzError]] = {}

    def register(self, code: str, error_cls: type[ProjectAuthzError]) -> None:
        self._errors[code] = error_cls

    def get(self, code: str) -> type[ProjectAuthzError] | None:
        return self._errors.get(code)

    def all(self) -> dict[str, type[ProjectAuthzError]]:
        return dict(self._errors)


error_registry = ErrorRegistry()


def register_error(code: str) -> Callable[[_E], _E]:
    """Decorator to register a custom error type.

    Usage:
        @register_error("STORE_TIMEOUT")
        class StoreTimeoutError(ProjectLookupError):
            code = "STORE_TIMEOUT"
    """

    def decorator(cls: _E) -> _E:
        error_registry.register(code, cls)
        return cls

    return cast(Callable[[_E], _E], decorator)


# Register base errors
error_registry.register("INTERNAL_ERROR", ProjectAuthzError)
error_registry.register("CONFIGURATION_ERROR", ConfigurationError)
error_registry.register("PROJECT_NOT_FOUND", ProjectNotFoundError)
error_registry.register("LOOKUP_FAILURE", ProjectLookupError)
error_registry.register("EVALUATION_ERROR", EvaluationError)
error_registry.register("INVALID_PATTERN", PatternError)
error_registry.register("PERMISSION_DENIED", PermissionDeniedError)


# ---- gRPC Error Handling Utilities ------------------------------------------


def get_grpc_status_code(error: ProjectAuthzError) -> int:
    """Map ProjectAuthzError to gRPC status code.

    Returns grpc.StatusCode value for the given error type.
    Import grpc locally to avoid hard dependency at module level.
    """
    import grpc

    error_to_status = {
        "PROJECT_NOT_FOUND": grpc.StatusCode.NOT_FOUND,
        "LOOKUP_FAILURE": grpc.StatusCode.UNAVAILABLE,
        "EVALUATION_ERROR": grpc.StatusCode.INVALID_ARGUMENT,
        "INVALID_PATTERN": grpc.StatusCode.INVALID_ARGUMENT,
        "PERMISSION_DENIED": grpc.StatusCode.PERMISSION_DENIED,
        "CONFIGURATION_ERROR": grpc.StatusCode.FAILED_PRECONDITION,
    }
    return error_to_status.get(error.code, grpc.StatusCode.INTERNAL)
