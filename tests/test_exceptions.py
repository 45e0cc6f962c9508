"""Tests for the exception hierarchy and protocol mapping."""

from __future__ import annotations

import pytest

from projectauthz import (
    ConfigurationError,
    EvaluationError,
    PatternError,
    PermissionDeniedError,
    ProjectAuthzError,
    ProjectLookupError,
    ProjectNotFoundError,
)
from projectauthz.exceptions import error_registry, get_grpc_status_code, register_error


class TestHierarchy:
    """Tests for error classes."""

    @pytest.mark.parametrize(
        ("error_cls", "code"),
        [
            (ProjectAuthzError, "INTERNAL_ERROR"),
            (ConfigurationError, "CONFIGURATION_ERROR"),
            (ProjectNotFoundError, "PROJECT_NOT_FOUND"),
            (ProjectLookupError, "LOOKUP_FAILURE"),
            (EvaluationError, "EVALUATION_ERROR"),
            (PatternError, "INVALID_PATTERN"),
            (PermissionDeniedError, "PERMISSION_DENIED"),
        ],
    )
    def test_codes_registered(self, error_cls: type[ProjectAuthzError], code: str) -> None:
        assert error_cls.code == code
        assert error_registry.get(code) is error_cls

    def test_pattern_error_is_evaluation_error(self) -> None:
        assert issubclass(PatternError, EvaluationError)

    def test_message_and_details(self) -> None:
        error = ProjectNotFoundError('project "x" not found', name="x")
        assert str(error) == 'project "x" not found'
        assert error.details == {"name": "x"}

    def test_default_message(self) -> None:
        assert ProjectLookupError().message == "project lookup failed"

    def test_code_override(self) -> None:
        assert ProjectAuthzError("boom", code="CUSTOM").code == "CUSTOM"

    def test_register_error(self) -> None:
        @register_error("STORE_TIMEOUT")
        class StoreTimeoutError(ProjectLookupError):
            code = "STORE_TIMEOUT"

        assert error_registry.get("STORE_TIMEOUT") is StoreTimeoutError
        assert "STORE_TIMEOUT" in error_registry.all()


class TestGrpcStatusCode:
    """Tests for get_grpc_status_code."""

    def test_mapping(self) -> None:
        grpc = pytest.importorskip("grpc")

        assert get_grpc_status_code(ProjectNotFoundError()) == grpc.StatusCode.NOT_FOUND
        assert get_grpc_status_code(ProjectLookupError()) == grpc.StatusCode.UNAVAILABLE
        assert get_grpc_status_code(PatternError()) == grpc.StatusCode.INVALID_ARGUMENT
        assert get_grpc_status_code(PermissionDeniedError()) == grpc.StatusCode.PERMISSION_DENIED
        assert get_grpc_status_code(ConfigurationError()) == grpc.StatusCode.FAILED_PRECONDITION
        assert get_grpc_status_code(ProjectAuthzError()) == grpc.StatusCode.INTERNAL
