"""
Shared pytest fixtures for the trig test suite.

This module provides:
- Realization fixtures for each float width
- A helper for asserting Pydantic validation errors
- Isolation of the global context registry
"""

import pytest
from typing import Any, Type
from pydantic import BaseModel, ValidationError

import trig.context
from trig import Float32Trig, Float64Trig


@pytest.fixture
def trig32() -> Float32Trig:
    """Single-precision realization."""
    return Float32Trig()


@pytest.fixture
def trig64() -> Float64Trig:
    """Double-precision realization."""
    return Float64Trig()


@pytest.fixture(params=[Float32Trig, Float64Trig], ids=["f32", "f64"])
def any_trig(request):
    """Each realization in turn."""
    return request.param()


@pytest.fixture(autouse=True)
def isolated_contexts(monkeypatch):
    """Give each test a fresh context registry."""
    monkeypatch.setattr(trig.context, "_contexts", {})
    monkeypatch.setattr(trig.context, "_current_context", None)


@pytest.fixture
def assert_validation_error():
    """Helper to assert that a ValidationError is raised with expected details."""
    def _assert_validation(
        model_class: Type[BaseModel],
        data: dict[str, Any],
        expected_field: str | None = None,
    ) -> ValidationError:
        """
        Assert that creating a model raises ValidationError.

        Args:
            model_class: The Pydantic model class
            data: Invalid data to pass to model
            expected_field: Expected field name in error (optional)

        Returns:
            The ValidationError that was raised
        """
        with pytest.raises(ValidationError) as exc_info:
            model_class(**data)

        error = exc_info.value
        if expected_field:
            field_errors = [e for e in error.errors() if e['loc'][0] == expected_field]
            assert len(field_errors) > 0, f"Expected error for field '{expected_field}' not found"

        return error

    return _assert_validation
