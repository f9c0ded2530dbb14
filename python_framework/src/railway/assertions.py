"""
Test assertions for Result values.

Provides expressive assert methods that produce clear failure messages.

Usage in tests:
    from railway import ResultAssertions

    def test_loads_config():
        result = loader.load("valid.txt")
        config = ResultAssertions.assert_success(result)
        assert config.raw_text == "valid_data_content"

    def test_missing_file():
        result = loader.load("missing.txt")
        error = ResultAssertions.assert_failure(result, ReadError)
        assert error.source_identifier == "missing.txt"
"""

from __future__ import annotations

from typing import Any, TypeVar

from railway.result import Result

T = TypeVar("T")
E = TypeVar("E")
K = TypeVar("K")


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_success(result: Result[T, Any], message: str = "") -> T:
        """
        Assert the Result is a Success and return the value.

        Raises AssertionError with clear message on failure.

            value = ResultAssertions.assert_success(result)
        """
        context = f" — {message}" if message else ""
        assert result.is_success(), (
            f"Expected Success but got Failure({result.error()!r}){context}"
        )
        return result.value()

    @staticmethod
    def assert_failure(
        result: Result[Any, E],
        expected_type: type[K] | None = None,
        message: str = "",
    ) -> Any:
        """
        Assert the Result is a Failure, optionally checking the error's type.

        When `expected_type` is given the error is checked with isinstance,
        so callers get a typed payload back instead of matching on strings.

            error = ResultAssertions.assert_failure(result, ReadError)
            assert error.source_identifier == "missing.txt"
        """
        context = f" — {message}" if message else ""
        assert result.is_failure(), (
            f"Expected Failure but got Success({result.value()!r}){context}"
        )
        error = result.error()
        if expected_type is not None:
            assert isinstance(error, expected_type), (
                f"Expected error of type {expected_type.__name__} "
                f"but got {type(error).__name__}: {error!r}{context}"
            )
        return error

    @staticmethod
    def assert_failure_equals(result: Result[Any, E], expected_error: E) -> None:
        """Assert the Result is a Failure carrying exactly the expected error."""
        error = ResultAssertions.assert_failure(result)
        assert error == expected_error, (
            f"Expected failure {expected_error!r} but got {error!r}"
        )

    @staticmethod
    def assert_success_value(result: Result[T, Any], expected_value: Any) -> None:
        """Assert the Result is a Success with the specific value."""
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )
