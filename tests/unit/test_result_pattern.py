"""
Tests for Result Pattern Implementation
"""

import pytest
from services.common.result import Result


class TestResultPattern:
    """Test suite for Result pattern"""

    def test_success_result(self):
        """Test creating a successful result"""
        data = {"id": 1, "title": "Kind of Blue"}
        result = Result.success(data)

        assert result.is_success is True
        assert result.is_failure is False
        assert result.data == data
        assert result.error is None
        assert result.error_code is None
        assert bool(result) is True

    def test_failure_result(self):
        """Test creating a failure result"""
        result = Result.failure("Work not found", code="NOT_FOUND")

        assert result.is_success is False
        assert result.is_failure is True
        assert result.data is None
        assert result.error == "Work not found"
        assert result.error_code == "NOT_FOUND"
        assert bool(result) is False

    def test_success_with_metadata(self):
        result = Result.success("data", metadata={"last_login": "2025-01-01"})
        assert result.metadata == {"last_login": "2025-01-01"}

    def test_errors_come_from_metadata(self):
        errors = {"title": ["can't be blank"]}
        result = Result.failure("Work data is invalid", code="VALIDATION_ERROR",
                                metadata={"errors": errors})

        assert result.errors == errors

    def test_errors_empty_without_metadata(self):
        assert Result.failure("Could not upvote").errors == {}
        assert Result.success(1).errors == {}

    def test_unwrap_success(self):
        assert Result.success([1, 2, 3]).unwrap() == [1, 2, 3]

    def test_unwrap_failure_raises(self):
        result = Result.failure("Could not log in")

        with pytest.raises(ValueError, match="Could not log in"):
            result.unwrap()

    def test_unwrap_or(self):
        assert Result.success("value").unwrap_or("default") == "value"
        assert Result.failure("error").unwrap_or("default") == "default"

    def test_repr(self):
        assert repr(Result.success(5)) == "Result.success(data=5)"
        assert repr(Result.failure("nope", code="X")) == "Result.failure(error='nope', code='X')"
