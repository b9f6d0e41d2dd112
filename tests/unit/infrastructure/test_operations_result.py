"""Unit tests for OperationResult and OperationStatus."""

import dataclasses

import pytest

from mlang.infrastructure.operations.result import OperationResult
from mlang.infrastructure.operations.status import OperationStatus


@pytest.mark.unit
class TestOperationStatus:
    def test_operation_status_values(self):
        assert OperationStatus.SUCCESS.value == "success"
        assert OperationStatus.TRANSIENT_ERROR.value == "transient_error"
        assert OperationStatus.PERMANENT_ERROR.value == "permanent_error"
        assert OperationStatus.UNAUTHORIZED.value == "unauthorized"
        assert OperationStatus.NOT_FOUND.value == "not_found"


@pytest.mark.unit
class TestOperationResultFactories:
    def test_success_factory_minimal(self):
        result = OperationResult.success()
        assert result.status == OperationStatus.SUCCESS
        assert result.message == "ok"
        assert result.is_success

    def test_success_factory_with_data(self):
        result = OperationResult.success(data={"language": "en_us"}, message="loaded")
        assert result.data == {"language": "en_us"}
        assert result.message == "loaded"

    def test_error_factory_with_error_code(self):
        result = OperationResult.error(
            OperationStatus.NOT_FOUND, "Missing", error_code="FETCH_NOT_FOUND"
        )
        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code == "FETCH_NOT_FOUND"
        assert not result.is_success

    def test_transient_error_factory(self):
        result = OperationResult.transient_error(
            "Timeout", error_code="FETCH_TIMEOUT", retry_after=30
        )
        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.retry_after == 30

    def test_permanent_error_factory(self):
        result = OperationResult.permanent_error("Bad file", error_code="PARSE_ERROR")
        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "PARSE_ERROR"


@pytest.mark.unit
class TestOperationResultBehaviour:
    def test_truthiness_follows_success(self):
        assert OperationResult.success()
        assert not OperationResult.permanent_error("nope")

    def test_result_is_immutable(self):
        result = OperationResult.success()
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.message = "changed"
