"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_exceptions.py
@DateTime: 2026-10-18
@Docs: Tests for exceptions.py module.
exceptions.py 模块测试。
"""

from validation_report.error import Error
from validation_report.exceptions import (
    PathComponentError,
    PatternError,
    ValidationFailed,
    ValidationReportError,
)
from validation_report.path import Path
from validation_report.report import Report


class TestValidationReportError:
    """Tests for ValidationReportError.
    ValidationReportError 测试。
    """

    def test_attributes(self) -> None:
        """All attributes assigned correctly / 所有属性正确赋值。"""
        exc = ValidationReportError(
            message="test error",
            status_code=409,
            details={"key": "val"},
            error_code="custom_error",
        )
        assert exc.message == "test error"
        assert exc.status_code == 409
        assert exc.details == {"key": "val"}
        assert exc.error_code == "custom_error"

    def test_defaults(self) -> None:
        """Default status_code and error_code / 默认 status_code 和 error_code。"""
        exc = ValidationReportError(message="msg")
        assert exc.status_code == 400
        assert exc.error_code == "validation_report_error"
        assert exc.details is None

    def test_str_returns_message(self) -> None:
        assert str(ValidationReportError(message="hello world")) == "hello world"


class TestSubclasses:
    """Tests for exception subclasses.
    异常子类测试。
    """

    def test_path_component_error(self) -> None:
        exc = PathComponentError(message="bad")
        assert isinstance(exc, ValidationReportError)
        assert isinstance(exc, TypeError)
        assert exc.error_code == "invalid_path_component"

    def test_pattern_error(self) -> None:
        exc = PatternError(message="bad", details={"pattern": "x"})
        assert isinstance(exc, ValidationReportError)
        assert isinstance(exc, ValueError)
        assert exc.error_code == "invalid_pattern"
        assert exc.details == {"pattern": "x"}

    def test_validation_failed_defaults(self) -> None:
        """Message defaults to the report text / 消息默认为报告文本。"""
        report = Report()
        report.append(Path.new("a"), Error("x"))
        report.append(Path.new("b"), Error("y"))
        exc = ValidationFailed(report=report)
        assert exc.report is report
        assert exc.status_code == 422
        assert exc.error_code == "validation_failed"
        assert exc.message == "a: x\nb: y"

    def test_validation_failed_custom_message(self) -> None:
        exc = ValidationFailed(report=Report(), message="custom", status_code=400)
        assert str(exc) == "custom"
        assert exc.status_code == 400

    def test_catchable_as_base(self) -> None:
        """ValidationFailed can be caught as ValidationReportError / 可被基类捕获。"""
        try:
            raise ValidationFailed(report=Report(), message="failed")
        except ValidationReportError as exc:
            assert exc.message == "failed"
