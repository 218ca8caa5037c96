"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: exceptions.py
@DateTime: 2026-10-18
@Docs: Validation report error hierarchy.
校验报告异常体系。
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from validation_report.report import Report


class ValidationReportError(Exception):
    """
    Validation report errors.
    校验报告异常。

    Errors raised at the package's input boundaries.
    在包的输入边界处抛出的异常。

    Attributes:
        message: Error message.
        message: 错误消息。
        status_code: HTTP status code.
        status_code: HTTP 状态码。
        details: Error details.
        details: 错误详情。
        error_code: Stable error code.
        error_code: 稳定错误码。
    """

    def __init__(
        self,
        *,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
        error_code: str = "validation_report_error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details
        self.error_code = error_code


class PathComponentError(ValidationReportError, TypeError):
    """
    Unsupported path component.
    不支持的路径组件。
    """

    def __init__(self, *, message: str, details: Any | None = None) -> None:
        super().__init__(message=message, details=details, error_code="invalid_path_component")


class PatternError(ValidationReportError, ValueError):
    """
    Malformed select pattern.
    select 模式格式错误。
    """

    def __init__(self, *, message: str, details: Any | None = None) -> None:
        super().__init__(message=message, details=details, error_code="invalid_pattern")


class ValidationFailed(ValidationReportError):
    """
    A validation pass produced a non-empty report.
    校验过程产生了非空报告。

    Attributes:
        report: The failing report.
        report: 失败的报告。
    """

    def __init__(
        self,
        *,
        report: "Report",
        message: str | None = None,
        status_code: int = 422,
        details: Any | None = None,
    ) -> None:
        super().__init__(
            message=message if message is not None else str(report).rstrip("\n"),
            status_code=status_code,
            details=details,
            error_code="validation_failed",
        )
        self.report = report
