"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: config.py
@DateTime: 2026-10-18
@Docs: Report serialization and HTTP configuration helpers.
报告序列化与 HTTP 配置助手。

Configuration helpers for serialized reports.
序列化报告的配置助手。

This module defines the field names used when a report is serialized and the
HTTP status used when a failing report is raised as ``ValidationFailed``.
本模块定义报告序列化时使用的字段名，以及失败报告以 ``ValidationFailed`` 抛出时使用的 HTTP 状态码。

Environment variables / 环境变量:
        - VALIDATION_REPORT_PATH_FIELD:
            Key holding the rendered path (default: path).
            保存渲染路径的键名（默认 path）。
        - VALIDATION_REPORT_ERROR_FIELD:
            Key holding the error message (default: error).
            保存错误消息的键名（默认 error）。
        - VALIDATION_REPORT_STATUS_CODE:
            HTTP status code for failed validation (default: 422).
            校验失败时的 HTTP 状态码（默认 422）。
        - VALIDATION_REPORT_MESSAGE:
            Summary message used in HTTP payloads.
            HTTP 响应中的摘要消息。

Examples:
        Use defaults / 使用默认值:

        >>> from validation_report.config import resolve_config
        >>> cfg = resolve_config(env_prefix="VALIDATION_REPORT_DOCTEST")
        >>> cfg.path_field, cfg.error_field, cfg.status_code
        ('path', 'error', 422)
"""

import os
from dataclasses import dataclass

from validation_report.exceptions import ValidationReportError

DEFAULT_PATH_FIELD = "path"
DEFAULT_ERROR_FIELD = "error"
DEFAULT_STATUS_CODE = 422
DEFAULT_MESSAGE = "Validation failed"


@dataclass(frozen=True, slots=True)
class ReportConfig:
    """Report configuration.

    报告配置.

    Attributes:
        path_field: Key holding the rendered path in serialized entries.
            序列化条目中保存渲染路径的键名。
        error_field: Key holding the error message in serialized entries.
            序列化条目中保存错误消息的键名。
        status_code: HTTP status code for ``ValidationFailed``.
            ``ValidationFailed`` 使用的 HTTP 状态码。
        message: Summary message used in HTTP payloads.
            HTTP 响应中的摘要消息。
    """

    path_field: str = DEFAULT_PATH_FIELD
    error_field: str = DEFAULT_ERROR_FIELD
    status_code: int = DEFAULT_STATUS_CODE
    message: str = DEFAULT_MESSAGE


def _env_get(*names: str) -> str | None:
    """
    Get the first non-empty environment variable value.
    获取第一个非空环境变量值。

    Args:
        *names: Candidate environment variable names in priority order.
            候选环境变量名（按优先级顺序）。

    Returns:
        The first non-empty value, or None.
            返回第一个非空值；若都为空则返回 None。
    """
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip():
            return v.strip()
    return None


def _parse_status_code(value: int | str) -> int:
    """
    Parse and range-check an HTTP status code.
    解析并校验 HTTP 状态码范围。

    Args:
        value: Raw status code.
            原始状态码。

    Returns:
        int: Status code in the 4xx/5xx range.
        int: 4xx/5xx 范围内的状态码。
    """
    try:
        code = int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationReportError(
            message=f"Invalid status code: {value!r} / 无效的状态码: {value!r}",
            details={"status_code": value},
            error_code="invalid_config",
        ) from exc
    if not 400 <= code <= 599:
        raise ValidationReportError(
            message=f"Status code must be 400-599: {code} / 状态码必须在 400-599 之间: {code}",
            details={"status_code": code},
            error_code="invalid_config",
        )
    return code


def resolve_config(
    *,
    path_field: str | None = None,
    error_field: str | None = None,
    status_code: int | None = None,
    message: str | None = None,
    env_prefix: str = "VALIDATION_REPORT",
) -> ReportConfig:
    """Resolve configuration from parameters and environment variables.

    从参数和环境变量解析配置。

     Resolution order / 解析优先级:
        1) function parameters / 函数参数
        2) env: `{env_prefix}_PATH_FIELD`, `{env_prefix}_ERROR_FIELD`,
           `{env_prefix}_STATUS_CODE`, `{env_prefix}_MESSAGE`
           环境变量
        3) defaults / 默认值

    Args:
        path_field: Key holding the rendered path.
            保存渲染路径的键名。
        error_field: Key holding the error message.
            保存错误消息的键名。
        status_code: HTTP status code for failed validation.
            校验失败时的 HTTP 状态码。
        message: Summary message used in HTTP payloads.
            HTTP 响应中的摘要消息。
        env_prefix: Prefix for environment variables.
            环境变量前缀（默认 VALIDATION_REPORT）。

    Returns:
        A ReportConfig instance.
            返回 ReportConfig 配置实例。

    Raises:
        ValidationReportError: When the status code is not an integer in 400-599.
            状态码不是 400-599 范围内的整数时抛出。
    """
    raw_status = status_code if status_code is not None else _env_get(f"{env_prefix}_STATUS_CODE")
    return ReportConfig(
        path_field=path_field or _env_get(f"{env_prefix}_PATH_FIELD") or DEFAULT_PATH_FIELD,
        error_field=error_field or _env_get(f"{env_prefix}_ERROR_FIELD") or DEFAULT_ERROR_FIELD,
        status_code=_parse_status_code(raw_status) if raw_status is not None else DEFAULT_STATUS_CODE,
        message=message or _env_get(f"{env_prefix}_MESSAGE") or DEFAULT_MESSAGE,
    )
