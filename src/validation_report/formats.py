"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: formats.py
@DateTime: 2026-10-18
@Docs: Report output format constants and helpers.
报告输出格式常量与辅助函数。
"""

from enum import StrEnum


class ReportFormat(StrEnum):
    """Supported report output formats.
    支持的报告输出格式。
    """

    JSON = "json"
    TEXT = "text"


_MEDIA_TYPES: dict[ReportFormat, str] = {
    ReportFormat.JSON: "application/json",
    ReportFormat.TEXT: "text/plain; charset=utf-8",
}


def media_type_for(fmt: ReportFormat | str) -> str:
    """Return default media type for a format.
    返回格式的默认 media type。

    Args:
        fmt: Report format.
            报告格式。
    Returns:
        str: Default media type for the format.
            格式的默认 media type。

    """
    key = ReportFormat(fmt)
    return _MEDIA_TYPES[key]
