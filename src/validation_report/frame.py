"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: frame.py
@DateTime: 2026-10-18
@Docs: Tabular report export facade with optional backend.
报告表格导出门面（可选后端）。
"""

from typing import Any

from validation_report.config import ReportConfig
from validation_report.exceptions import ValidationReportError
from validation_report.report import Report


def _load_backend() -> Any:
    try:
        from validation_report import frame_polars

        return frame_polars
    except Exception as exc:  # pragma: no cover / 覆盖忽略
        raise ValidationReportError(
            message="Missing optional dependencies for frame export. Install extras: polars / 缺少表格导出可选依赖，请安装: polars",
            details={"error": str(exc)},
            error_code="missing_dependency",
        ) from exc


def report_to_frame(report: Report, *, config: ReportConfig | None = None) -> Any:
    """
    Export a report as a DataFrame.
    将报告导出为数据框。

    Args:
        report: Report to export.
        report: 要导出的报告。
        config: Report configuration (column names).
        config: 报告配置（列名）。

    Returns:
        Any: DataFrame with one row per entry, in insertion order.
        Any: 每个条目一行的数据框，按插入顺序排列。
    """
    backend = _load_backend()
    return backend.report_to_frame(report, config=config)
