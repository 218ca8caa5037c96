"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: frame_polars.py
@DateTime: 2026-10-18
@Docs: Polars-backed report export.
基于 Polars 的报告导出。
"""

from collections.abc import Iterable

import polars as pl

from validation_report.config import ReportConfig
from validation_report.error import Error
from validation_report.path import Path


def report_to_frame(report: Iterable[tuple[Path, Error]], *, config: ReportConfig | None = None) -> pl.DataFrame:
    """
    Export report entries as a Polars DataFrame.
    将报告条目导出为 Polars 数据框。

    Args:
        report: Report (or iterable of ``(Path, Error)`` pairs).
        report: 报告（或 ``(Path, Error)`` 对的可迭代对象）。
        config: Report configuration (column names).
        config: 报告配置（列名）。

    Returns:
        pl.DataFrame: Two Utf8 columns, one row per entry.
        pl.DataFrame: 两个 Utf8 列，每个条目一行。
    """
    cfg = config or ReportConfig()
    paths: list[str] = []
    errors: list[str] = []
    for path, error in report:
        paths.append(str(path))
        errors.append(error.message)
    return pl.DataFrame(
        {cfg.path_field: paths, cfg.error_field: errors},
        schema={cfg.path_field: pl.Utf8, cfg.error_field: pl.Utf8},
    )
