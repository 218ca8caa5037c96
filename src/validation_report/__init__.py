"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-18
@Docs: Package exports for validation_report.
validation_report 包导出定义。
"""

from validation_report.config import ReportConfig, resolve_config
from validation_report.context import ReportContext
from validation_report.error import Error
from validation_report.exceptions import PathComponentError, PatternError, ValidationFailed, ValidationReportError
from validation_report.formats import ReportFormat, media_type_for
from validation_report.path import NO_KEY, Kind, NoKey, Path, component_kind
from validation_report.persistent_list import PersistentList
from validation_report.report import Report
from validation_report.schemas import ReportEntryItem, ValidationFailedResponse
from validation_report.select import parse_pattern, select
from validation_report.serializers import (
    JsonReportSerializer,
    TextReportSerializer,
    get_serializer,
    report_to_dicts,
    report_to_json,
    report_to_models,
)

__all__ = [
    "Path",
    "Kind",
    "NoKey",
    "NO_KEY",
    "component_kind",
    "PersistentList",
    "Error",
    "Report",
    "select",
    "parse_pattern",
    "ReportContext",
    "ReportConfig",
    "resolve_config",
    "ValidationReportError",
    "PathComponentError",
    "PatternError",
    "ValidationFailed",
    "ReportFormat",
    "media_type_for",
    "ReportEntryItem",
    "ValidationFailedResponse",
    "JsonReportSerializer",
    "TextReportSerializer",
    "get_serializer",
    "report_to_dicts",
    "report_to_json",
    "report_to_models",
]
