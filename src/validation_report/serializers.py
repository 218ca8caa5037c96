"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: serializers.py
@DateTime: 2026-10-18
@Docs: Built-in serializers for reports.
报告内置序列化器。
"""

from collections.abc import Iterable
from typing import Any, Protocol

from pydantic import TypeAdapter

from validation_report.config import ReportConfig
from validation_report.error import Error
from validation_report.formats import ReportFormat
from validation_report.path import Path
from validation_report.schemas import ReportEntryItem

_ENTRIES_ADAPTER: TypeAdapter[list[dict[str, str]]] = TypeAdapter(list[dict[str, str]])


class ReportSerializer(Protocol):
    """Report serializer protocol.
    报告序列化器协议。
    """

    def serialize(self, *, report: Iterable[tuple[Path, Error]], config: ReportConfig) -> bytes: ...


def path_to_str(path: Path) -> str:
    return str(path)


def error_to_str(error: Error) -> str:
    return error.message


def report_to_dicts(report: Iterable[tuple[Path, Error]], *, config: ReportConfig | None = None) -> list[dict[str, str]]:
    """Convert report entries into a list of dictionaries.
    将报告条目转换为字典列表。

    Args:
        report: Report (or any iterable of ``(Path, Error)`` pairs).
            报告（或任意 ``(Path, Error)`` 对的可迭代对象）。
        config: Report configuration (field names).
            报告配置（字段名）。

    Returns:
        list[dict[str, str]]: One ``{path, error}`` mapping per entry, in insertion order.
            每个条目一个 ``{path, error}`` 映射，按插入顺序排列。
    """
    cfg = config or ReportConfig()
    return [{cfg.path_field: path_to_str(path), cfg.error_field: error_to_str(error)} for path, error in report]


def report_to_models(report: Iterable[tuple[Path, Error]]) -> list[ReportEntryItem]:
    """Convert report entries into pydantic models.
    将报告条目转换为 pydantic 模型。
    """
    return [ReportEntryItem(path=path_to_str(path), error=error_to_str(error)) for path, error in report]


def report_to_json(
    report: Iterable[tuple[Path, Error]],
    *,
    config: ReportConfig | None = None,
    indent: int | None = None,
) -> bytes:
    """Serialize a report to JSON.
    将报告序列化为 JSON。

    Args:
        report: Report to serialize.
            要序列化的报告。
        config: Report configuration (field names).
            报告配置（字段名）。
        indent: JSON indentation (compact when None).
            JSON 缩进（为 None 时紧凑输出）。

    Returns:
        bytes: UTF-8 JSON array of entry objects.
            由条目对象组成的 UTF-8 JSON 数组。
    """
    return _ENTRIES_ADAPTER.dump_json(report_to_dicts(report, config=config), indent=indent)


class JsonReportSerializer:
    """JSON serializer backed by pydantic.
    基于 pydantic 的 JSON 序列化器。
    """

    def __init__(self, *, indent: int | None = None) -> None:
        self.indent = indent

    def serialize(self, *, report: Iterable[tuple[Path, Error]], config: ReportConfig) -> bytes:
        return report_to_json(report, config=config, indent=self.indent)


class TextReportSerializer:
    """Plain-text serializer producing one ``path: error`` line per entry.
    纯文本序列化器，每个条目输出一行 ``path: error``。
    """

    def serialize(self, *, report: Iterable[tuple[Path, Error]], config: ReportConfig) -> bytes:
        return "".join(f"{path}: {error}\n" for path, error in report).encode("utf-8")


def get_serializer(fmt: ReportFormat | str, **kwargs: Any) -> ReportSerializer:
    """Return the built-in serializer for a format.
    返回格式对应的内置序列化器。

    Args:
        fmt: Report format (``json`` or ``text``).
            报告格式（``json`` 或 ``text``）。
        **kwargs: Serializer options.
            序列化器选项。

    Raises:
        ValueError: When the format is unknown.
            格式未知时抛出。
    """
    key = ReportFormat(fmt)
    if key is ReportFormat.JSON:
        return JsonReportSerializer(**kwargs)
    return TextReportSerializer()
