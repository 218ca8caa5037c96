"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: report.py
@DateTime: 2026-10-18
@Docs: Flat collection of (Path, Error) pairs produced by a validation pass.
校验过程产生的 (Path, Error) 扁平集合。

A report only grows: pairs are appended in order and never removed, sorted or
deduplicated. The same path may carry any number of errors.
报告只会增长：条目按顺序追加，从不删除、排序或去重。同一路径可以携带任意数量的错误。
"""

import logging
from collections.abc import Iterator
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from validation_report.config import ReportConfig
from validation_report.error import Error
from validation_report.exceptions import ValidationFailed
from validation_report.path import Path
from validation_report.select import Pattern, select
from validation_report.serializers import report_to_dicts

logger = logging.getLogger(__name__)


class Report:
    """
    Validation report
    校验报告

    Examples:
        >>> report = Report()
        >>> report.append(Path.new("a").join("b"), Error("oops"))
        >>> str(report)
        'a.b: oops\\n'
    """

    __slots__ = ("_errors",)

    def __init__(self) -> None:
        self._errors: list[tuple[Path, Error]] = []

    def append(self, path: Path, error: Error) -> None:
        """Append an error at the given path.
        在给定路径上追加一个错误。

        Args:
            path: Location of the error.
                错误位置。
            error: Error value.
                错误值。
        """
        if not isinstance(path, Path):
            raise TypeError(f"path must be a Path, got {type(path).__name__} / path 必须是 Path")
        if not isinstance(error, Error):
            raise TypeError(f"error must be an Error, got {type(error).__name__} / error 必须是 Error")
        self._errors.append((path, error))

    def iter(self) -> Iterator[tuple[Path, Error]]:
        return iter(self._errors)

    def __iter__(self) -> Iterator[tuple[Path, Error]]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def is_empty(self) -> bool:
        return not self._errors

    def select(self, pattern: Pattern) -> Iterator[Error]:
        """Iterate errors whose path begins with ``pattern``.
        迭代路径以 ``pattern`` 开头的错误。

        See ``validation_report.select.select``.
        参见 ``validation_report.select.select``。
        """
        return select(self, pattern)

    def raise_for_errors(self, *, config: ReportConfig | None = None) -> None:
        """Raise ValidationFailed if the report holds any error.
        若报告包含任何错误则抛出 ValidationFailed。

        Args:
            config: Report configuration (field names and status code).
                报告配置（字段名与状态码）。

        Raises:
            ValidationFailed: When the report is not empty.
                报告非空时抛出。
        """
        if self.is_empty():
            return
        cfg = config or ReportConfig()
        logger.debug("Validation failed with %d error(s)", len(self._errors))
        raise ValidationFailed(
            report=self,
            status_code=cfg.status_code,
            details=report_to_dicts(self, config=cfg),
        )

    def __str__(self) -> str:
        return "".join(f"{path}: {error}\n" for path, error in self._errors)

    def __repr__(self) -> str:
        return f"Report(errors={self._errors!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.is_instance_schema(
            cls,
            serialization=core_schema.plain_serializer_function_ser_schema(
                report_to_dicts,
                info_arg=False,
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        return {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {"path": {"type": "string"}, "error": {"type": "string"}},
                "required": ["path", "error"],
            },
        }
