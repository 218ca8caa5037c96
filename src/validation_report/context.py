"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: context.py
@DateTime: 2026-10-18
@Docs: Descent helper that pairs a report with the current path.
将报告与当前路径绑定的下降辅助。

Validators descending into a nested value create child contexts with
``key``/``index`` and emit errors with ``add``. Child contexts share the
parent's report; their paths share the parent's path nodes.
校验器下降到嵌套值时通过 ``key``/``index`` 创建子上下文，并通过 ``add`` 发射错误。
子上下文共享父级报告；其路径共享父级路径节点。
"""

from dataclasses import dataclass, field
from typing import Any

from validation_report.error import Error
from validation_report.path import Path
from validation_report.report import Report


@dataclass(frozen=True, slots=True)
class ReportContext:
    """Per-location helper to emit errors.
    按位置发射错误的助手。

    Examples:
        >>> ctx = ReportContext(Report())
        >>> ctx.key("xs").index(0).add("bad")
        >>> str(ctx.report)
        'xs[0]: bad\\n'
    """

    report: Report
    path: Path = field(default_factory=Path.empty)

    def join(self, component: Any) -> "ReportContext":
        """Return a child context one component deeper.
        返回深一层的子上下文。
        """
        return ReportContext(self.report, self.path.join(component))

    def key(self, name: str) -> "ReportContext":
        return self.join(name)

    def index(self, i: int) -> "ReportContext":
        return self.join(i)

    def add(self, message: Any) -> None:
        """Add an error at the current path.
        在当前路径添加一个错误。

        Args:
            message: Error message.
                错误消息。
        """
        self.report.append(self.path, Error.new(message))

    def check(self, condition: Any, message: Any) -> bool:
        """Add ``message`` when ``condition`` is falsy.
        当 ``condition`` 为假时添加 ``message``。

        Returns:
            bool: Truthiness of the condition.
                条件的真值。
        """
        ok = bool(condition)
        if not ok:
            self.add(message)
        return ok

    def is_valid(self) -> bool:
        return self.report.is_empty()
