"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: select.py
@DateTime: 2026-10-18
@Docs: Prefix queries over report paths.
基于路径前缀的报告查询。

Pattern grammar / 模式语法::

    pattern  := "" | head segment*
    head     := ident | "[" digits "]"
    segment  := "." ident | "[" digits "]"

``ident`` becomes a ``Kind.KEY`` component and ``[n]`` a ``Kind.INDEX``
component. A pattern matches every path whose leading components (``Kind.NONE``
components skipped) equal the pattern's components in kind and text.
``ident`` 对应 ``Kind.KEY`` 组件，``[n]`` 对应 ``Kind.INDEX`` 组件。模式匹配所有
前导组件（跳过 ``Kind.NONE``）在类型与文本上均与模式相同的路径。

Examples:
        >>> parse_pattern("xs[0].c")
        ((<Kind.KEY: 'key'>, 'xs'), (<Kind.INDEX: 'index'>, '0'), (<Kind.KEY: 'key'>, 'c'))
"""

import logging
import re
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any

from validation_report.error import Error
from validation_report.exceptions import PatternError
from validation_report.path import Component, Kind, Path, to_component

if TYPE_CHECKING:
    from validation_report.report import Report

logger = logging.getLogger(__name__)

type Pattern = str | Path | Iterable[Any]

_IDENT_RE = re.compile(r"[^\W\d]\w*")
_SEGMENT_RE = re.compile(r"\.(?P<key>[^\W\d]\w*)|\[(?P<index>[0-9]+)\]")


def _pattern_error(pattern: str, position: int) -> PatternError:
    logger.debug("Rejected select pattern %r at position %d", pattern, position)
    return PatternError(
        message=f"Invalid select pattern {pattern!r} at position {position} / 无效的 select 模式 {pattern!r}，位置 {position}",
        details={"pattern": pattern, "position": position},
    )


def parse_pattern(pattern: str) -> tuple[Component, ...]:
    """Parse a pattern string into components.
    将模式字符串解析为组件。

    Args:
        pattern: Pattern such as ``a.b[0].c`` (empty string matches everything).
            形如 ``a.b[0].c`` 的模式（空字符串匹配全部）。

    Returns:
        tuple[Component, ...]: Root-first components.
            根优先的组件元组。

    Raises:
        PatternError: When the pattern does not follow the grammar.
            模式不符合语法时抛出。
    """
    components: list[Component] = []
    pos = 0
    head = _IDENT_RE.match(pattern)
    if head is not None:
        components.append((Kind.KEY, head.group()))
        pos = head.end()
    elif pattern.startswith("."):
        raise _pattern_error(pattern, 0)
    while pos < len(pattern):
        m = _SEGMENT_RE.match(pattern, pos)
        if m is None:
            raise _pattern_error(pattern, pos)
        if m.group("key") is not None:
            components.append((Kind.KEY, m.group("key")))
        else:
            components.append((Kind.INDEX, str(int(m.group("index")))))
        pos = m.end()
    return tuple(components)


def pattern_components(pattern: Pattern) -> tuple[Component, ...]:
    """Normalize any accepted pattern form into components.
    将任意受支持的模式形式规范化为组件。

    Accepts a pattern string, a ``Path``, or an iterable of component values.
    ``Kind.NONE`` components are dropped.
    接受模式字符串、``Path`` 或组件值的可迭代对象；``Kind.NONE`` 组件会被丢弃。
    """
    if isinstance(pattern, str):
        return parse_pattern(pattern)
    if isinstance(pattern, Path):
        return tuple(c for c in pattern.segments() if c[0] is not Kind.NONE)
    if isinstance(pattern, (bytes, bytearray, memoryview)) or not isinstance(pattern, Iterable):
        raise PatternError(
            message=f"Unsupported select pattern type: {type(pattern).__name__} / 不支持的 select 模式类型: {type(pattern).__name__}",
            details={"type": type(pattern).__name__},
        )
    return tuple(c for c in (to_component(v) for v in pattern) if c[0] is not Kind.NONE)


def path_matches(path: Path, components: tuple[Component, ...]) -> bool:
    """Return True if ``path`` starts with ``components``.
    若 ``path`` 以 ``components`` 开头则返回 True。
    """
    if not components:
        return True
    if len(path) < len(components):
        return False
    i = 0
    for component in reversed(list(path.iter())):
        if component[0] is Kind.NONE:
            continue
        if component != components[i]:
            return False
        i += 1
        if i == len(components):
            return True
    return False


def select(report: "Report", pattern: Pattern) -> Iterator[Error]:
    """Iterate errors whose path begins with ``pattern``.
    迭代路径以 ``pattern`` 开头的错误。

    The pattern is parsed eagerly; matching is lazy and follows insertion order.
    模式会被立即解析；匹配是惰性的并遵循插入顺序。

    Args:
        report: Report to query.
            要查询的报告。
        pattern: Pattern string, Path or iterable of components.
            模式字符串、Path 或组件可迭代对象。

    Returns:
        Iterator[Error]: Matching errors.
            匹配的错误。

    Raises:
        PatternError: When a pattern string is malformed or the pattern type is unsupported.
            模式字符串格式错误或模式类型不受支持时抛出。
    """
    components = pattern_components(pattern)
    return (error for path, error in report.iter() if path_matches(path, components))
