"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: path.py
@DateTime: 2026-10-18
@Docs: Structurally shared location paths inside nested values.
嵌套值内部的结构共享位置路径。

A Path is a persistent list of ``(Kind, text)`` components stored deepest-first.
``join`` is O(1) and never copies ancestor components; rendering reverses the
components to produce a root-first dotted/indexed string such as ``xs[0].c``.
Path 是以 ``(Kind, text)`` 为元素、按最深优先存储的持久化链表。
``join`` 为 O(1) 且从不复制祖先组件；渲染时反转组件，生成如 ``xs[0].c`` 的根优先字符串。

Component kinds are inferred from a closed table:
组件类型由封闭映射表推断：
- non-negative ``int`` -> ``Kind.INDEX``
    非负 ``int`` -> ``Kind.INDEX``
- ``str`` -> ``Kind.KEY``
    ``str`` -> ``Kind.KEY``
- ``NO_KEY`` -> ``Kind.NONE``
    ``NO_KEY`` -> ``Kind.NONE``
"""

from collections.abc import Iterator
from enum import StrEnum
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from validation_report.exceptions import PathComponentError
from validation_report.persistent_list import PersistentList


class Kind(StrEnum):
    """Path component kind.
    路径组件类型。
    """

    NONE = "none"
    KEY = "key"
    INDEX = "index"


class NoKey:
    """Marker for an anonymous component (renders as nothing).
    匿名组件标记（渲染为空）。
    """

    __slots__ = ()
    _instance: "NoKey | None" = None

    def __new__(cls) -> "NoKey":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __str__(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "NO_KEY"


NO_KEY = NoKey()

type Component = tuple[Kind, str]

_KINDS: dict[type, Kind] = {
    int: Kind.INDEX,
    str: Kind.KEY,
    NoKey: Kind.NONE,
}


def component_kind(value: Any) -> Kind:
    """Return the kind associated with a component value.
    返回组件值对应的类型。

    Args:
        value: Component value (``int`` index, ``str`` key or ``NO_KEY``).
            组件值（``int`` 索引、``str`` 键或 ``NO_KEY``）。

    Returns:
        Kind: Inferred component kind.
            推断的组件类型。

    Raises:
        PathComponentError: When the value is not a supported component.
            值不是受支持的组件时抛出。
    """
    if isinstance(value, bool):
        raise PathComponentError(
            message="bool is not a path component / bool 不是路径组件",
            details={"value": value},
        )
    for klass in type(value).__mro__:
        kind = _KINDS.get(klass)
        if kind is None:
            continue
        if kind is Kind.INDEX and value < 0:
            raise PathComponentError(
                message=f"Index must be non-negative: {value} / 索引必须为非负数: {value}",
                details={"value": value},
            )
        return kind
    raise PathComponentError(
        message=f"Unsupported path component type: {type(value).__name__} / 不支持的路径组件类型: {type(value).__name__}",
        details={"type": type(value).__name__},
    )


def to_component(value: Any) -> Component:
    """Convert a component value into its ``(Kind, text)`` pair.
    将组件值转换为 ``(Kind, text)`` 对。
    """
    kind = component_kind(value)
    if kind is Kind.INDEX:
        return kind, str(int(value))
    if kind is Kind.KEY:
        # Plain text of str subclasses (enums render differently under str()).
        return kind, str.__str__(value)
    return kind, ""


class Path:
    """A location inside a nested value.
    嵌套值内部的一个位置。

    Examples:
        >>> str(Path.new("xs").join(0).join("c"))
        'xs[0].c'
        >>> str(Path.new(0))
        '[0]'
        >>> str(Path.new(NO_KEY).join("a"))
        'a'
    """

    __slots__ = ("_components",)

    def __init__(self, components: PersistentList[Component] | None = None) -> None:
        self._components: PersistentList[Component] = components if components is not None else PersistentList()

    @classmethod
    def empty(cls) -> "Path":
        return cls()

    @classmethod
    def new(cls, component: Any) -> "Path":
        """Create a single-component path.
        创建单组件路径。
        """
        return cls(PersistentList().append(to_component(component)))

    @classmethod
    def from_components(cls, *components: Any) -> "Path":
        """Create a path by joining components root-first.
        按根优先顺序连接组件创建路径。

        Args:
            *components: Component values, root first.
                组件值（根在前）。
        """
        path = cls.empty()
        for c in components:
            path = path.join(c)
        return path

    @property
    def components(self) -> PersistentList[Component]:
        """Underlying persistent list (deepest component at head).
        底层持久化链表（最深组件位于头部）。
        """
        return self._components

    @property
    def parent(self) -> "Path":
        """Path without its deepest component, sharing every remaining node.
        去掉最深组件后的路径，共享剩余全部节点。
        """
        return Path(self._components.tail())

    def join(self, component: Any) -> "Path":
        """Return a new path with ``component`` as the deepest segment.
        返回以 ``component`` 为最深段的新路径。

        Args:
            component: Component value.
                组件值。

        Returns:
            Path: New path; this path is left unchanged.
                新路径；当前路径保持不变。
        """
        return Path(self._components.append(to_component(component)))

    def is_empty(self) -> bool:
        return self._components.is_empty()

    def iter(self) -> Iterator[Component]:
        """Iterate components deepest-first.
        按最深优先迭代组件。
        """
        return self._components.iter()

    def segments(self) -> tuple[Component, ...]:
        """Return components root-first.
        按根优先返回组件。
        """
        return tuple(reversed(tuple(self._components.iter())))

    def __len__(self) -> int:
        return len(self._components)

    def __str__(self) -> str:
        parts: list[str] = []
        for kind, text in self.segments():
            if kind is Kind.NONE:
                continue
            if kind is Kind.INDEX:
                parts.append(f"[{text}]")
            elif parts:
                parts.append(f".{text}")
            else:
                parts.append(text)
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Path(components={[text for _, text in self.segments()]!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._components == other._components

    def __hash__(self) -> int:
        return hash(self._components)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.is_instance_schema(
            cls,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _path_to_str,
                info_arg=False,
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        return {"type": "string"}


def _path_to_str(path: Path) -> str:
    return str(path)
