"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_path.py
@DateTime: 2026-10-18
@Docs: Tests for path.py module.
path.py 模块测试。
"""

from enum import Enum

import pytest

from validation_report.exceptions import PathComponentError, ValidationReportError
from validation_report.path import NO_KEY, Kind, NoKey, Path, component_kind, to_component


class Color(str, Enum):
    RED = "red"


class TestComponentKind:
    """Tests for component_kind.
    component_kind 测试。
    """

    def test_int_is_index(self) -> None:
        assert component_kind(0) is Kind.INDEX
        assert component_kind(42) is Kind.INDEX

    def test_str_is_key(self) -> None:
        assert component_kind("name") is Kind.KEY
        assert component_kind("") is Kind.KEY

    def test_str_subclass_is_key(self) -> None:
        """str subclasses keep their plain text / str 子类保留原始文本。"""
        assert component_kind(Color.RED) is Kind.KEY
        assert to_component(Color.RED) == (Kind.KEY, "red")

    def test_no_key_is_none(self) -> None:
        assert component_kind(NO_KEY) is Kind.NONE
        assert NoKey() is NO_KEY

    def test_bool_rejected(self) -> None:
        """bool is not an index / bool 不是索引。"""
        with pytest.raises(PathComponentError):
            component_kind(True)

    def test_negative_index_rejected(self) -> None:
        with pytest.raises(PathComponentError) as exc_info:
            component_kind(-1)
        assert exc_info.value.error_code == "invalid_path_component"

    @pytest.mark.parametrize("value", [1.5, None, b"a", object(), ("a",)])
    def test_unsupported_types_rejected(self, value: object) -> None:
        """Closed set of component types / 组件类型集合封闭。"""
        with pytest.raises(PathComponentError):
            component_kind(value)

    def test_error_is_type_error(self) -> None:
        """PathComponentError is catchable as TypeError / 可作为 TypeError 捕获。"""
        with pytest.raises(TypeError):
            Path.new(3.0)
        with pytest.raises(ValidationReportError):
            Path.empty().join(None)


class TestRendering:
    """Tests for str(Path).
    str(Path) 渲染测试。
    """

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            (Path.empty(), ""),
            (Path.new("a"), "a"),
            (Path.new(0), "[0]"),
            (Path.new("a").join("b").join("c"), "a.b.c"),
            (Path.new("xs").join(0).join("c"), "xs[0].c"),
            (Path.new(NO_KEY).join("a"), "a"),
            (Path.new(NO_KEY).join("a").join("b"), "a.b"),
            (Path.new(0).join(1), "[0][1]"),
            (Path.new(NO_KEY).join(3).join("x"), "[3].x"),
            (Path.new("a").join(NO_KEY).join("b"), "a.b"),
            (Path.new(NO_KEY), ""),
            (Path.new(NO_KEY).join(NO_KEY), ""),
        ],
    )
    def test_render(self, path: Path, expected: str) -> None:
        assert str(path) == expected

    def test_join_law(self) -> None:
        """join appends separator + text / join 追加分隔符与文本。"""
        p = Path.new("root").join(2)
        assert str(p.join("k")) == str(p) + ".k"
        assert str(p.join(7)) == str(p) + "[7]"
        assert str(p.join(NO_KEY)) == str(p)

    def test_key_text_verbatim(self) -> None:
        """Key text is not escaped / 键文本不转义。"""
        assert str(Path.new("a b").join("c.d")) == "a b.c.d"

    def test_repr_lists_texts_root_first(self) -> None:
        assert repr(Path.new("a").join(0).join("c")) == "Path(components=['a', '0', 'c'])"

    def test_repr_empty(self) -> None:
        assert repr(Path.empty()) == "Path(components=[])"


class TestStructure:
    """Tests for length, sharing and immutability.
    长度、结构共享与不可变性测试。
    """

    def test_scenario_three_keys(self) -> None:
        path = Path.new("a").join("b").join("c")
        assert str(path) == "a.b.c"
        assert len(path) == 3

    def test_length(self) -> None:
        p = Path.empty()
        assert len(p) == 0
        assert p.is_empty()
        for i, c in enumerate(["a", 0, NO_KEY, "b"], start=1):
            p = p.join(c)
            assert len(p) == i
        assert not p.is_empty()

    def test_join_shares_tail(self) -> None:
        """Joined path points at the parent's head node / 新路径指向父路径头节点。"""
        p = Path.new("a").join("b")
        q = p.join("c")
        assert q.components.head is not None
        assert q.components.head.prev is p.components.head

    def test_join_does_not_alter_parent(self) -> None:
        p = Path.new("a").join("b")
        before = str(p)
        p.join("c")
        p.join(0)
        assert str(p) == before
        assert len(p) == 2

    def test_parent(self) -> None:
        p = Path.new("a").join("b")
        q = p.join(3)
        assert q.parent == p
        assert q.parent.components.head is p.components.head
        assert Path.empty().parent.is_empty()

    def test_iter_deepest_first(self) -> None:
        p = Path.new("a").join(0).join(NO_KEY)
        assert list(p.iter()) == [(Kind.NONE, ""), (Kind.INDEX, "0"), (Kind.KEY, "a")]

    def test_segments_root_first(self) -> None:
        p = Path.new("a").join(0)
        assert p.segments() == ((Kind.KEY, "a"), (Kind.INDEX, "0"))

    def test_from_components(self) -> None:
        assert Path.from_components("xs", 0, "c") == Path.new("xs").join(0).join("c")
        assert Path.from_components() == Path.empty()


class TestEquality:
    """Tests for structural equality and hashing.
    结构相等与哈希测试。
    """

    def test_equal_regardless_of_topology(self) -> None:
        base = Path.new("a")
        shared = base.join("b")
        fresh = Path.new("a").join("b")
        assert shared == fresh
        assert hash(shared) == hash(fresh)
        assert len({shared, fresh}) == 1

    def test_kind_matters(self) -> None:
        """Key('0') differs from Index(0) / Key('0') 与 Index(0) 不同。"""
        assert Path.new("0") != Path.new(0)
        assert str(Path.new("x").join("0")) == "x.0"
        assert str(Path.new("x").join(0)) == "x[0]"

    def test_none_components_count_for_equality(self) -> None:
        assert Path.new(NO_KEY).join("a") != Path.new("a")

    def test_not_equal_to_string(self) -> None:
        assert Path.new("a") != "a"

    def test_usable_as_dict_key(self) -> None:
        counts: dict[Path, int] = {}
        for p in (Path.new("a").join(1), Path.new("a").join(1), Path.new("a").join(2)):
            counts[p] = counts.get(p, 0) + 1
        assert counts[Path.new("a").join(1)] == 2
