"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: conftest.py
@DateTime: 2026-10-18
@Docs: Shared test fixtures for the validation-report test suite.
测试套件的公共 fixtures。
"""

from collections.abc import Iterable

import pytest

from validation_report.error import Error
from validation_report.path import Path
from validation_report.report import Report


@pytest.fixture
def empty_report() -> Report:
    """A fresh report.
    新建的空报告。
    """
    return Report()


@pytest.fixture
def sample_report() -> Report:
    """Report with entries at a.b, a.b.c (twice) and array[0].c.
    包含 a.b、a.b.c（两次）与 array[0].c 条目的报告。
    """
    report = Report()
    report.append(Path.new("a").join("b"), Error("lol"))
    report.append(Path.new("a").join("b").join("c"), Error("that seems wrong"))
    report.append(Path.new("a").join("b").join("c"), Error("pog"))
    report.append(Path.new("array").join(0).join("c"), Error("pog"))
    return report


def messages(errors: Iterable[Error]) -> list[str]:
    """Collect messages from an iterable of errors.
    从错误可迭代对象中收集消息。
    """
    return [e.message for e in errors]
