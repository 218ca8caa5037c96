"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: error.py
@DateTime: 2026-10-18
@Docs: Validation error message value.
校验错误消息值。
"""

from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema


@dataclass(frozen=True, slots=True, order=True)
class Error:
    """A single validation message.
    单条校验消息。

    Errors compare and order by message; they carry no path of their own.
    错误按消息比较与排序；其本身不携带路径。

    Attributes:
        message: Message text.
            消息文本。
    """

    message: str

    def __post_init__(self) -> None:
        if not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))

    @classmethod
    def new(cls, message: Any) -> "Error":
        return cls(str(message))

    def __str__(self) -> str:
        return self.message

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _coerce_error,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _error_to_str,
                info_arg=False,
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        return {"type": "string"}


def _coerce_error(value: Any) -> Error:
    if isinstance(value, Error):
        return value
    if isinstance(value, str):
        return Error(value)
    raise ValueError(f"Expected Error or str, got {type(value).__name__} / 期望 Error 或 str，实际为 {type(value).__name__}")


def _error_to_str(error: Error) -> str:
    return error.message
