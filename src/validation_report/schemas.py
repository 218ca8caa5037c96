"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: schemas.py
@DateTime: 2026-10-18
@Docs: Pydantic schemas for serialized reports.
序列化报告的 Pydantic 模型。
"""

from pydantic import BaseModel, ConfigDict, Field


class ReportEntryItem(BaseModel):
    """
    A single serialized report entry.
    单个序列化报告条目。

    Attributes:
        path: Rendered path (e.g. ``xs[0].c``).
        path: 渲染后的路径（如 ``xs[0].c``）。
        error: Error message.
        error: 错误消息。
    """

    model_config = ConfigDict(frozen=True)

    path: str
    error: str


class ValidationFailedResponse(BaseModel):
    """
    HTTP payload for a failed validation.
    校验失败时的 HTTP 响应体。
    """

    message: str
    error_code: str = "validation_failed"
    # Entry keys follow ReportConfig.path_field / error_field.
    errors: list[dict[str, str]] = Field(default_factory=list)
