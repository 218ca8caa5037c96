"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: handlers.py
@DateTime: 2026-10-18
@Docs: Exception handlers rendering ValidationFailed as JSON.
将 ValidationFailed 渲染为 JSON 的异常处理器。
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from validation_report.config import ReportConfig
from validation_report.exceptions import ValidationFailed
from validation_report.schemas import ValidationFailedResponse
from validation_report.serializers import report_to_dicts

logger = logging.getLogger(__name__)


async def validation_failed_handler(request: Request, exc: ValidationFailed, *, config: ReportConfig | None = None) -> JSONResponse:
    """
    Render a ValidationFailed exception as a JSON response.
    将 ValidationFailed 异常渲染为 JSON 响应。

    Args:
        request: Incoming request.
        request: 当前请求。
        exc: The raised exception.
        exc: 抛出的异常。
        config: Report configuration (summary message and entry field names).
        config: 报告配置（摘要消息与条目字段名）。

    Returns:
        JSONResponse: ``{"message", "error_code", "errors": [{path_field, error_field}]}``.
        JSONResponse: ``{"message", "error_code", "errors": [{path_field, error_field}]}``。
    """
    cfg = config or ReportConfig()
    payload = ValidationFailedResponse(
        message=cfg.message,
        error_code=exc.error_code,
        errors=report_to_dicts(exc.report, config=cfg),
    )
    logger.debug("Responding %d to %s with %d error(s)", exc.status_code, request.url.path, len(payload.errors))
    return JSONResponse(status_code=exc.status_code, content=payload.model_dump(mode="json"))


def install_exception_handlers(app: FastAPI, *, config: ReportConfig | None = None) -> None:
    """
    Register the ValidationFailed handler on an application.
    在应用上注册 ValidationFailed 处理器。

    Args:
        app: FastAPI application.
        app: FastAPI 应用。
        config: Report configuration (summary message and entry field names).
        config: 报告配置（摘要消息与条目字段名）。
    """

    async def _handler(request: Request, exc: Any) -> JSONResponse:
        return await validation_failed_handler(request, exc, config=config)

    app.add_exception_handler(ValidationFailed, _handler)
