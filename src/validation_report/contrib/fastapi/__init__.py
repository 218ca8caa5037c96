"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-18
@Docs: FastAPI integration for failed validation reports.
失败校验报告的 FastAPI 集成。
"""

from validation_report.contrib.fastapi.handlers import install_exception_handlers, validation_failed_handler

__all__ = ["install_exception_handlers", "validation_failed_handler"]
