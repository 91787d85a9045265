"""
@file __init__.py
@brief sentpool.utils 公共接口：日志工具。
       Public interface for sentpool.utils: logging helpers.
@note 配置加载器 configs 依赖 sentpool.models，由顶层包导出，避免循环导入。
      The configs loader depends on sentpool.models and is exported from the
      top-level package to avoid an import cycle.
"""

from __future__ import annotations

from .logging import (
    get_logger,
    set_level,
    info,
    warn,
    error,
)

__all__ = [
    "get_logger",
    "set_level",
    "info",
    "warn",
    "error",
]
