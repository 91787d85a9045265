"""
@file logging.py
@brief sentpool 日志工具：INFO 写入 stdout，WARNING 及以上写入 stderr，时间戳精确到微秒。
       Logging helpers for sentpool: INFO goes to stdout, WARNING and above to
       stderr, with microsecond timestamps.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import Optional, TextIO

ROOT_LOGGER_NAME = "sentpool"
_CONFIGURED_ATTR = "_sentpool_configured"


def _utf8(stream: TextIO) -> TextIO:
    """
    @brief 尽量将文本流切换为 UTF-8，失败时原样返回。
           Switch a text stream to UTF-8 where supported; return it unchanged otherwise.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    if callable(reconfigure):
        try:
            reconfigure(encoding="utf-8", errors="backslashreplace")
        except (ValueError, OSError):
            # 已被替换成不支持重配置的流（如 pytest capture）
            # Stream was swapped for one that cannot be reconfigured (e.g. pytest capture)
            pass
    return stream


class _BelowLevel(logging.Filter):
    """Pass records strictly below a level."""

    def __init__(self, level: int) -> None:
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


class _MicrosecondFormatter(logging.Formatter):
    """
    @brief 时间戳格式 YYYY-MM-DD-HH:MM:SS.ffffff（无空格）。
           Timestamp format YYYY-MM-DD-HH:MM:SS.ffffff (no spaces).
    """

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        dt = datetime.fromtimestamp(record.created)
        return dt.strftime("%Y-%m-%d-%H:%M:%S.") + f"{dt.microsecond:06d}"


LOG_FORMAT = "[%(asctime)s] %(levelname)s @{%(name)s}: %(message)s"


def get_logger(name: Optional[str] = None, level: int = logging.INFO) -> logging.Logger:
    """
    @brief 获取已配置的 logger；重复调用不会重复添加 handler。
           Get a configured logger; repeated calls never add duplicate handlers.
    @param name logger 名称，默认 "sentpool"。Logger name, defaults to "sentpool".
    @param level 首次配置时使用的日志等级。Level applied on first configuration.
    @return logging.Logger 实例。A logging.Logger instance.
    """
    logger = logging.getLogger(name if name is not None else ROOT_LOGGER_NAME)

    if getattr(logger, _CONFIGURED_ATTR, False):
        return logger

    formatter = _MicrosecondFormatter(LOG_FORMAT)

    # DEBUG / INFO -> stdout
    out_handler = logging.StreamHandler(stream=_utf8(sys.stdout))
    out_handler.setLevel(logging.DEBUG)
    out_handler.addFilter(_BelowLevel(logging.WARNING))
    out_handler.setFormatter(formatter)

    # WARNING / ERROR / CRITICAL -> stderr
    err_handler = logging.StreamHandler(stream=_utf8(sys.stderr))
    err_handler.setLevel(logging.WARNING)
    err_handler.setFormatter(formatter)

    logger.setLevel(level)
    logger.propagate = False
    logger.addHandler(out_handler)
    logger.addHandler(err_handler)

    setattr(logger, _CONFIGURED_ATTR, True)
    return logger


def set_level(level: int, name: Optional[str] = None) -> None:
    """
    @brief 调整 logger 等级，例如打开 DEBUG 以查看全掩码行的统计。
           Change logger levels, e.g. enable DEBUG to see fully-masked row counts.
    @param level 新的日志等级。New log level.
    @param name 目标 logger；为 None 时作用于所有已配置的 sentpool.* logger。
           Target logger; None applies to every configured sentpool.* logger.
    @note 各模块 logger 不向上传播，因此需要逐个设置。
          Module loggers do not propagate, so each one is set individually.
    """
    if name is not None:
        get_logger(name).setLevel(level)
        return

    for logger_name, logger in list(logging.Logger.manager.loggerDict.items()):
        if not isinstance(logger, logging.Logger):
            continue
        in_package = logger_name == ROOT_LOGGER_NAME or logger_name.startswith(ROOT_LOGGER_NAME + ".")
        if in_package and getattr(logger, _CONFIGURED_ATTR, False):
            logger.setLevel(level)


_logger = get_logger(ROOT_LOGGER_NAME)


def info(msg: str, *args, **kwargs) -> None:
    """Log at INFO on the package logger (stdout)."""
    _logger.info(msg, *args, **kwargs)


def warn(msg: str, *args, **kwargs) -> None:
    """Log at WARNING on the package logger (stderr)."""
    _logger.warning(msg, *args, **kwargs)


def error(msg: str, *args, **kwargs) -> None:
    """Log at ERROR on the package logger (stderr)."""
    _logger.error(msg, *args, **kwargs)
