#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行计算引擎共享日志工具

提供安全的日志输出 Handler（捕获 Broken pipe 等异常）和按配置初始化日志级别。
"""

import logging
from typing import Optional

LOGGER_NAME = "core"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class SafeStreamHandler(logging.StreamHandler):
    """安全的 StreamHandler，捕获 Broken pipe 异常"""
    def emit(self, record):
        try:
            super().emit(record)
        except (BrokenPipeError, OSError):
            pass


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    初始化引擎根日志（重复调用只更新级别，不会重复添加 handler）

    Args:
        level: 日志级别名称，默认读取配置中的 LOG_LEVEL
    """
    if level is None:
        from core.config.engine_config import get_config
        level = get_config().log_level

    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, SafeStreamHandler) for h in logger.handlers):
        handler = SafeStreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    return logger
