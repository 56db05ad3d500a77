#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行计算引擎异常定义

- ValidationError: 输入校验错误（调用方应提示用户修正输入）
- InvariantViolationError: 封闭枚举之外的符号进入查表（程序缺陷，不应被捕获恢复）
"""

from typing import Optional


class FiveElementsError(Exception):
    """
    引擎异常基类

    与系统错误区分开来，携带 code / error_type 便于上层统一转换为响应。
    """
    def __init__(self, message: str, code: int = 400, error_type: str = "five_elements_error"):
        self.message = message
        self.code = code
        self.error_type = error_type
        super().__init__(message)


class ValidationError(FiveElementsError, ValueError):
    """参数验证错误，field 为出错字段名"""
    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        error_type = f"validation_error:{field}" if field else "validation_error"
        super().__init__(message, code=400, error_type=error_type)


class InvariantViolationError(FiveElementsError):
    """查表时遇到封闭集合之外的天干/地支/五行"""
    def __init__(self, message: str, symbol: Optional[str] = None):
        self.symbol = symbol
        super().__init__(message, code=500, error_type="invariant_violation")
