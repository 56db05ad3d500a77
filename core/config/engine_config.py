#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行计算引擎配置
所有配置统一从这里读取（环境变量 -> dataclass），计分常量不在配置范围内
"""

import os
from dataclasses import dataclass
from typing import Optional


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"环境变量 {name} 必须为整数，当前值: {value}") from None


@dataclass
class EngineConfig:
    """引擎配置"""
    log_level: str = 'INFO'
    default_birth_hour: int = 12
    questionnaire_version: str = '1'
    max_suggestions: int = 3

    @classmethod
    def from_env(cls) -> 'EngineConfig':
        """从环境变量创建配置"""
        default_hour = _get_int('FIVE_ELEMENTS_DEFAULT_HOUR', 12)
        if not 0 <= default_hour <= 23:
            raise ValueError(f"FIVE_ELEMENTS_DEFAULT_HOUR 必须在 0-23 之间，当前值: {default_hour}")
        return cls(
            log_level=os.getenv('LOG_LEVEL', 'INFO').upper(),
            default_birth_hour=default_hour,
            questionnaire_version=os.getenv('FIVE_ELEMENTS_QUESTIONNAIRE_VERSION', '1'),
            max_suggestions=max(1, _get_int('FIVE_ELEMENTS_MAX_SUGGESTIONS', 3)),
        )


# 全局配置实例（单例模式）
_config: Optional[EngineConfig] = None


def get_config() -> EngineConfig:
    """获取全局配置实例（单例）"""
    global _config
    if _config is None:
        _config = EngineConfig.from_env()
    return _config


def reload_config() -> EngineConfig:
    """重新加载配置"""
    global _config
    _config = EngineConfig.from_env()
    return _config
