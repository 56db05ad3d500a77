# -*- coding: utf-8 -*-
"""
配置模块
"""

from .engine_config import EngineConfig, get_config, reload_config

__all__ = ['EngineConfig', 'get_config', 'reload_config']
