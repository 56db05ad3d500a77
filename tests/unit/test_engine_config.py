#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
引擎配置单元测试
测试环境变量读取与单例
"""

import logging
import os
from unittest.mock import patch

import pytest

from core.calculators.bazi_logging import SafeStreamHandler, configure_logging
from core.config.engine_config import EngineConfig, get_config, reload_config


class TestEngineConfig:
    """配置测试类"""

    def test_defaults(self):
        """测试默认值"""
        with patch.dict(os.environ, {}, clear=True):
            config = EngineConfig.from_env()

            assert config.log_level == 'INFO'
            assert config.default_birth_hour == 12
            assert config.questionnaire_version == '1'
            assert config.max_suggestions == 3

    def test_from_env(self):
        """测试从环境变量创建配置"""
        with patch.dict(os.environ, {
            'LOG_LEVEL': 'debug',
            'FIVE_ELEMENTS_DEFAULT_HOUR': '8',
            'FIVE_ELEMENTS_QUESTIONNAIRE_VERSION': '2',
            'FIVE_ELEMENTS_MAX_SUGGESTIONS': '5',
        }):
            config = EngineConfig.from_env()

            assert config.log_level == 'DEBUG'
            assert config.default_birth_hour == 8
            assert config.questionnaire_version == '2'
            assert config.max_suggestions == 5

    def test_invalid_hour(self):
        """测试默认时辰越界"""
        with patch.dict(os.environ, {'FIVE_ELEMENTS_DEFAULT_HOUR': '24'}):
            with pytest.raises(ValueError):
                EngineConfig.from_env()

    def test_non_integer(self):
        """测试非整数配置"""
        with patch.dict(os.environ, {'FIVE_ELEMENTS_MAX_SUGGESTIONS': 'three'}):
            with pytest.raises(ValueError):
                EngineConfig.from_env()

    def test_max_suggestions_at_least_one(self):
        with patch.dict(os.environ, {'FIVE_ELEMENTS_MAX_SUGGESTIONS': '0'}):
            assert EngineConfig.from_env().max_suggestions == 1

    def test_get_config_singleton(self):
        """测试单例"""
        assert get_config() is get_config()

    def test_reload_config(self):
        """测试重新加载配置"""
        get_config()
        with patch.dict(os.environ, {'FIVE_ELEMENTS_DEFAULT_HOUR': '6'}):
            assert reload_config().default_birth_hour == 6
            assert get_config().default_birth_hour == 6


class TestLogging:
    def test_configure_logging_level(self):
        logger = configure_logging('warning')
        assert logger.level == logging.WARNING

    def test_handler_added_once(self):
        configure_logging('INFO')
        logger = configure_logging('DEBUG')
        handlers = [h for h in logger.handlers if isinstance(h, SafeStreamHandler)]
        assert len(handlers) == 1
        assert logger.level == logging.DEBUG

    def test_level_from_config(self):
        with patch.dict(os.environ, {'LOG_LEVEL': 'ERROR'}):
            assert configure_logging().level == logging.ERROR
