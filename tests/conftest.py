#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 全局配置

提供：
- 共享 fixtures（参考出生信息、内观记录样例）
- 测试钩子
- 全局配置
"""

import pytest
import sys
import os
from typing import Dict, Any

# 添加项目根目录到路径
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)


# ==================== 配置 Fixtures ====================

@pytest.fixture(autouse=True)
def reset_engine_config():
    """每个测试前后清空配置单例，避免环境变量改动互相影响"""
    from core.config import engine_config
    engine_config._config = None
    yield
    engine_config._config = None


# ==================== 数据 Fixtures ====================

@pytest.fixture(scope="function")
def reference_birth() -> Dict[str, Any]:
    """
    参考出生信息

    Returns:
        1990-10-25 14时，年柱庚午，日主癸（水）
    """
    return {
        "birth_year": 1990,
        "birth_month": 10,
        "birth_day": 25,
        "birth_hour": 14,
    }


@pytest.fixture(scope="function")
def reference_chart(reference_birth):
    """参考出生信息排出的四柱"""
    from core.calculators.chart_builder import ChartBuilder
    return ChartBuilder.build(
        reference_birth["birth_year"],
        reference_birth["birth_month"],
        reference_birth["birth_day"],
        reference_birth["birth_hour"],
    )


@pytest.fixture(scope="function")
def tired_bundle() -> Dict[str, Any]:
    """只有一条"昏昏沉沉"睡眠记录的内观数据"""
    return {"sleep": {"feeling": "昏昏沉沉"}}


@pytest.fixture(scope="function")
def full_bundle() -> Dict[str, Any]:
    """
    覆盖睡眠、情绪、饮食、身体四类的内观数据

    Returns:
        内观数据字典
    """
    return {
        "sleep": {"duration": "小于6h", "feeling": "略感疲惫"},
        "emotions": [
            {"emoji": "😤", "intensity": 8},
            {"label": "悲伤"},
        ],
        "meals": [
            {"feeling": "有点撑"},
            {"feeling": "刚刚好"},
        ],
        "symptoms": [
            {"body_part": "头部", "severity": 7},
        ],
    }


@pytest.fixture(scope="function")
def five_elements_service():
    """五行计算服务"""
    from core.services.five_elements_service import FiveElementsService
    return FiveElementsService


# ==================== Pytest Hooks ====================

def pytest_configure(config):
    """注册引擎测试使用的标记"""
    config.addinivalue_line("markers", "unit: 单元测试")
    config.addinivalue_line("markers", "cli: 命令行工具测试，可通过 -m 'not cli' 跳过")


def pytest_collection_modifyitems(config, items):
    """按测试模块自动打标记：tests/unit 下为 unit，命令行模块额外标 cli"""
    for item in items:
        if "unit/" in item.nodeid:
            item.add_marker(pytest.mark.unit)
        if "five_elements_cli" in item.nodeid:
            item.add_marker(pytest.mark.cli)


# ==================== 辅助 Fixtures ====================

@pytest.fixture(scope="session")
def assert_percentages_valid():
    """
    断言百分比向量合法：五个键齐全、每项在 [0, 100]、总和 100 ± 0.2

    Returns:
        断言函数，参数为五行百分比字典
    """
    def _check(percentages: Dict[str, float]):
        assert set(percentages) == {"wood", "fire", "earth", "metal", "water"}
        for element, value in percentages.items():
            assert 0 <= value <= 100, f"{element} 超出范围: {value}"
        assert abs(sum(percentages.values()) - 100) <= 0.2 + 1e-9, f"总和异常: {sum(percentages.values())}"
    return _check
