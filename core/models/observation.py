#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
后天五行输入模型 - 每日内观记录与出生信息

字段全部可选，缺失字段不产生任何症状标签；未知字段直接忽略。
"""

from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ValidationError


class SleepRecord(BaseModel):
    """睡眠记录"""
    model_config = ConfigDict(extra='ignore', frozen=True)

    duration: Optional[str] = Field(
        None,
        description="睡眠时长标签，如 小于6h / 6-8h / 8-10h",
        validation_alias=AliasChoices('duration', 'duration_label'),
    )
    feeling: Optional[str] = Field(
        None,
        description="醒来感觉，如 精力充沛 / 神清气爽 / 略感疲惫 / 昏昏沉沉",
        validation_alias=AliasChoices('feeling', 'feeling_label'),
    )


class EmotionEntry(BaseModel):
    """情绪记录（表情或文字标签 + 强度1-10）"""
    model_config = ConfigDict(extra='ignore', frozen=True)

    emoji: Optional[str] = Field(
        None,
        description="情绪表情或标签，如 😤 / 愤怒",
        validation_alias=AliasChoices('emoji', 'label', 'emoji_or_label'),
    )
    intensity: Optional[int] = Field(None, ge=1, le=10, description="情绪强度 1-10")


class MealEntry(BaseModel):
    """饮食记录"""
    model_config = ConfigDict(extra='ignore', frozen=True)

    feeling: Optional[str] = Field(
        None,
        description="餐后感觉，如 很满足 / 有点撑 / 刚刚好 / 还想吃",
        validation_alias=AliasChoices('feeling', 'feeling_label'),
    )


class SymptomEntry(BaseModel):
    """身体不适记录"""
    model_config = ConfigDict(extra='ignore', frozen=True)

    body_part: Optional[str] = Field(
        None,
        description="部位，如 头部 / 胸部 / 腹部 / 四肢 / 腰背 / 其他",
        validation_alias=AliasChoices('body_part', 'body_region'),
    )
    severity: Optional[int] = Field(None, ge=1, le=10, description="严重程度 1-10")


class ObservationBundle(BaseModel):
    """每日内观数据"""
    model_config = ConfigDict(extra='ignore', frozen=True)

    sleep: Optional[SleepRecord] = None
    emotions: List[EmotionEntry] = Field(default_factory=list)
    meals: List[MealEntry] = Field(default_factory=list)
    symptoms: List[SymptomEntry] = Field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Optional[Dict[str, Any]]) -> 'ObservationBundle':
        """
        从松散字典构建，pydantic 校验错误转换为引擎的 ValidationError

        Args:
            payload: 如 {"sleep": {"feeling": "昏昏沉沉"}, "emotions": [...]}，None 视为空记录
        """
        if payload is None:
            return cls()
        if isinstance(payload, cls):
            return payload
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first.get('loc', ())) or None
            raise ValidationError(f"内观数据格式错误: {first.get('msg')}", field=field) from e


class BirthData(BaseModel):
    """出生信息（日期合法性由调用方负责，范围校验在排盘时进行）"""
    model_config = ConfigDict(extra='ignore', frozen=True)

    birth_year: int = Field(..., description="出生年", examples=[1990])
    birth_month: int = Field(..., description="出生月 1-12", examples=[10])
    birth_day: int = Field(..., description="出生日 1-31", examples=[25])
    birth_hour: Optional[int] = Field(None, description="出生时 0-23，缺省使用配置的默认时辰", examples=[14])
    gender: Optional[str] = Field(None, description="性别：male / female")
