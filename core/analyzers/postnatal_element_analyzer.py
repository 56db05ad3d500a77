#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
后天五行分析器 - 根据每日内观记录或标准问卷计算后天五行分布

- 内观模式：睡眠、情绪、饮食、身体不适 -> 症状标签
- 问卷模式：问卷答案（题目ID -> 选项序号）-> 症状标签
- 计分：五行各自以50分为基础，累加标签严重度后截断到 [0, 100]，再归一化
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from core.analyzers.wuxing_balance_analyzer import WuxingBalanceAnalyzer
from core.config.engine_config import get_config
from core.data.constants import ELEMENT_ORDER
from core.data import symptom_library as lib
from core.exceptions import ValidationError
from core.models.five_elements import PostnatalAnalysis, SymptomTag, element_vector
from core.models.observation import ObservationBundle

logger = logging.getLogger(__name__)

BASE_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100

BundleInput = Union[ObservationBundle, Dict[str, Any], None]


def _sleep_tags(bundle: ObservationBundle) -> List[SymptomTag]:
    sleep = bundle.sleep
    if sleep is None:
        return []
    tags = []
    if sleep.feeling == lib.SLEEP_POOR_FEELING or sleep.duration == lib.SLEEP_SHORT_DURATION:
        tags.append(lib.TAG_POOR_SLEEP)
    if sleep.duration == lib.SLEEP_FULL_DURATION and sleep.feeling == lib.SLEEP_ENERGETIC_FEELING:
        tags.append(lib.TAG_SUFFICIENT_SLEEP)
    return tags


def _emotion_tags(bundle: ObservationBundle) -> List[SymptomTag]:
    tags = []
    for entry in bundle.emotions:
        emotion = lib.EMOTION_ALIASES.get(entry.emoji or '')
        intensity = entry.intensity or lib.DEFAULT_INTENSITY
        if emotion == lib.EMOTION_ANGER:
            tags.append(SymptomTag('wood', 'emotion', '易怒', intensity))
        elif emotion == lib.EMOTION_SADNESS:
            tags.append(SymptomTag('metal', 'emotion', '悲伤', intensity))
        elif emotion == lib.EMOTION_FRIGHT:
            tags.append(SymptomTag('water', 'emotion', '惊吓', intensity))
        elif emotion == lib.EMOTION_JOY:
            if intensity > lib.JOY_OVEREXCITED_THRESHOLD:
                tags.append(SymptomTag('fire', 'emotion', '心神不宁', intensity - lib.DEFAULT_INTENSITY))
    return tags


def _meal_tags(bundle: ObservationBundle) -> List[SymptomTag]:
    tags = []
    for meal in bundle.meals:
        if meal.feeling == lib.MEAL_OVERFULL:
            tags.append(lib.TAG_BLOATING)
        elif meal.feeling == lib.MEAL_STILL_HUNGRY:
            tags.append(lib.TAG_LIVER_STAGNATION)
    return tags


def _body_tags(bundle: ObservationBundle) -> List[SymptomTag]:
    tags = []
    for symptom in bundle.symptoms:
        severity = symptom.severity or lib.DEFAULT_SEVERITY
        if symptom.body_part == lib.BODY_HEAD:
            tags.append(SymptomTag('wood', 'physical', '头痛', severity))
        elif symptom.body_part == lib.BODY_CHEST:
            tags.append(SymptomTag('fire', 'physical', '胸闷', severity))
        elif symptom.body_part == lib.BODY_ABDOMEN:
            tags.append(SymptomTag('earth', 'physical', '腹痛', severity))
        elif symptom.body_part == lib.BODY_BACK:
            tags.append(SymptomTag('water', 'physical', '腰痛', severity))
    return tags


def _parse_option_index(question_id: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"问题 {question_id} 的选项序号必须为整数: {value!r}", field=question_id)
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if not isinstance(value, int):
        raise ValidationError(f"问题 {question_id} 的选项序号必须为整数: {value!r}", field=question_id)
    return value


class PostnatalElementAnalyzer:
    """后天五行分析器"""

    @staticmethod
    def extract_symptom_tags(bundle: BundleInput) -> List[SymptomTag]:
        """
        从内观记录提取症状标签

        Args:
            bundle: ObservationBundle 或等价的字典；无法识别的取值不产生标签

        Returns:
            按 睡眠 -> 情绪 -> 饮食 -> 身体 顺序排列的标签列表
        """
        bundle = ObservationBundle.from_payload(bundle)
        tags = _sleep_tags(bundle) + _emotion_tags(bundle) + _meal_tags(bundle) + _body_tags(bundle)
        logger.debug(f"📊 提取症状标签 {len(tags)} 个: {[t.label for t in tags]}")
        return tags

    @staticmethod
    def tags_from_questionnaire(
        answers: Mapping[str, Any],
        version: Optional[str] = None
    ) -> List[SymptomTag]:
        """
        问卷答案 -> 症状标签

        Args:
            answers: 题目ID -> 选项序号（0-3），未作答的题目不计分
            version: 问卷版本，默认取配置

        Raises:
            ValidationError: 未知题目ID、选项序号越界或非整数
        """
        questions = PostnatalElementAnalyzer.get_standard_questionnaire(version)
        by_id = {question['id']: question for question in questions}

        tags = []
        for question_id, raw_index in answers.items():
            question = by_id.get(question_id)
            if question is None:
                raise ValidationError(f"未知问题: {question_id}", field=question_id)
            index = _parse_option_index(question_id, raw_index)
            options = question['options']
            if not 0 <= index < len(options):
                raise ValidationError(
                    f"问题 {question_id} 的选项序号超出范围 0-{len(options) - 1}: {index}",
                    field=question_id,
                )
            option = options[index]
            tags.append(SymptomTag(option['element'], 'questionnaire', question['question'], option['score']))
        return tags

    @staticmethod
    def calculate_scores(tags: Iterable[SymptomTag]) -> Dict[str, float]:
        """基础分50，累加严重度后截断到 [0, 100]"""
        scores = {element: BASE_SCORE for element in ELEMENT_ORDER}
        for tag in tags:
            scores[tag.element] += tag.severity
        return {element: max(MIN_SCORE, min(MAX_SCORE, score)) for element, score in scores.items()}

    @staticmethod
    def analyze_tags(tags: Iterable[SymptomTag]) -> PostnatalAnalysis:
        """标签 -> 分数 -> 百分比 -> 主导五行 + 调理建议"""
        tags = tuple(tags)
        scores = PostnatalElementAnalyzer.calculate_scores(tags)
        percentages = WuxingBalanceAnalyzer.normalize_scores(scores)
        dominant = WuxingBalanceAnalyzer.dominant_element(percentages)
        strengthening, balancing = PostnatalElementAnalyzer.get_recommendations(dominant)

        return PostnatalAnalysis(
            tags=tags,
            element_scores=element_vector(scores),
            element_percentages=element_vector(percentages),
            dominant_element=dominant,
            weakest_element=WuxingBalanceAnalyzer.weakest_element(percentages),
            strengthening=strengthening,
            balancing=balancing,
        )

    @staticmethod
    def analyze_observations(bundle: BundleInput) -> PostnatalAnalysis:
        """
        内观模式分析

        Args:
            bundle: 如 {"sleep": {"feeling": "昏昏沉沉"}, "emotions": [{"emoji": "😤", "intensity": 8}]}
        """
        logger.info("🔍 后天五行分析（内观记录）")
        tags = PostnatalElementAnalyzer.extract_symptom_tags(bundle)
        analysis = PostnatalElementAnalyzer.analyze_tags(tags)
        logger.info(f"✅ 后天五行分析完成: 主导 {analysis.dominant_element}，{analysis.percentages}")
        return analysis

    @staticmethod
    def analyze_questionnaire(answers: Mapping[str, Any], version: Optional[str] = None) -> PostnatalAnalysis:
        """问卷模式分析"""
        logger.info(f"🔍 后天五行分析（问卷，作答 {len(answers)} 题）")
        tags = PostnatalElementAnalyzer.tags_from_questionnaire(answers, version)
        analysis = PostnatalElementAnalyzer.analyze_tags(tags)
        logger.info(f"✅ 问卷分析完成: 主导 {analysis.dominant_element}，{analysis.percentages}")
        return analysis

    @staticmethod
    def get_standard_questionnaire(version: Optional[str] = None) -> Tuple[Mapping[str, Any], ...]:
        """获取标准问卷（按版本）"""
        version = version or get_config().questionnaire_version
        questions = lib.QUESTIONNAIRES.get(version)
        if questions is None:
            raise ValidationError(f"未知问卷版本: {version}", field='version')
        return questions

    @staticmethod
    def get_recommendations(dominant: str) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
        """主导五行 -> (补益建议, 平衡建议)"""
        advice = lib.POSTNATAL_ADVICE[dominant]
        return tuple(advice['strengthening']), tuple(advice['balancing'])

    @staticmethod
    def get_symptom_library(element: Optional[str] = None) -> Union[Tuple[SymptomTag, ...], Mapping[str, Tuple[SymptomTag, ...]]]:
        """五行症状参考库；指定 element 时只返回该五行"""
        if element is None:
            return lib.SYMPTOM_LIBRARY
        if element not in lib.SYMPTOM_LIBRARY:
            raise ValidationError(f"未知五行: {element}", field='element')
        return lib.SYMPTOM_LIBRARY[element]

    @staticmethod
    def daily_suggestions(bundle: BundleInput, limit: Optional[int] = None) -> List[str]:
        """
        每日内观提示（规则生成，最多 limit 条，默认取配置的 3 条）

        没有命中任何规则时返回一条默认提示。
        """
        bundle = ObservationBundle.from_payload(bundle)
        if limit is None:
            limit = get_config().max_suggestions
        suggestions = []

        if bundle.sleep is not None:
            if bundle.sleep.duration and lib.SLEEP_SHORT_DURATION in bundle.sleep.duration:
                suggestions.append(lib.SUGGESTION_SHORT_SLEEP)
            if bundle.sleep.feeling in lib.TIRED_FEELINGS:
                suggestions.append(lib.SUGGESTION_SLEEP_QUALITY)

        if bundle.emotions:
            negative = (lib.EMOTION_ANGER, lib.EMOTION_SADNESS, lib.EMOTION_FRIGHT)
            if any(lib.EMOTION_ALIASES.get(e.emoji or '') in negative for e in bundle.emotions):
                suggestions.append(lib.SUGGESTION_NEGATIVE_EMOTION)
            if any((e.intensity or 0) > lib.HIGH_INTENSITY_THRESHOLD for e in bundle.emotions):
                suggestions.append(lib.SUGGESTION_HIGH_INTENSITY)

        if bundle.meals:
            if any(m.feeling == lib.MEAL_OVERFULL for m in bundle.meals):
                suggestions.append(lib.SUGGESTION_OVEREATING)
            if any(m.feeling == lib.MEAL_STILL_HUNGRY for m in bundle.meals):
                suggestions.append(lib.SUGGESTION_UNDEREATING)

        if bundle.symptoms:
            if any((s.severity or 0) > lib.SEVERE_SYMPTOM_THRESHOLD for s in bundle.symptoms):
                suggestions.append(lib.SUGGESTION_SEVERE_SYMPTOM)
            if any(s.body_part == lib.BODY_HEAD for s in bundle.symptoms):
                suggestions.append(lib.SUGGESTION_HEAD)
            if any(s.body_part == lib.BODY_ABDOMEN for s in bundle.symptoms):
                suggestions.append(lib.SUGGESTION_ABDOMEN)

        if not suggestions:
            suggestions.append(lib.SUGGESTION_DEFAULT)
        return suggestions[:limit]
