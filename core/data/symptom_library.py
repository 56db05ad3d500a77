#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
后天五行症状标签库、内观数据词表与标准问卷

内观数据只识别下列封闭词表中的取值，新增可识别取值时需同时修改
core/analyzers/postnatal_element_analyzer.py 中对应的分支。
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

from core.models.five_elements import SymptomTag

# ==================== 内观数据词表 ====================

SLEEP_POOR_FEELING = '昏昏沉沉'
SLEEP_SHORT_DURATION = '小于6h'
SLEEP_FULL_DURATION = '8-10h'
SLEEP_ENERGETIC_FEELING = '精力充沛'

SLEEP_DURATIONS: FrozenSet[str] = frozenset({'小于6h', '6-8h', '8-10h', '大于10h'})
SLEEP_FEELINGS: FrozenSet[str] = frozenset({'精力充沛', '神清气爽', '略感疲惫', '昏昏沉沉'})

# 表情与等价文字标签
EMOTION_ANGER = '😤'
EMOTION_SADNESS = '😔'
EMOTION_FRIGHT = '🤯'
EMOTION_JOY = '😊'

EMOTION_ALIASES: Mapping[str, str] = MappingProxyType({
    '😤': EMOTION_ANGER, '愤怒': EMOTION_ANGER,
    '😔': EMOTION_SADNESS, '悲伤': EMOTION_SADNESS,
    '🤯': EMOTION_FRIGHT, '惊吓': EMOTION_FRIGHT,
    '😊': EMOTION_JOY, '开心': EMOTION_JOY,
})
RECOGNIZED_EMOTIONS: FrozenSet[str] = frozenset(EMOTION_ALIASES)
DEFAULT_INTENSITY = 5
JOY_OVEREXCITED_THRESHOLD = 7

MEAL_OVERFULL = '有点撑'
MEAL_STILL_HUNGRY = '还想吃'
RECOGNIZED_MEAL_FEELINGS: FrozenSet[str] = frozenset({MEAL_OVERFULL, MEAL_STILL_HUNGRY})

BODY_HEAD = '头部'
BODY_CHEST = '胸部'
BODY_ABDOMEN = '腹部'
BODY_BACK = '腰背'
RECOGNIZED_BODY_PARTS: FrozenSet[str] = frozenset({BODY_HEAD, BODY_CHEST, BODY_ABDOMEN, BODY_BACK})
DEFAULT_SEVERITY = 5

# 固定标签
TAG_POOR_SLEEP = SymptomTag('fire', 'physical', '睡眠质量差', 6)
TAG_SUFFICIENT_SLEEP = SymptomTag('water', 'physical', '睡眠充足', -3)
TAG_BLOATING = SymptomTag('earth', 'physical', '腹胀', 4)
TAG_LIVER_STAGNATION = SymptomTag('wood', 'physical', '肝郁', 3)

# ==================== 五行症状参考库 ====================

def _tags(element: str, *rows: Tuple[str, str, int]) -> Tuple[SymptomTag, ...]:
    return tuple(SymptomTag(element, category, label, severity) for category, label, severity in rows)


SYMPTOM_LIBRARY: Mapping[str, Tuple[SymptomTag, ...]] = MappingProxyType({
    'wood': _tags(
        'wood',
        ('emotion', '易怒', 7), ('emotion', '焦虑', 6), ('emotion', '压抑', 6), ('emotion', '情绪波动大', 5),
        ('physical', '眼睛干涩', 5), ('physical', '抽筋', 6), ('physical', '胁肋胀痛', 7),
        ('physical', '偏头痛', 6), ('physical', '颈椎不适', 5), ('physical', '指甲脆弱', 4),
        ('tongue', '舌边红', 6), ('tongue', '舌边有齿痕', 5), ('tongue', '舌苔薄白', 3),
    ),
    'fire': _tags(
        'fire',
        ('emotion', '心烦', 6), ('emotion', '失眠', 7), ('emotion', '多梦', 5), ('emotion', '心悸', 6),
        ('emotion', '健忘', 4),
        ('physical', '口腔溃疡', 7), ('physical', '口干舌燥', 6), ('physical', '心慌', 6),
        ('physical', '面红', 5), ('physical', '小便黄', 4),
        ('tongue', '舌尖红', 7), ('tongue', '舌尖有芒刺', 6), ('tongue', '舌苔黄', 5),
    ),
    'earth': _tags(
        'earth',
        ('emotion', '思虑过度', 6), ('emotion', '忧愁', 5), ('emotion', '精神不振', 5),
        ('emotion', '注意力不集中', 4),
        ('physical', '消化不良', 6), ('physical', '腹胀', 6), ('physical', '食欲不振', 5),
        ('physical', '身体困重', 5), ('physical', '大便不成形', 5), ('physical', '四肢乏力', 4),
        ('tongue', '齿痕舌', 6), ('tongue', '舌苔厚腻', 7), ('tongue', '舌体胖大', 5),
    ),
    'metal': _tags(
        'metal',
        ('emotion', '悲伤', 6), ('emotion', '忧郁', 5), ('emotion', '情绪低落', 5), ('emotion', '孤独感', 4),
        ('physical', '咳嗽', 6), ('physical', '皮肤干燥', 5), ('physical', '鼻塞', 5),
        ('physical', '便秘', 6), ('physical', '声音嘶哑', 4), ('physical', '容易感冒', 5),
        ('tongue', '舌苔白', 5), ('tongue', '舌质淡', 4), ('tongue', '舌苔薄', 3),
    ),
    'water': _tags(
        'water',
        ('emotion', '恐惧', 6), ('emotion', '惊吓', 5), ('emotion', '缺乏安全感', 5), ('emotion', '胆小', 4),
        ('physical', '腰膝酸软', 6), ('physical', '乏力', 5), ('physical', '夜尿频多', 5),
        ('physical', '耳鸣', 5), ('physical', '头发早白', 4), ('physical', '畏寒', 4),
        ('tongue', '舌根白', 5), ('tongue', '舌质淡胖', 4), ('tongue', '舌苔水滑', 4),
    ),
})

# ==================== 标准问卷 ====================

QUESTIONNAIRE_VERSION = '1'


def _question(question_id: str, text: str, category: str, element: str, *labels: str) -> Mapping[str, object]:
    scores = (0, 2, 5, 8)
    return MappingProxyType({
        'id': question_id,
        'question': text,
        'category': category,
        'element': element,
        'options': tuple(
            MappingProxyType({'text': label, 'score': score, 'element': element})
            for label, score in zip(labels, scores)
        ),
    })


QUESTIONNAIRE: Tuple[Mapping[str, object], ...] = (
    _question('wood_anger', '最近一周是否经常感到烦躁易怒？', '情绪', 'wood',
              '从没有', '偶尔有', '经常有', '总是如此'),
    _question('wood_headache', '最近是否经常头痛或偏头痛？', '身体', 'wood',
              '从没有', '偶尔有', '经常有', '每天都有'),
    _question('fire_sleep', '最近一周的睡眠质量如何？', '身体', 'fire',
              '很好，容易入睡', '偶尔失眠', '经常失眠', '严重失眠'),
    _question('fire_mouth', '最近是否有口腔溃疡或口干舌燥？', '身体', 'fire',
              '从没有', '偶尔有', '经常有', '一直有'),
    _question('earth_digestion', '最近消化功能如何？', '身体', 'earth',
              '很好，无不适', '偶尔腹胀', '经常消化不良', '严重腹胀'),
    _question('earth_appetite', '最近食欲状况如何？', '身体', 'earth',
              '正常', '稍差', '很差', '没有食欲'),
    _question('metal_cough', '最近是否有咳嗽或呼吸系统不适？', '身体', 'metal',
              '从没有', '偶尔有', '经常有', '持续咳嗽'),
    _question('metal_bowel', '最近大便情况如何？', '身体', 'metal',
              '正常', '稍干', '经常便秘', '严重便秘'),
    _question('water_back', '最近是否有腰膝酸软的感觉？', '身体', 'water',
              '从没有', '偶尔有', '经常有', '持续酸痛'),
    _question('water_energy', '最近精力状况如何？', '身体', 'water',
              '很充沛', '一般', '容易疲劳', '非常疲惫'),
)

QUESTIONS_BY_ID: Mapping[str, Mapping[str, object]] = MappingProxyType({q['id']: q for q in QUESTIONNAIRE})

QUESTIONNAIRES: Mapping[str, Tuple[Mapping[str, object], ...]] = MappingProxyType({
    QUESTIONNAIRE_VERSION: QUESTIONNAIRE,
})

# 后天调理建议（按主导五行）
POSTNATAL_ADVICE: Mapping[str, Mapping[str, Tuple[str, ...]]] = MappingProxyType({
    'wood': MappingProxyType({
        'strengthening': ('多做户外运动，接触大自然', '练习深呼吸和冥想'),
        'balancing': ('避免过度劳累，保证充足睡眠', '学习情绪管理技巧'),
    }),
    'fire': MappingProxyType({
        'strengthening': ('保持心情平和，避免过度兴奋', '适当补充水分'),
        'balancing': ('减少辛辣刺激食物', '建立规律的作息时间'),
    }),
    'earth': MappingProxyType({
        'strengthening': ('注意饮食规律，细嚼慢咽', '适当运动促进消化'),
        'balancing': ('避免思虑过度', '保持环境干燥'),
    }),
    'metal': MappingProxyType({
        'strengthening': ('多做有氧运动，增强肺功能', '保持环境湿度适宜'),
        'balancing': ('避免过度悲伤', '注意保暖，避免受凉'),
    }),
    'water': MappingProxyType({
        'strengthening': ('注意腰部和足部保暖', '避免过度劳累'),
        'balancing': ('保持积极乐观的心态', '适当进行温和运动'),
    }),
})

# 每日内观提示
SUGGESTION_SHORT_SLEEP = '建议增加睡眠时间，保证每天7-8小时充足睡眠'
SUGGESTION_SLEEP_QUALITY = '可以尝试睡前冥想或听轻音乐来改善睡眠质量'
SUGGESTION_NEGATIVE_EMOTION = '情绪波动较大，建议适当运动或与朋友聊天来缓解压力'
SUGGESTION_HIGH_INTENSITY = '情绪强度较高，可以尝试深呼吸或正念练习'
SUGGESTION_OVEREATING = '饮食过量可能影响消化和睡眠，建议七分饱即可'
SUGGESTION_UNDEREATING = '饮食不足可能导致营养不均衡，建议合理搭配三餐'
SUGGESTION_SEVERE_SYMPTOM = '身体不适症状较明显，建议适当休息，如持续不改善请及时就医'
SUGGESTION_HEAD = '头部不适可能与睡眠不足或压力过大有关，建议保证充足睡眠'
SUGGESTION_ABDOMEN = '腹部不适可能与饮食有关，建议饮食清淡，避免辛辣刺激食物'
SUGGESTION_DEFAULT = '各项指标良好，继续保持健康的生活方式'
TIRED_FEELINGS: FrozenSet[str] = frozenset({'昏昏沉沉', '略感疲惫'})
HIGH_INTENSITY_THRESHOLD = 7
SEVERE_SYMPTOM_THRESHOLD = 6
