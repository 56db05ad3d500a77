#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
调理建议查表数据：体质、饮食、运动、情绪、季节、五行宜忌
"""

from types import MappingProxyType
from typing import Any, Mapping


def _freeze(value: Any) -> Any:
    """递归冻结：dict -> MappingProxyType，list -> tuple"""
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


# 体质类型名称
CONSTITUTION_TYPES: Mapping[str, str] = _freeze({
    'wood_yin': '木虚体质',
    'wood_yang': '木旺体质',
    'fire_yin': '火虚体质',
    'fire_yang': '火旺体质',
    'earth_yin': '土虚体质',
    'earth_yang': '土旺体质',
    'metal_yin': '金虚体质',
    'metal_yang': '金旺体质',
    'water_yin': '水虚体质',
    'water_yang': '水旺体质',
})

# 五行体质画像
CONSTITUTION_PROFILES: Mapping[str, Mapping[str, Any]] = _freeze({
    'wood': {
        'name': '木型体质',
        'characteristics': ['身材修长', '面容清秀', '性格开朗', '有决策力'],
        'strengths': ['肝胆功能强', '新陈代谢旺盛', '恢复力强'],
        'weaknesses': ['易怒', '情绪波动', '肝火旺盛', '眼部疲劳'],
    },
    'fire': {
        'name': '火型体质',
        'characteristics': ['面色红润', '精力充沛', '性格活泼', '反应敏捷'],
        'strengths': ['心脑血管功能好', '血液循环良好', '抗寒能力强'],
        'weaknesses': ['心火旺盛', '易焦虑', '失眠多梦', '口干舌燥'],
    },
    'earth': {
        'name': '土型体质',
        'characteristics': ['身材敦实', '肌肉发达', '性格稳重', '有耐心'],
        'strengths': ['消化系统强', '免疫力好', '体格健壮'],
        'weaknesses': ['易消化不良', '湿气重', '思虑过度', '疲劳乏力'],
    },
    'metal': {
        'name': '金型体质',
        'characteristics': ['皮肤白皙', '体格健美', '性格果断', '有原则性'],
        'strengths': ['呼吸系统好', '皮肤状态佳', '抵抗力强'],
        'weaknesses': ['易呼吸道感染', '皮肤干燥', '易悲伤', '便秘'],
    },
    'water': {
        'name': '水型体质',
        'characteristics': ['身材丰满', '面色黧黑', '性格温和', '有智慧'],
        'strengths': ['肾功能强', '生殖系统好', '耐力强'],
        'weaknesses': ['畏寒怕冷', '易水肿', '腰膝酸软', '记忆力减退'],
    },
})

# 饮食
FOOD_RECOMMENDATIONS: Mapping[str, Mapping[str, Any]] = _freeze({
    'wood': {
        'add': ['绿叶蔬菜', '豆制品', '全谷物', '绿茶', '柠檬', '苹果'],
        'reduce': ['辛辣食物', '油炸食品', '酒精', '咖啡', '红肉'],
        'methods': ['清炒', '蒸煮', '凉拌'],
        'timing': '早餐丰富，午餐适中，晚餐清淡',
    },
    'fire': {
        'add': ['苦味食物', '红色蔬果', '豆类', '莲子', '百合', '苦瓜'],
        'reduce': ['热性食物', '辛辣调料', '烧烤', '油炸', '酒精'],
        'methods': ['水煮', '蒸制', '凉拌'],
        'timing': '少食多餐，避免晚餐过晚',
    },
    'earth': {
        'add': ['黄色食物', '根茎类', '小米', '南瓜', '山药', '红枣'],
        'reduce': ['生冷食物', '油腻食物', '甜食', '乳制品'],
        'methods': ['炖煮', '蒸制', '煲汤'],
        'timing': '规律进餐，细嚼慢咽',
    },
    'metal': {
        'add': ['白色食物', '梨', '白萝卜', '银耳', '杏仁', '百合'],
        'reduce': ['辛辣刺激', '干燥食物', '烟酒', '烧烤'],
        'methods': ['炖煮', '煲汤', '蒸制'],
        'timing': '定时定量，避免过饱',
    },
    'water': {
        'add': ['黑色食物', '海鲜', '核桃', '黑芝麻', '枸杞', '黑木耳'],
        'reduce': ['生冷食物', '咸味过重', '寒凉食物', '冰品'],
        'methods': ['温煮', '炖汤', '温炒'],
        'timing': '温热饮食，避免过晚进餐',
    },
})

# 补益某一五行的代表食物
ELEMENT_FOODS: Mapping[str, Any] = _freeze({
    'wood': ['绿叶蔬菜', '豆制品', '全谷物', '绿茶'],
    'fire': ['红色蔬果', '苦味食物', '豆类', '莲子'],
    'earth': ['黄色食物', '根茎类', '小米', '南瓜'],
    'metal': ['白色食物', '梨', '白萝卜', '银耳'],
    'water': ['黑色食物', '海鲜', '核桃', '黑芝麻'],
})

# 运动
EXERCISE_RECOMMENDATIONS: Mapping[str, Mapping[str, Any]] = _freeze({
    'wood': {
        'best': ['太极', '瑜伽', '散步', '羽毛球', '游泳'],
        'avoid': ['剧烈运动', '长时间静坐', '过度力量训练'],
        'time': '早晨5-7点，傍晚5-7点',
        'intensity': '中等强度，有氧运动为主',
    },
    'fire': {
        'best': ['游泳', '慢跑', '冥想', '太极', '散步'],
        'avoid': ['高温环境运动', '过度竞争性运动', '深夜运动'],
        'time': '清晨或傍晚，避开正午',
        'intensity': '中低强度，放松性运动',
    },
    'earth': {
        'best': ['快走', '瑜伽', '太极', '园艺', '家务劳动'],
        'avoid': ['剧烈运动', '过度运动', '潮湿环境运动'],
        'time': '上午9-11点，下午3-5点',
        'intensity': '中低强度，持续性运动',
    },
    'metal': {
        'best': ['慢跑', '游泳', '太极', '呼吸训练', '户外散步'],
        'avoid': ['污染环境运动', '过度运动', '寒冷环境运动'],
        'time': '早晨5-7点，下午3-5点',
        'intensity': '中等强度，注重呼吸调节',
    },
    'water': {
        'best': ['太极', '瑜伽', '温热瑜伽', '慢走', '水中运动'],
        'avoid': ['寒冷环境运动', '剧烈运动', '长时间静止'],
        'time': '上午7-9点，下午5-7点',
        'intensity': '低中强度，温热性运动',
    },
})

STRENGTH_INTENSITY: Mapping[str, str] = _freeze({
    'strong': '可以适当增加运动强度，注意不过度',
    'weak': '降低运动强度，以温和运动为主',
})

# 情绪
EMOTIONAL_GUIDANCE: Mapping[str, Mapping[str, Any]] = _freeze({
    'wood': {
        'emotional_tendencies': ['易怒', '情绪波动', '急躁', '压力大'],
        'stress_management': ['深呼吸', '冥想', '瑜伽', '散步'],
        'meditation_focus': '关注肝脏健康，练习慈悲冥想',
    },
    'fire': {
        'emotional_tendencies': ['焦虑', '兴奋', '急躁', '失眠'],
        'stress_management': ['冥想', '游泳', '音乐疗法', '规律作息'],
        'meditation_focus': '关注心脏健康，练习平静冥想',
    },
    'earth': {
        'emotional_tendencies': ['思虑过度', '担忧', '犹豫不决', '消化不良'],
        'stress_management': ['园艺', '家务劳动', '社交活动', '规律作息'],
        'meditation_focus': '关注脾胃健康，练习专注冥想',
    },
    'metal': {
        'emotional_tendencies': ['悲伤', '忧虑', '完美主义', '固执'],
        'stress_management': ['艺术创作', '音乐疗法', '呼吸训练', '户外活动'],
        'meditation_focus': '关注肺部健康，练习放松冥想',
    },
    'water': {
        'emotional_tendencies': ['恐惧', '缺乏安全感', '记忆力减退', '畏寒'],
        'stress_management': ['温热运动', '社交活动', '规律作息', '心理咨询'],
        'meditation_focus': '关注肾脏健康，练习安全感冥想',
    },
})

# 季节
SEASONAL_ADJUSTMENTS: Mapping[str, Mapping[str, str]] = _freeze({
    'wood': {
        'spring': '木旺于春，注意情绪调节，避免肝火过旺',
        'summer': '火生木，注意心脑血管保护，多喝水',
        'autumn': '金克木，注意呼吸道健康，增加户外活动',
        'winter': '水生木，注意保暖，适当进补',
    },
    'fire': {
        'spring': '木生火，新陈代谢旺盛，注意控制饮食',
        'summer': '火旺于夏，注意防暑降温，避免过度兴奋',
        'autumn': '火克金，注意呼吸系统保护，保持心情平静',
        'winter': '水克火，注意保暖，增加温补食物',
    },
    'earth': {
        'spring': '木克土，注意消化系统保护，规律饮食',
        'summer': '火生土，新陈代谢活跃，注意饮食卫生',
        'autumn': '土生金，呼吸系统相对稳定，增加户外活动',
        'winter': '土克水，注意保暖，避免生冷食物',
    },
    'metal': {
        'spring': '金克木，注意情绪调节，增加户外活动',
        'summer': '火克金，注意防暑降温，保持室内通风',
        'autumn': '金旺于秋，呼吸系统敏感，注意空气质量',
        'winter': '金生水，新陈代谢减缓，适当增加运动',
    },
    'water': {
        'spring': '水生木，新陈代谢开始活跃，注意调整作息',
        'summer': '水克火，注意防暑降温，多喝水',
        'autumn': '金生水，呼吸系统相对稳定，增加有氧运动',
        'winter': '水旺于冬，注意保暖，增加温补食物',
    },
})

# 平衡度等级（按最大最小占比差，单位：百分点）
BALANCE_LEVELS = (
    (10, 'excellent'),
    (20, 'good'),
    (30, 'fair'),
    (40, 'poor'),
)
BALANCE_LEVEL_FALLBACK = 'critical'

# 单一五行占比阈值
DEFICIENT_PERCENTAGE = 15
EXCESSIVE_PERCENTAGE = 35

# 五行宜忌与穴位
ELEMENT_ADVICE: Mapping[str, Mapping[str, Any]] = _freeze({
    'wood': {
        'element_name': '木',
        'characteristics': '属木体质特征：身材偏瘦、眼神明亮、易急躁或多思',
        'balanced_signs': ['头发乌黑发亮、指甲光滑有月牙', '情绪舒展，遇事能快速"翻篇"，决策力强', '晨起口苦消失，眼睛不干涩'],
        'imbalance_signs': ['木不足(肝血虚)：容易头晕眼花、乳腺增生、月经偏少', '木过旺(肝火旺)：脾气暴躁、失眠多梦、偏头痛、眼屎多'],
        'beneficial': ['疏肝理气', '养血柔肝', '清肝明目'],
        'avoid': ['情绪激动', '熬夜', '过度思虑'],
        'acupoints': ['太冲穴', '行间穴', '期门穴', '章门穴'],
    },
    'fire': {
        'element_name': '火',
        'characteristics': '属火体质特征：面色红润、语速快、易兴奋或心悸',
        'balanced_signs': ['面色透亮有光泽，舌色淡红均匀', '睡眠深稳，晨起精神饱满', '思维敏捷，人际互动热情适度'],
        'imbalance_signs': ['火不足(心阳虚)：心悸气短、手脚冰凉、舌淡苔白', '火过旺(心火旺)：舌尖溃疡、失眠多梦、掌心发热、口舌生疮'],
        'beneficial': ['养心安神', '清心降火', '温通心阳'],
        'avoid': ['过度兴奋', '辛辣刺激', '情绪波动'],
        'acupoints': ['神门穴', '内关穴', '劳宫穴', '极泉穴'],
    },
    'earth': {
        'element_name': '土',
        'characteristics': '属土体质特征：肌肉饱满、面色萎黄、易思虑过度',
        'balanced_signs': ['食欲正常，吃生冷不腹泻', '肌肉紧实有力，唇色淡红润泽', '情绪稳定，不轻易"杞人忧天"'],
        'imbalance_signs': ['土不足(脾虚)：腹胀便溏、四肢无力、月经量少色淡', '土过旺(湿困脾)：痰多黏腻、身体困重、舌苔厚白'],
        'beneficial': ['健脾益气', '燥湿化痰', '温中健脾'],
        'avoid': ['生冷食物', '过度思虑', '暴饮暴食'],
        'acupoints': ['足三里', '三阴交', '脾俞穴', '胃俞穴'],
    },
    'metal': {
        'element_name': '金',
        'characteristics': '属金体质特征：皮肤偏白、说话声音清亮、易呼吸道敏感',
        'balanced_signs': ['呼吸深长均匀，换季不咳嗽、喉咙清爽', '皮肤细腻有光泽，大便规律成型', '情绪通透，能理性处理"告别"类场景'],
        'imbalance_signs': ['金不足(肺气虚)：容易感冒、气短懒言、皮肤干燥脱屑', '金过旺(肺有热)：咳黄痰、鼻腔干燥、莫名悲伤焦虑'],
        'beneficial': ['润肺养阴', '清肺化痰', '补肺益气'],
        'avoid': ['悲伤情绪', '干燥环境', '空气污染'],
        'acupoints': ['肺俞穴', '中府穴', '尺泽穴', '列缺穴'],
    },
    'water': {
        'element_name': '水',
        'characteristics': '属水体质特征：肤色偏黑、记忆力强、易怕冷或潮热',
        'balanced_signs': ['头发浓密有弹性', '夜尿少、腰膝有力，冬季手脚温暖', '专注力强，遇事沉稳不慌'],
        'imbalance_signs': ['水不足(肾阴虚)：口干舌燥、失眠盗汗、足跟痛、脱发', '水过旺(肾阳虚)：水肿虚胖、尿频清长、性欲减退、五更泄泻'],
        'beneficial': ['补肾益精', '滋阴降火', '温肾助阳'],
        'avoid': ['过度劳累', '熬夜', '房事过度'],
        'acupoints': ['肾俞穴', '涌泉穴', '太溪穴', '照海穴'],
    },
})
