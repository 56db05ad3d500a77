#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行计算命令行工具
支持：
1. natal：根据出生年月日时做先天五行分析
2. questionnaire：根据问卷答案做后天五行分析（--show 打印问卷）
3. observe：根据每日内观记录（JSON 文件或字符串）做后天五行分析
"""

import argparse
import json
import os
import sys
from typing import Any, Dict, List, Optional

# 添加项目根目录到路径
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from core.analyzers.postnatal_element_analyzer import PostnatalElementAnalyzer
from core.calculators.bazi_logging import configure_logging
from core.exceptions import FiveElementsError
from core.services.five_elements_service import FiveElementsService


def _load_json(value: str) -> Any:
    """参数既可以是 JSON 文件路径，也可以是 JSON 字符串"""
    if os.path.isfile(value):
        with open(value, 'r', encoding='utf-8') as f:
            return json.load(f)
    return json.loads(value)


def _parse_answers(pairs: List[str]) -> Dict[str, str]:
    answers = {}
    for pair in pairs:
        question_id, sep, index = pair.partition('=')
        if not sep:
            raise argparse.ArgumentTypeError(f"答案格式应为 题目ID=选项序号: {pair}")
        answers[question_id.strip()] = index.strip()
    return answers


def _print_json(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _show_questionnaire(version: Optional[str]) -> None:
    for question in PostnatalElementAnalyzer.get_standard_questionnaire(version):
        print(f"[{question['id']}] {question['question']}")
        for index, option in enumerate(question['options']):
            print(f"    {index}. {option['text']}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='五行计算工具（先天排盘 / 后天问卷 / 每日内观）')
    parser.add_argument('--log-level', type=str, default=None, help='日志级别（默认读取 LOG_LEVEL）')
    subparsers = parser.add_subparsers(dest='command', required=True)

    natal = subparsers.add_parser('natal', help='先天五行分析')
    natal.add_argument('year', type=int, help='出生年')
    natal.add_argument('month', type=int, help='出生月 1-12')
    natal.add_argument('day', type=int, help='出生日 1-31')
    natal.add_argument('hour', type=int, nargs='?', default=None, help='出生时 0-23（可选）')
    natal.add_argument('--text', action='store_true', help='输出文字报告而不是 JSON')

    questionnaire = subparsers.add_parser('questionnaire', help='问卷后天五行分析')
    questionnaire.add_argument('answers', nargs='*', help='答案，格式：题目ID=选项序号，如 water_energy=3')
    questionnaire.add_argument('--version', type=str, default=None, help='问卷版本')
    questionnaire.add_argument('--show', action='store_true', help='打印问卷题目')

    observe = subparsers.add_parser('observe', help='每日内观后天五行分析')
    observe.add_argument('data', type=str, help='内观记录 JSON 文件路径或 JSON 字符串')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        if args.command == 'natal':
            result = FiveElementsService.analyze_natal(args.year, args.month, args.day, args.hour)
            if args.text:
                print(result['description'])
            else:
                _print_json(result)

        elif args.command == 'questionnaire':
            if args.show or not args.answers:
                _show_questionnaire(args.version)
                return 0
            answers = _parse_answers(args.answers)
            _print_json(FiveElementsService.analyze_questionnaire(answers, args.version))

        elif args.command == 'observe':
            _print_json(FiveElementsService.analyze_postnatal(_load_json(args.data)))

    except (FiveElementsError, argparse.ArgumentTypeError, json.JSONDecodeError) as e:
        print(f"❌ 错误：{e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
