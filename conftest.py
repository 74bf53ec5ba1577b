"""测试公共配置"""
import os
import sys

# 测试时不写日志文件
os.environ.setdefault("LOG_FILE", "")

# 添加项目根目录到 Python 路径
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import pytest

from hanzi_collate.registry import CharacterRecord, CharacterRegistry
from hanzi_collate.helper import HanziHelper


def make_records(rows):
    """由 (字形串, 读音, 概念组) 元组构建记录"""
    return [
        CharacterRecord(spelling=spelling, pronunciation=pron, concepts=concepts)
        for spelling, pron, concepts in rows
    ]


SAMPLE_ROWS = [
    ("万萬", "wan4", [["~一", "千~"]]),
    ("发發", "fa1", [["~展", "~生"]]),
    ("发髮", "fa4", [["頭~", "理~"]]),
    ("头頭", "tou2", [["~腦"]]),
    ("后後", "hou4", [["以~"]]),
    ("后后", "hou4", [["皇~"]]),
    ("面麵", "mian4", [["~條"]]),
    ("面面", "mian4", [["~子"]]),
    ("条條", "tiao2", [["~件"]]),
    ("个個箇", "ge4", []),
    ("国國", "guo2", []),
]


@pytest.fixture
def records():
    return make_records(SAMPLE_ROWS)


@pytest.fixture
def registry(records):
    return CharacterRegistry(records)


@pytest.fixture
def helper(registry):
    return HanziHelper(registry)


@pytest.fixture
def empty_helper():
    return HanziHelper()
