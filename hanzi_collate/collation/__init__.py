"""
自然排序模块

按比较策略处理字形、大小写、空格与数字，给出中文字符串的自然顺序。
"""

from .policy import ComparisonPolicy
from .comparator import (
    NaturalComparator,
    compare_plain_natural,
    lexical_compare,
    fold_case,
    collapse
)

__all__ = [
    "ComparisonPolicy",
    "NaturalComparator",
    "compare_plain_natural",
    "lexical_compare",
    "fold_case",
    "collapse"
]
