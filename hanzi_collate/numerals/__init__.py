"""
中文数字模块

识别阿拉伯数字与中文数字，并把带十的幂的中文数字改写为十进制数字串。
"""

from .digits import (
    CHINESE_DIGITS,
    POWER10_CHINESE,
    is_digit,
    to_int,
    is_power10_chinese,
    to_power10,
    is_unicode_cjk,
    contains_unicode_cjk
)
from .decimalizer import decimalize

__all__ = [
    "CHINESE_DIGITS",
    "POWER10_CHINESE",
    "is_digit",
    "to_int",
    "is_power10_chinese",
    "to_power10",
    "is_unicode_cjk",
    "contains_unicode_cjk",
    "decimalize"
]
