"""
数字字符判定

阿拉伯数字（Unicode 十进制数字）与中文数字 零 至 十 同等对待；
十、百、千、万/萬、亿/億 表示十的幂。
"""

import unicodedata

# 中文数字，下标即数值，注意 十 为 10
CHINESE_DIGITS = "零一二三四五六七八九十"

# 表示十的幂的字及其幂次
POWER10_CHINESE = {
    "十": 1,
    "百": 2,
    "千": 3,
    "万": 4,
    "萬": 4,
    "亿": 8,
    "億": 8,
}

# CJK 统一汉字范围
CJK_FIRST = "\u4e00"
CJK_LAST = "\u9fcf"


def is_digit(char) -> bool:
    """是否为数字（0-9 或 零 至 十），None 表示文本结束"""
    if not char:
        return False
    return char.isdecimal() or char in CHINESE_DIGITS


def to_int(char) -> int:
    """
    数字字符的数值

    Returns:
        0-10，非数字返回 -1
    """
    if not char:
        return -1
    if char.isdecimal():
        return unicodedata.decimal(char)
    return CHINESE_DIGITS.find(char)


def is_power10_chinese(char) -> bool:
    return char in POWER10_CHINESE


def to_power10(char) -> int:
    """十的幂次，非幂字返回 -1"""
    return POWER10_CHINESE.get(char, -1)


def is_unicode_cjk(char) -> bool:
    """是否为 CJK 统一汉字（U+4E00-U+9FCF）"""
    return CJK_FIRST <= char <= CJK_LAST


def contains_unicode_cjk(text: str) -> bool:
    return any(CJK_FIRST <= c <= CJK_LAST for c in text)
