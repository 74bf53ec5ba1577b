"""
自然排序比较

自然比较把连续空格折叠、把数字串按数值比较（阿拉伯数字与中文数字同等对待，
中文数字先经十进制化），其余字符按比较策略处理字形与大小写。
"""

import unicodedata
from functools import cmp_to_key
from typing import Iterable, List, Optional, Sequence, Tuple
from loguru import logger

from ..registry.entry import CanonicalEntry
from ..forms.resolver import FormResolver, check_text
from ..numerals import decimalize, is_digit, to_int, contains_unicode_cjk
from .policy import ComparisonPolicy

# 文本结束处的比较值，小于任何字符和数字
END = -1

Entries = Optional[Sequence[Optional[CanonicalEntry]]]


def is_space(char) -> bool:
    """是否为空格类字符（Unicode Zs/Zl/Zp）"""
    return bool(char) and unicodedata.category(char) in ("Zs", "Zl", "Zp")


def fold_case(char: str) -> str:
    """先转小写再转大写；结果不是单个字符时保持原样"""
    folded = char.lower().upper()
    return folded if len(folded) == 1 else char


def lexical_compare(s1: str, s2: str) -> int:
    """按码位比较：返回首个不同字符的码位差，否则为长度差"""
    for c1, c2 in zip(s1, s2):
        if c1 != c2:
            return ord(c1) - ord(c2)
    return len(s1) - len(s2)


def compare_keys(key1: Sequence[int], key2: Sequence[int]) -> int:
    """逐项比较两个比较值序列：返回首个不同项的差，否则为长度差"""
    for v1, v2 in zip(key1, key2):
        if v1 != v2:
            return v1 - v2
    return len(key1) - len(key2)


def collapse(text: str) -> str:
    """去掉空格以及数字串开头多余的 0"""
    out = []
    in_number = False
    for i, char in enumerate(text):
        if is_space(char):
            in_number = False
            continue
        if is_digit(char):
            if not in_number and to_int(char) == 0 and is_digit(_char_at(text, i + 1)):
                continue
            in_number = True
        else:
            in_number = False
        out.append(char)
    return "".join(out)


def _char_at(text: str, i: int) -> Optional[str]:
    return text[i] if i < len(text) else None


def _entry_at(entries: Entries, i: int) -> Optional[CanonicalEntry]:
    if entries is None or i >= len(entries):
        return None
    return entries[i]


def _skip_leading_zeros(text: str, i: int) -> Tuple[int, bool]:
    """跳过数字串开头的 0，但不越过最后一位数字"""
    skipped = False
    while to_int(text[i]) == 0 and is_digit(_char_at(text, i + 1)):
        i += 1
        skipped = True
    return i, skipped


def _effective(char: Optional[str], entry: Optional[CanonicalEntry],
               digit: bool, policy: ComparisonPolicy) -> int:
    if char is None:
        return END
    if digit:
        return to_int(char)
    if policy.is_lexical:
        return ord(char)
    if entry is not None:
        return ord(entry.simplified)
    return ord(fold_case(char))


def ignore_form_key(text: str, entries: Entries = None) -> List[int]:
    """
    忽略字形时的比较值序列

    每个字取 _effective 的 IGNORE_FORM 值：数字取数值，有条目取简体字码位，
    其余取大小写折叠后的码位。text 应已十进制化并去掉空格与前导零。
    """
    return [
        _effective(char, _entry_at(entries, i), is_digit(char), ComparisonPolicy.IGNORE_FORM)
        for i, char in enumerate(text)
    ]


def _natural_walk(text1: str, text2: str, entries1: Entries, entries2: Entries,
                  policy: ComparisonPolicy) -> Tuple[int, bool]:
    """
    逐字比较两段文本

    Returns:
        (比较结果, 是否跳过了空格或前导零)；结果为 0 表示两段文本同时走完
    """
    i1 = i2 = 0
    skipped = False

    while True:
        c1 = _char_at(text1, i1)
        c2 = _char_at(text2, i2)

        # 跳过空格
        while is_space(c1):
            skipped = True
            i1 += 1
            c1 = _char_at(text1, i1)
        while is_space(c2):
            skipped = True
            i2 += 1
            c2 = _char_at(text2, i2)

        d1 = is_digit(c1)
        d2 = is_digit(c2)

        # 两边都是数字：按数值比较两个数字串，先结束的较小
        if d1 and d2:
            i1, zeros1 = _skip_leading_zeros(text1, i1)
            i2, zeros2 = _skip_leading_zeros(text2, i2)
            skipped = skipped or zeros1 or zeros2

            result = 0
            while True:
                if result == 0:
                    result = to_int(text1[i1]) - to_int(text2[i2])
                i1 += 1
                i2 += 1
                d1 = is_digit(_char_at(text1, i1))
                d2 = is_digit(_char_at(text2, i2))
                if not d1 and not d2:
                    break
                if not d1:
                    return -1, skipped
                if not d2:
                    return 1, skipped

            if result != 0:
                return result, skipped
            continue

        if c1 is None and c2 is None:
            return 0, skipped

        if c1 != c2:
            result = (_effective(c1, _entry_at(entries1, i1), d1, policy)
                      - _effective(c2, _entry_at(entries2, i2), d2, policy))
            if result != 0:
                return result, skipped

        i1 += 1
        i2 += 1


def compare_plain_natural(s1: str, s2: str,
                          policy: ComparisonPolicy = ComparisonPolicy.LEXICAL) -> int:
    """
    不含汉字的自然比较：折叠空格，数字串按数值比较，按策略处理大小写

    Args:
        s1: 第一个字符串
        s2: 第二个字符串
        policy: LEXICAL、IGNORE_CASE 或 FOLD_CASE（字形策略自动换成对应的大小写策略）

    Returns:
        s1 > s2 为正，s1 < s2 为负，相同为 0
    """
    check_text(s1, "s1")
    check_text(s2, "s2")
    policy = ComparisonPolicy.parse(policy).for_plain_text()

    result, skipped = _natural_walk(s1, s2, None, None, policy)
    if result != 0:
        return result

    if policy.ignores:
        if not skipped:
            return 0
        return compare_keys(ignore_form_key(collapse(s1)), ignore_form_key(collapse(s2)))
    if policy.folds:
        return lexical_compare(s1, s2)
    return lexical_compare(s1, s2) if skipped else 0


class NaturalComparator:
    """中文自然排序比较器"""

    def __init__(self, resolver: FormResolver):
        """
        初始化比较器

        Args:
            resolver: 字形解析器
        """
        self.resolver = resolver

    def _form_value(self, char: Optional[str], entry: Optional[CanonicalEntry]) -> int:
        if char is None:
            return END
        if entry is not None:
            return ord(entry.simplified)
        return ord(fold_case(char))

    def _ignore_form_key(self, text: str) -> List[int]:
        chars = collapse(decimalize(text))
        return ignore_form_key(chars, self.resolver.resolve(chars))

    def compare(self, s1: str, s2: str,
                policy: ComparisonPolicy = ComparisonPolicy.LEXICAL) -> int:
        """
        逐字比较两个字符串（不做数字与空格处理）

        两边都解析到条目时比较简体字；只有一边解析到条目时，
        用另一边的原字符与其简体字比较；都没有条目时按大小写折叠后的码位比较。
        LEXICAL 直接按码位比较。

        Returns:
            s1 > s2 为正，s1 < s2 为负，相同为 0
        """
        check_text(s1, "s1")
        check_text(s2, "s2")
        policy = ComparisonPolicy.parse(policy)

        if policy.is_lexical:
            return lexical_compare(s1, s2)

        entries1 = self.resolver.resolve(s1)
        entries2 = self.resolver.resolve(s2)

        for i in range(max(len(s1), len(s2))):
            c1 = _char_at(s1, i)
            c2 = _char_at(s2, i)
            if c1 == c2:
                continue
            result = (self._form_value(c1, _entry_at(entries1, i))
                      - self._form_value(c2, _entry_at(entries2, i)))
            if result != 0:
                return result

        if policy.folds:
            return lexical_compare(s1, s2)
        return 0

    def compare_natural(self, s1: str, s2: str,
                        policy: ComparisonPolicy = ComparisonPolicy.LEXICAL) -> int:
        """
        自然比较两个字符串

        1. 两边都不含汉字时改用 compare_plain_natural。
        2. 中文数字先十进制化，阿拉伯数字与中文数字（零 至 十）同等对待，
           数字排在字母之前。
        3. 连续空格折叠，数字串按数值比较，前导零不影响数值。
        4. 其余字符按策略处理：LEXICAL 按码位；其他策略比较解析出的简体字，
           无条目时按大小写折叠后的码位。
        5. 全部相同时：IGNORE 若跳过过空格或前导零，再比较两边十进制化并去掉空格与前导零后的
           比较值序列（数字取数值，字形取简体），否则为 0；FOLD 按原文码位再比较一次；
           LEXICAL 若跳过过空格或前导零则按原文码位比较，否则为 0。

        Args:
            s1: 第一个字符串
            s2: 第二个字符串
            policy: 比较策略，PINYIN_FOLD_FORM 尚未实现，按 FOLD_FORM 处理

        Returns:
            s1 > s2 为正，s1 < s2 为负，相同为 0
        """
        check_text(s1, "s1")
        check_text(s2, "s2")
        policy = ComparisonPolicy.parse(policy)

        if not contains_unicode_cjk(s1) and not contains_unicode_cjk(s2):
            return compare_plain_natural(s1, s2, policy)

        chars1 = decimalize(s1)
        chars2 = decimalize(s2)

        entries1 = entries2 = None
        if not policy.is_lexical:
            entries1 = self.resolver.resolve(chars1)
            entries2 = self.resolver.resolve(chars2)

        result, skipped = _natural_walk(chars1, chars2, entries1, entries2, policy)
        if result != 0:
            return result

        if policy.ignores:
            if not skipped:
                return 0
            return compare_keys(self._ignore_form_key(s1), self._ignore_form_key(s2))
        if policy.folds:
            return lexical_compare(s1, s2)
        return lexical_compare(s1, s2) if skipped else 0

    def equals_ignore_form(self, s1: str, s2: str) -> bool:
        """
        忽略字形时两个字符串是否相同

        逐字比较解析出的条目（按对象身份），两边都没有条目时比较原字符。
        """
        check_text(s1, "s1")
        check_text(s2, "s2")
        if len(s1) != len(s2):
            return False

        entries1 = self.resolver.resolve(s1)
        entries2 = self.resolver.resolve(s2)
        for c1, c2, e1, e2 in zip(s1, s2, entries1, entries2):
            if e1 is not e2:
                return False
            if e1 is None and c1 != c2:
                return False
        return True

    def sort_natural(self, items: Iterable[str],
                     policy: ComparisonPolicy = ComparisonPolicy.LEXICAL) -> List[str]:
        """
        按自然顺序排序（稳定排序）

        Args:
            items: 待排序字符串
            policy: 比较策略

        Returns:
            排序后的新列表
        """
        policy = ComparisonPolicy.parse(policy)
        items = list(items)
        result = sorted(
            items,
            key=cmp_to_key(lambda a, b: self.compare_natural(a, b, policy))
        )
        logger.debug(f"自然排序完成，共 {len(items)} 项，策略 {policy.value}")
        return result
