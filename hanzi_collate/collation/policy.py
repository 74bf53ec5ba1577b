"""比较策略"""
from enum import Enum


class ComparisonPolicy(str, Enum):
    """
    字符串比较策略

    IGNORE 把不同字形（或大小写）视为完全相同；FOLD 在排序时视为相同，
    但全部相同时再按码位比较一次，保证排序结果确定（简体通常排在繁体前）。
    """
    LEXICAL = "LEXICAL"                    # 按码位比较，数字按数值
    IGNORE_FORM = "IGNORE_FORM"            # 忽略字形
    FOLD_FORM = "FOLD_FORM"                # 折叠字形
    IGNORE_CASE = "IGNORE_CASE"            # 同 IGNORE_FORM
    FOLD_CASE = "FOLD_CASE"                # 同 FOLD_FORM
    PINYIN_FOLD_FORM = "PINYIN_FOLD_FORM"  # 尚未实现，按 FOLD_FORM 处理

    @property
    def ignores(self) -> bool:
        return self in (ComparisonPolicy.IGNORE_FORM, ComparisonPolicy.IGNORE_CASE)

    @property
    def folds(self) -> bool:
        return self in (
            ComparisonPolicy.FOLD_FORM,
            ComparisonPolicy.FOLD_CASE,
            ComparisonPolicy.PINYIN_FOLD_FORM,
        )

    @property
    def is_lexical(self) -> bool:
        return self is ComparisonPolicy.LEXICAL

    def for_plain_text(self) -> "ComparisonPolicy":
        """不含汉字时改用的大小写策略"""
        if self.ignores:
            return ComparisonPolicy.IGNORE_CASE
        if self.folds:
            return ComparisonPolicy.FOLD_CASE
        return ComparisonPolicy.LEXICAL

    @classmethod
    def parse(cls, value) -> "ComparisonPolicy":
        """由策略名（不区分大小写）或策略本身得到策略"""
        if isinstance(value, cls):
            return value
        if value is None:
            raise ValueError("policy must not be None")
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            names = ", ".join(p.value for p in cls)
            raise ValueError(f"unknown comparison policy '{value}', expected one of: {names}")
