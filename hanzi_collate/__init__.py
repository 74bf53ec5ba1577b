"""
hanzi_collate

繁简异体汉字的字形解析、转换，以及把中文数字当作十进制数的自然排序。
"""

from .registry import CanonicalEntry, Concept, CharacterRecord, CharacterRegistry
from .forms import FormResolver, FormConverter
from .numerals import decimalize, contains_unicode_cjk
from .collation import ComparisonPolicy, NaturalComparator, compare_plain_natural
from .helper import HanziHelper, get_default_helper

__all__ = [
    "CanonicalEntry",
    "Concept",
    "CharacterRecord",
    "CharacterRegistry",
    "FormResolver",
    "FormConverter",
    "decimalize",
    "contains_unicode_cjk",
    "ComparisonPolicy",
    "NaturalComparator",
    "compare_plain_natural",
    "HanziHelper",
    "get_default_helper"
]
