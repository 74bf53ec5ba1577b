"""
汉字工具入口

HanziHelper 把字符表、字形解析器、转换器和比较器组装在一起。
get_default_helper() 在首次使用时从配置的数据文件构建默认实例，
构建过程加锁，并发调用方只会看到“尚未构建，构建一次”或“已构建”。
"""

import threading
from typing import Iterable, List, Optional

from hanzi_collate.utils.logger import logger
from .registry import CharacterRegistry, CharacterRecord
from .registry.loader import load_registry
from .forms import FormResolver, FormConverter
from .collation import ComparisonPolicy, NaturalComparator


class HanziHelper:
    """汉字字形转换与自然排序"""

    def __init__(self, registry: Optional[CharacterRegistry] = None):
        """
        初始化

        Args:
            registry: 字符表，默认为空字符表
        """
        self.registry = registry if registry is not None else CharacterRegistry()
        self.resolver = FormResolver(self.registry)
        self.converter = FormConverter(self.resolver)
        self.comparator = NaturalComparator(self.resolver)

    @classmethod
    def from_records(cls, records: Iterable[CharacterRecord]) -> "HanziHelper":
        return cls(CharacterRegistry(records))

    @classmethod
    def from_file(cls, csv_file: Optional[str] = None) -> "HanziHelper":
        return cls(load_registry(csv_file))

    def resolve(self, text: str):
        return self.resolver.resolve(text)

    def to_traditional(self, text: str) -> str:
        return self.converter.to_traditional(text)

    def to_simplified(self, text: str) -> str:
        return self.converter.to_simplified(text)

    def compare(self, s1: str, s2: str,
                policy: ComparisonPolicy = ComparisonPolicy.LEXICAL) -> int:
        return self.comparator.compare(s1, s2, policy)

    def compare_natural(self, s1: str, s2: str,
                        policy: ComparisonPolicy = ComparisonPolicy.LEXICAL) -> int:
        return self.comparator.compare_natural(s1, s2, policy)

    def compare_fold_form(self, s1: str, s2: str) -> int:
        return self.comparator.compare(s1, s2, ComparisonPolicy.FOLD_FORM)

    def compare_ignore_form(self, s1: str, s2: str) -> int:
        return self.comparator.compare(s1, s2, ComparisonPolicy.IGNORE_FORM)

    def equals_ignore_form(self, s1: str, s2: str) -> bool:
        return self.comparator.equals_ignore_form(s1, s2)

    def sort_natural(self, items: Iterable[str],
                     policy: ComparisonPolicy = ComparisonPolicy.LEXICAL) -> List[str]:
        return self.comparator.sort_natural(items, policy)


_default_helper: Optional[HanziHelper] = None
_default_lock = threading.Lock()


def get_default_helper() -> HanziHelper:
    """获取默认实例，首次调用时从配置的数据文件构建"""
    global _default_helper
    helper = _default_helper
    if helper is not None:
        return helper

    with _default_lock:
        if _default_helper is None:
            logger.info("首次使用，构建默认字符表")
            _default_helper = HanziHelper.from_file()
        return _default_helper


def reset_default_helper():
    """丢弃默认实例，下次使用时重新构建"""
    global _default_helper
    with _default_lock:
        _default_helper = None
