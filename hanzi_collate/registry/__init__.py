"""
字符表模块

规范汉字条目的数据模型、内存查找表，以及数据文件的读写。
"""

from .entry import CanonicalEntry, Concept, CharacterRecord
from .registry import CharacterRegistry, build_tables

__all__ = [
    "CanonicalEntry",
    "Concept",
    "CharacterRecord",
    "CharacterRegistry",
    "build_tables"
]
