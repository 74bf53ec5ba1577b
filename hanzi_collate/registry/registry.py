"""
字符表

从原始记录构建两张查找表：字符 -> 候选条目，词汇 -> 候选条目，
并把每个词汇的简体写法和繁体写法也登记到词汇表中。
构建完成后只读，可被任意多个调用方并发读取。
"""

import re
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union
from loguru import logger

from .entry import CanonicalEntry, CharacterRecord, Concept
from ..forms.resolver import resolve_entries
from ..forms.converter import project_entries

# 概念中指代当前字（繁体）的占位符
PLACEHOLDER_PATTERN = re.compile("[~～]")

RecordLike = Union[CharacterRecord, Mapping[str, Any]]


class RegistryTables:
    """
    一组查找表

    构建期间表值是按插入顺序去重的 dict（键为条目，值为 None），
    freeze() 之后表值变为元组，不再修改。
    """

    def __init__(self, entries=None, by_codepoint=None, by_vocabulary=None):
        self.entries = entries if entries is not None else []
        self.by_codepoint = by_codepoint if by_codepoint is not None else {}
        self.by_vocabulary = by_vocabulary if by_vocabulary is not None else {}

    def lookup_by_codepoint(self, char: str) -> Tuple[CanonicalEntry, ...]:
        return tuple(self.by_codepoint.get(char, ()))

    def lookup_by_vocabulary(self, vocab: str) -> Tuple[CanonicalEntry, ...]:
        return tuple(self.by_vocabulary.get(vocab, ()))

    def add_codepoint(self, char: str, entry: CanonicalEntry):
        self.by_codepoint.setdefault(char, {})[entry] = None

    def add_vocabulary(self, vocab: str, entry: CanonicalEntry):
        self.by_vocabulary.setdefault(vocab, {})[entry] = None

    def freeze(self) -> "RegistryTables":
        """返回只读副本"""
        return RegistryTables(
            entries=tuple(self.entries),
            by_codepoint={c: tuple(v) for c, v in self.by_codepoint.items()},
            by_vocabulary={s: tuple(v) for s, v in self.by_vocabulary.items()},
        )


def _to_record(record: RecordLike) -> CharacterRecord:
    if isinstance(record, CharacterRecord):
        return record
    return CharacterRecord(**record)


def _make_entry(record: CharacterRecord) -> Optional[CanonicalEntry]:
    """
    由一条记录构建条目

    Args:
        record: 原始记录

    Returns:
        条目；字形串不足两个字时返回 None
    """
    spelling = record.spelling
    if len(spelling) < 2:
        return None

    traditional = spelling[1]
    concepts = []
    for group in record.concepts:
        vocabs = tuple(
            PLACEHOLDER_PATTERN.sub(traditional, v) for v in group if v
        )
        if vocabs:
            concepts.append(Concept(vocabs))

    return CanonicalEntry(
        traditional=traditional,
        simplified=spelling[0],
        variants=tuple(spelling[2:]),
        pronunciation=record.pronunciation,
        concepts=tuple(concepts),
    )


def _propagate_forms(tables: RegistryTables):
    """把每个词汇的简体、繁体写法也登记到词汇表"""
    for vocab in list(tables.by_vocabulary):
        owners = tables.by_vocabulary[vocab]
        entries = resolve_entries(tables, vocab)
        simplified = project_entries(vocab, entries, traditional=False)
        traditional = project_entries(vocab, entries, traditional=True)

        merged = dict(owners)
        merged.update(tables.by_vocabulary.get(simplified, {}))
        merged.update(tables.by_vocabulary.get(traditional, {}))

        tables.by_vocabulary[simplified] = dict(merged)
        tables.by_vocabulary[traditional] = dict(merged)


def build_tables(records: Iterable[RecordLike]) -> RegistryTables:
    """
    从原始记录构建查找表

    Args:
        records: 原始记录序列（CharacterRecord 或等价的字典）

    Returns:
        只读的查找表
    """
    if records is None:
        logger.error("构建字符表失败: 记录序列为 None")
        raise ValueError("records must not be None")

    tables = RegistryTables()
    skipped = 0

    for record in records:
        record = _to_record(record)
        entry = _make_entry(record)
        if entry is None:
            skipped += 1
            logger.warning(f"跳过无效记录: '{record.spelling}'")
            continue

        # 字形串中的每个字都指向该条目，与前一字相同的跳过
        spelling = record.spelling
        for i, char in enumerate(spelling):
            if i > 0 and char == spelling[i - 1]:
                continue
            tables.add_codepoint(char, entry)

        for concept in entry.concepts:
            for vocab in concept.vocabs:
                tables.add_vocabulary(vocab, entry)

        tables.entries.append(entry)

    _propagate_forms(tables)

    logger.info(
        f"构建字符表完成，共 {len(tables.entries)} 个条目，"
        f"{len(tables.by_vocabulary)} 个词汇，跳过 {skipped} 条记录"
    )
    return tables.freeze()


class CharacterRegistry:
    """字符表管理器"""

    def __init__(self, records: Optional[Iterable[RecordLike]] = None):
        """
        初始化字符表

        Args:
            records: 原始记录序列，为 None 时得到空字符表
        """
        self._tables = RegistryTables().freeze()
        if records is not None:
            self.build(records)

    def build(self, records: Iterable[RecordLike]) -> int:
        """
        重新构建字符表

        新表在局部构建完成后整体替换旧表，读取方不会看到构建中的状态。

        Args:
            records: 原始记录序列

        Returns:
            条目数
        """
        tables = build_tables(records)
        self._tables = tables
        return len(tables.entries)

    @property
    def entries(self) -> Tuple[CanonicalEntry, ...]:
        """按加载顺序排列的全部条目"""
        return self._tables.entries

    def lookup_by_codepoint(self, char: str) -> Tuple[CanonicalEntry, ...]:
        """
        查找字符对应的候选条目

        Args:
            char: 单个字符

        Returns:
            候选条目（按登记顺序），未登记时为空元组
        """
        return self._tables.lookup_by_codepoint(char)

    def lookup_by_vocabulary(self, vocab: str) -> Tuple[CanonicalEntry, ...]:
        """查找词汇对应的候选条目，未登记时为空元组"""
        return self._tables.lookup_by_vocabulary(vocab)

    def is_empty(self) -> bool:
        return not self._tables.entries

    def __len__(self) -> int:
        return len(self._tables.entries)

    def get_statistics(self) -> Dict[str, Any]:
        """
        获取字符表统计信息

        Returns:
            统计信息字典
        """
        tables = self._tables
        ambiguous = sum(1 for v in tables.by_codepoint.values() if len(v) > 1)
        return {
            "entries": len(tables.entries),
            "codepoints": len(tables.by_codepoint),
            "ambiguous_codepoints": ambiguous,
            "vocabularies": len(tables.by_vocabulary),
        }
