"""
字形解析

把文本中的每个字映射到唯一的规范条目。一个字对应多个条目时，
用覆盖该位置的词汇窗口消歧：较长、较具体的词汇优先。
"""

from typing import Iterator, List, Optional, Sequence, Tuple
from loguru import logger

from ..registry.entry import CanonicalEntry

# 词汇窗口长度，按优先级排列
WINDOW_LENGTHS = (4, 3, 2)


def _window_starts(i: int, length: int) -> List[int]:
    """位置 i 处长度为 length 的窗口起点，按尝试顺序排列"""
    starts = [i - 1]
    starts.extend(s for s in range(i - length + 1, i) if s != i - 1)
    starts.append(i)
    return starts


def iter_windows(text: str, i: int) -> Iterator[Tuple[int, str]]:
    """
    列出覆盖位置 i 的词汇窗口

    长度依次为 4、3、2；同一长度内先试以 i-1 起始的窗口，
    再试其余左侧起点，最后试以 i 起始的窗口。越界的窗口略去。

    Yields:
        (起点, 子串)
    """
    n = len(text)
    for length in WINDOW_LENGTHS:
        for start in _window_starts(i, length):
            if start < 0 or start + length > n:
                continue
            yield start, text[start:start + length]


def _disambiguate(lookup, text: str, i: int,
                  candidates: Sequence[CanonicalEntry]) -> CanonicalEntry:
    matched: Tuple[CanonicalEntry, ...] = ()
    for _, vocab in iter_windows(text, i):
        matched = lookup.lookup_by_vocabulary(vocab)
        if matched:
            logger.debug(f"{text[i]}/{vocab} => {matched[0]}")
            break

    for entry in matched:
        for candidate in candidates:
            if candidate is entry:
                return candidate

    # 没有词汇命中，或命中的条目与候选无交集
    return candidates[0]


def resolve_entries(lookup, text: str) -> List[Optional[CanonicalEntry]]:
    """
    对任何提供 lookup_by_codepoint / lookup_by_vocabulary 的查找表解析文本

    Args:
        lookup: 字符表或构建中的查找表
        text: 输入文本

    Returns:
        与输入逐字对应的条目列表，无映射处为 None
    """
    resolved: List[Optional[CanonicalEntry]] = []
    for i, char in enumerate(text):
        candidates = lookup.lookup_by_codepoint(char)
        if not candidates:
            resolved.append(None)
        elif len(candidates) == 1:
            resolved.append(candidates[0])
        else:
            resolved.append(_disambiguate(lookup, text, i, candidates))
    return resolved


def check_text(text, name: str = "text") -> str:
    """
    检查输入文本

    Raises:
        ValueError: 输入为 None 或不是字符串
    """
    if text is None:
        logger.error(f"无效参数: {name} 为 None")
        raise ValueError(f"{name} must not be None")
    if not isinstance(text, str):
        logger.error(f"无效参数: {name} 类型为 {type(text).__name__}")
        raise ValueError(f"{name} must be a str, got {type(text).__name__}")
    return text


class FormResolver:
    """字形解析器"""

    def __init__(self, registry):
        """
        初始化解析器

        Args:
            registry: 字符表（CharacterRegistry）
        """
        self.registry = registry

    def resolve(self, text: str) -> List[Optional[CanonicalEntry]]:
        """
        解析文本中每个字对应的规范条目

        Args:
            text: 输入文本

        Returns:
            与输入逐字对应的条目列表，无映射处为 None

        Raises:
            ValueError: 输入为 None
        """
        check_text(text)
        return resolve_entries(self.registry, text)
