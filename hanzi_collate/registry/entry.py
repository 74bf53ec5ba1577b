"""
字符条目数据模型

CanonicalEntry 表示一个规范汉字（繁体、简体及异体字形），
Concept 表示与该字相关的一组词汇，CharacterRecord 是构建字符表用的原始记录。
"""

from typing import Any, List, Optional, Tuple
from dataclasses import dataclass, field
from pydantic import BaseModel, Field


@dataclass(frozen=True)
class Concept:
    """概念：一组同义或相关的词汇"""
    vocabs: Tuple[str, ...]

    def __str__(self) -> str:
        return ";".join(self.vocabs)


@dataclass(frozen=True, eq=False)
class CanonicalEntry:
    """
    规范汉字条目

    条目一经构建不再修改。比较与哈希均基于对象身份：
    两个条目相同当且仅当它们是同一个共享实例，
    字段完全一致但分别构建的条目不视为同一个字。
    """
    traditional: str                                        # 繁体字
    simplified: str                                         # 简体字
    variants: Tuple[str, ...] = ()                          # 异体字
    pronunciation: Optional[Any] = None                     # 读音（不透明数据）
    concepts: Tuple[Concept, ...] = field(default_factory=tuple)  # 相关概念

    @property
    def forms(self) -> Tuple[str, ...]:
        """全部字形：简体、繁体、异体（保持记录中的顺序）"""
        return (self.simplified, self.traditional) + self.variants

    def __str__(self) -> str:
        parts = ["".join(self.forms)]
        if self.pronunciation is not None or self.concepts:
            parts.append("" if self.pronunciation is None else str(self.pronunciation))
        parts.extend(str(c) for c in self.concepts)
        return ",".join(parts)

    def __repr__(self) -> str:
        return f"CanonicalEntry({self.simplified}{self.traditional}{''.join(self.variants)})"


class CharacterRecord(BaseModel):
    """构建字符表用的原始记录"""
    spelling: str = Field(..., description="字形串：简体、繁体、异体依次相连")
    pronunciation: Optional[str] = Field(None, description="读音（不透明数据）")
    concepts: List[List[str]] = Field(default_factory=list, description="概念组，每组为一个词汇列表")
