"""
字形解析与转换模块

用词汇上下文把繁体、简体、异体字解析为同一规范条目，并据此转换字形。
"""

from .resolver import FormResolver, resolve_entries, iter_windows
from .converter import FormConverter, project_entries

__all__ = [
    "FormResolver",
    "FormConverter",
    "resolve_entries",
    "iter_windows",
    "project_entries"
]
