"""字形转换：把文本统一转为繁体或简体"""
import os
from typing import List, Optional
from loguru import logger

from ..registry.entry import CanonicalEntry
from .resolver import FormResolver, check_text


def project_entries(text: str, entries: List[Optional[CanonicalEntry]],
                    traditional: bool) -> str:
    """按解析结果输出繁体或简体，无映射的字保持原样"""
    chars = []
    for char, entry in zip(text, entries):
        if entry is None:
            chars.append(char)
        elif traditional:
            chars.append(entry.traditional)
        else:
            chars.append(entry.simplified)
    return "".join(chars)


class FormConverter:
    """字形转换器"""

    def __init__(self, resolver: FormResolver):
        self.resolver = resolver

    def to_form(self, text: str, traditional: bool) -> str:
        """
        转换文本字形

        Args:
            text: 输入文本
            traditional: True 转为繁体，否则转为简体

        Returns:
            转换后的文本，忽略字形时与输入相同
        """
        entries = self.resolver.resolve(text)
        return project_entries(text, entries, traditional)

    def to_traditional(self, text: str) -> str:
        return self.to_form(text, True)

    def to_simplified(self, text: str) -> str:
        return self.to_form(text, False)

    def convert_file(self, in_file: str, out_file: str, traditional: bool) -> int:
        """
        逐行转换文件（UTF-8），输出行以 CRLF 结尾

        Args:
            in_file: 输入文件路径
            out_file: 输出文件路径
            traditional: True 转为繁体，否则转为简体

        Returns:
            转换的行数

        Raises:
            ValueError: 文件名为空
        """
        if not in_file:
            raise ValueError("empty input file name")
        if not out_file:
            raise ValueError("empty output file name")

        out_dir = os.path.dirname(out_file)
        if out_dir and not os.path.exists(out_dir):
            os.makedirs(out_dir, exist_ok=True)

        count = 0
        with open(in_file, "r", encoding="utf-8") as fin, \
                open(out_file, "w", encoding="utf-8", newline="") as fout:
            for line in fin:
                line = line.rstrip("\r\n")
                fout.write(self.to_form(line, traditional))
                fout.write("\r\n")
                count += 1

        target = "繁体" if traditional else "简体"
        logger.info(f"转换完成: {in_file} -> {out_file}（{target}），共 {count} 行")
        return count
