"""
字符数据文件读写

每行一条记录，字段以 , 或 ， 分隔：
  字段 0 为字形串（简体、繁体、异体依次相连），
  字段 1 为读音，
  字段 2 起为概念组，组内词汇以 ; ； 或 。 分隔，~ 或 ～ 指代本字的繁体。
空行和以 # 开头的行为注释。
"""

import os
import re
from typing import Iterable, List, Optional

from config.settings import settings, DEFAULT_CSV_FILE
from hanzi_collate.utils.logger import logger
from .entry import CanonicalEntry, CharacterRecord
from .registry import CharacterRegistry

# 字段分隔符
FIELD_DELIMITER = re.compile("[,，]")

# 概念内词汇分隔符
VOCAB_DELIMITER = re.compile("[;；。]")


def parse_line(line: str) -> Optional[CharacterRecord]:
    """
    解析一行记录

    Args:
        line: 一行文本（已解码，不含换行）

    Returns:
        原始记录；空行或注释行返回 None
    """
    line = line.rstrip("\r\n")
    if not line or line.startswith("#"):
        return None

    parts = FIELD_DELIMITER.split(line)
    pronunciation = (parts[1] or None) if len(parts) >= 2 else None
    concepts = [
        [v for v in VOCAB_DELIMITER.split(part) if v]
        for part in parts[2:]
    ]

    return CharacterRecord(
        spelling=parts[0],
        pronunciation=pronunciation,
        concepts=[c for c in concepts if c],
    )


def parse_lines(lines: Iterable[str]) -> List[CharacterRecord]:
    """解析多行记录，跳过空行和注释行"""
    records = []
    for line in lines:
        record = parse_line(line)
        if record is not None:
            records.append(record)
    return records


def load_registry(csv_file: Optional[str] = None) -> CharacterRegistry:
    """
    从文件构建字符表

    先找磁盘上的文件，找不到时使用项目内置的数据文件；都不存在时返回空字符表。

    Args:
        csv_file: 数据文件路径，默认使用配置中的路径

    Returns:
        字符表
    """
    csv_file = csv_file or settings.chinese_csv_file

    if os.path.exists(csv_file):
        path = csv_file
    elif os.path.exists(DEFAULT_CSV_FILE):
        logger.warning(f"找不到字符数据文件 {csv_file}，改用内置数据")
        path = DEFAULT_CSV_FILE
    else:
        logger.warning(f"找不到字符数据文件: {csv_file}")
        return CharacterRegistry()

    with open(path, "r", encoding="utf-8-sig") as f:
        records = parse_lines(f)

    registry = CharacterRegistry(records)
    logger.info(f"从 {path} 读取 {len(registry)} 个汉字")
    return registry


def format_entry(entry: CanonicalEntry) -> str:
    """把条目格式化为一行记录"""
    return str(entry)


def save_registry(registry: CharacterRegistry, csv_file: str) -> int:
    """
    按加载顺序把字符表保存为数据文件（UTF-8，CRLF 换行）

    Args:
        registry: 字符表
        csv_file: 输出文件路径

    Returns:
        写出的条目数

    Raises:
        ValueError: 文件名为空
    """
    if not csv_file:
        raise ValueError("empty output file name")

    out_dir = os.path.dirname(csv_file)
    if out_dir and not os.path.exists(out_dir):
        os.makedirs(out_dir, exist_ok=True)

    with open(csv_file, "w", encoding="utf-8", newline="") as f:
        for entry in registry.entries:
            f.write(format_entry(entry))
            f.write("\r\n")

    logger.info(f"已保存 {len(registry)} 个汉字到 {csv_file}")
    return len(registry)
