"""
Big5 编码检测

Big5 为双字节编码：首字节 0xA1-0xFE，次字节 0x40-0x7E 或 0xA1-0xFE。
"""


def _is_lead_byte(b: int) -> bool:
    return 0xA1 <= b <= 0xFE


def _is_trail_byte(b: int) -> bool:
    return 0x40 <= b <= 0x7E or 0xA1 <= b <= 0xFE


def detect_big5(buf: bytes, start: int = 0) -> int:
    """
    从 start 起检测连续的 Big5 双字节，遇到第一个非 Big5 字节对即停止

    Args:
        buf: 字节串
        start: 起始位置

    Returns:
        符合 Big5 编码的字节数（偶数），没有时为 0
    """
    if not buf or len(buf) < 2:
        return 0
    i = start
    while i < len(buf) - 1:
        if not _is_lead_byte(buf[i]) or not _is_trail_byte(buf[i + 1]):
            break
        i += 2
    return max(i - start, 0)


def count_big5(buf: bytes, start: int = 0) -> int:
    """
    统计从 start 到末尾的 Big5 双字节字符数

    首字节不符时前进一个字节，次字节不符时跳过整个字节对。
    """
    if not buf or len(buf) < 2:
        return 0
    count = 0
    i = start
    while i < len(buf) - 1:
        if not _is_lead_byte(buf[i]):
            i += 1
            continue
        if _is_trail_byte(buf[i + 1]):
            count += 1
        i += 2
    return count
