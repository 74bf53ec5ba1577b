"""
中文数字十进制化

把含 十、百、千、万、亿 的中文数字改写为十进制数字串，使多位数可以逐位比较。
X、Y、Z 为数字时的改写规则：

    十Y    -> 1Y
    X十    -> X0
    X十Y   -> XY
    X百    -> X00
    X百Y十 -> XY0
    X百Y十Z -> XYZ

只由幂字组成、不含数字的串保持不变。结果仅用于比较，不作为展示用的转换结果。
"""

from typing import List

from .digits import is_digit, is_power10_chinese, to_power10


def _rewrite_run(run: str, out: List[str]):
    """改写一段数字串：首位幂字换成幂次，末位幂字换成若干 0，中间幂字省略"""
    last = len(run) - 1
    for j, char in enumerate(run):
        if not is_power10_chinese(char):
            out.append(char)
        elif j == 0:
            out.append(str(to_power10(char)))
        elif j == last:
            out.append("0" * to_power10(char))


def decimalize(text: str) -> str:
    """
    把文本中的中文数字转为十进制格式

    Args:
        text: 可能含中文数字的文本

    Returns:
        中文数字改写为十进制格式后的新文本
    """
    out: List[str] = []
    n = len(text)
    copied = 0  # text[:copied] 已输出
    i = 0

    while i < n:
        if not is_power10_chinese(text[i]):
            i += 1
            continue

        has_digit = False

        # 向前找连续的数字
        start = i
        while start > copied and is_digit(text[start - 1]):
            has_digit = True
            start -= 1

        # 向后找连续的数字或幂字
        end = i + 1
        while end < n:
            if is_digit(text[end]):
                has_digit = True
            elif not is_power10_chinese(text[end]):
                break
            end += 1

        out.append(text[copied:start])
        if has_digit:
            _rewrite_run(text[start:end], out)
        else:
            out.append(text[start:end])

        copied = end
        i = end

    out.append(text[copied:])
    return "".join(out)
