"""主程序入口"""
import os
import sys
from typing import List, Optional

# 添加项目根目录到 Python 路径
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from hanzi_collate.helper import HanziHelper
from hanzi_collate.collation import ComparisonPolicy
from hanzi_collate.utils.logger import logger
from config.settings import settings


class HanziCollateApp:
    """汉字字形转换与自然排序工具"""

    def __init__(self, csv_file: Optional[str] = None):
        """
        初始化

        Args:
            csv_file: 字符数据文件，默认使用配置中的路径
        """
        self.csv_file = csv_file or settings.chinese_csv_file
        self.helper = None

    def initialize(self):
        """构建字符表"""
        logger.info(f"加载字符数据: {self.csv_file}")
        self.helper = HanziHelper.from_file(self.csv_file)
        stats = self.helper.registry.get_statistics()
        logger.info(f"字符表统计: {stats}")

    def convert(self, in_file: str, out_file: str, traditional: bool) -> int:
        """逐行转换文件字形"""
        return self.helper.converter.convert_file(in_file, out_file, traditional)

    def sort_lines(self, in_file: str, policy: ComparisonPolicy) -> List[str]:
        """按自然顺序排序文件中的各行"""
        with open(in_file, "r", encoding="utf-8") as f:
            lines = [line.rstrip("\r\n") for line in f]
        return self.helper.sort_natural(lines, policy)

    def compare(self, s1: str, s2: str, policy: ComparisonPolicy) -> int:
        return self.helper.compare_natural(s1, s2, policy)


def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    import argparse

    policies = [p.value for p in ComparisonPolicy]

    # 解析命令行参数
    parser = argparse.ArgumentParser(description="繁简汉字转换与中文自然排序工具")
    parser.add_argument("--csv", help="字符数据文件路径")
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert_parser = subparsers.add_parser("convert", help="逐行转换文件字形")
    convert_parser.add_argument("--input", "-i", required=True, help="输入文件")
    convert_parser.add_argument("--output", "-o", required=True, help="输出文件")
    convert_parser.add_argument("--to", choices=["traditional", "simplified"],
                                default="traditional", help="目标字形")

    sort_parser = subparsers.add_parser("sort", help="按自然顺序排序文件各行")
    sort_parser.add_argument("--input", "-i", required=True, help="输入文件")
    sort_parser.add_argument("--output", "-o", help="输出文件，默认输出到标准输出")
    sort_parser.add_argument("--policy", "-p", type=str.upper, choices=policies,
                             default=settings.default_policy, help="比较策略")

    compare_parser = subparsers.add_parser("compare", help="自然比较两个字符串")
    compare_parser.add_argument("first", help="第一个字符串")
    compare_parser.add_argument("second", help="第二个字符串")
    compare_parser.add_argument("--policy", "-p", type=str.upper, choices=policies,
                                default=settings.default_policy, help="比较策略")

    args = parser.parse_args(argv)

    app = HanziCollateApp(csv_file=args.csv)
    try:
        app.initialize()

        if args.command == "convert":
            count = app.convert(args.input, args.output, args.to == "traditional")
            print(f"已转换 {count} 行: {args.output}")

        elif args.command == "sort":
            lines = app.sort_lines(args.input, ComparisonPolicy.parse(args.policy))
            if args.output:
                with open(args.output, "w", encoding="utf-8") as f:
                    f.write("\n".join(lines))
                    f.write("\n")
                print(f"已排序 {len(lines)} 行: {args.output}")
            else:
                for line in lines:
                    print(line)

        elif args.command == "compare":
            result = app.compare(args.first, args.second, ComparisonPolicy.parse(args.policy))
            sign = "<" if result < 0 else (">" if result > 0 else "=")
            print(f"{args.first} {sign} {args.second}")

    except (OSError, ValueError) as e:
        logger.error(f"执行失败: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
