"""主程序入口"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .core.errors import SameFileError, SrtShiftError, SubtitleReadError
from .core.line_transformer import LineTransformer
from .utils.config import settings
from .utils.logger import logger


def split_lines(content: str) -> List[str]:
    """按换行拆分文件内容，末尾换行不产生空行"""
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class SubtitleShifter:
    """SRT字幕时间轴偏移工具"""

    def __init__(self, encoding: Optional[str] = None) -> None:
        self.console = Console()
        self.error_console = Console(stderr=True)
        self.encoding = encoding or settings.encoding

    def read_lines(self, path: Path) -> List[str]:
        """读取字幕文件的全部行"""
        try:
            content = path.read_text(encoding=self.encoding)
        except (UnicodeError, LookupError) as e:
            # 解码失败或编码名无效都按读取失败处理
            raise SubtitleReadError(str(path), str(e)) from e
        return split_lines(content)

    def shift_file(self, input_path: Path, output_path: Path, offset_ms: int) -> int:
        """偏移字幕文件并写入新文件，返回被偏移的时间轴行数"""
        if input_path.resolve() == output_path.resolve():
            raise SameFileError(str(input_path))

        logger.info(f"开始偏移字幕: {input_path} ({offset_ms:+d} ms)")
        lines = self.read_lines(input_path)

        # 全部转换成功后才写文件
        transformer = LineTransformer(offset_ms)
        output_lines = transformer.transform_all(lines)

        output_path.write_text("\n".join(output_lines), encoding=self.encoding, newline="\n")
        logger.info(
            f"字幕偏移完成: {output_path}，共 {len(lines)} 行，{transformer.shifted_count} 条时间轴"
        )
        return transformer.shifted_count

    def run(self, input_path: Path, output_path: Path, offset_ms: int) -> int:
        """执行偏移，返回进程退出码"""
        try:
            shifted = self.shift_file(input_path, output_path, offset_ms)
        except (SrtShiftError, OSError) as e:
            logger.error(f"字幕偏移失败: {str(e)}")
            self.error_console.print(
                f"❌ Application error: {str(e)}", style="red", markup=False, soft_wrap=True
            )
            return 1

        self.console.print(
            f"✅ 已偏移 {shifted} 条时间轴: {output_path}", style="green", markup=False
        )
        return 0


def build_parser() -> argparse.ArgumentParser:
    """构建命令行参数解析器"""
    parser = argparse.ArgumentParser(description="SRT字幕时间轴偏移工具")
    parser.add_argument("input_filepath", type=Path, help="输入字幕文件")
    parser.add_argument("output_filepath", type=Path, help="输出字幕文件")
    parser.add_argument(
        "offset_ms",
        type=int,
        nargs="?",
        default=None,
        help="偏移毫秒数，可为负数（默认取配置 DEFAULT_OFFSET_MS）",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """解析参数并运行，返回退出码"""
    args = build_parser().parse_args(argv)
    offset_ms = args.offset_ms if args.offset_ms is not None else settings.default_offset_ms

    app = SubtitleShifter()
    return app.run(args.input_filepath, args.output_filepath, offset_ms)


def cli() -> None:
    """命令行入口"""
    sys.exit(main())


if __name__ == "__main__":
    cli()
