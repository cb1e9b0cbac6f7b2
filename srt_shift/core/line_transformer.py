"""时间轴行偏移模块"""

import re
from typing import Iterable, List, Optional

from ..utils.logger import logger
from .errors import RangeLineError, TimestampParseError
from .timestamp import Timestamp

_TS = r"[0-9]{2}:[0-9]{2}:[0-9]{2},[0-9]{3}"

# 时间轴行: 开始 --> 结束，箭头两侧允许任意空白
RANGE_LINE_PATTERN = re.compile(rf"({_TS})\s*-->\s*({_TS})")

ARROW = " --> "


def _parse_endpoint(text: str, line: str) -> Timestamp:
    try:
        return Timestamp.parse(text)
    except TimestampParseError as e:
        # 正则只保证格式，字段越界同样中止本次处理
        raise RangeLineError(line, e) from e


def _shift_range(line: str, offset_ms: int) -> Optional[str]:
    """偏移时间轴行，非时间轴行返回 None"""
    match = RANGE_LINE_PATTERN.fullmatch(line)
    if match is None:
        return None

    start = _parse_endpoint(match.group(1), line).apply_offset(offset_ms)
    end = _parse_endpoint(match.group(2), line).apply_offset(offset_ms)

    return f"{start.render()}{ARROW}{end.render()}"


def transform_line(line: str, offset_ms: int) -> str:
    """偏移单行中的时间轴，非时间轴行原样返回"""
    shifted = _shift_range(line, offset_ms)
    return line if shifted is None else shifted


def transform_lines(lines: Iterable[str], offset_ms: int) -> List[str]:
    """逐行偏移，输出行数与顺序与输入一致"""
    return [transform_line(line, offset_ms) for line in lines]


class LineTransformer:
    """按固定偏移量处理字幕行"""

    def __init__(self, offset_ms: int) -> None:
        self.offset_ms = offset_ms
        self.shifted_count = 0

    def transform(self, line: str) -> str:
        """处理单行并统计被偏移的时间轴行"""
        shifted = _shift_range(line, self.offset_ms)
        if shifted is None:
            return line

        self.shifted_count += 1
        logger.debug(f"时间轴偏移: {line} => {shifted}")
        return shifted

    def transform_all(self, lines: Iterable[str]) -> List[str]:
        """处理全部字幕行"""
        return [self.transform(line) for line in lines]
