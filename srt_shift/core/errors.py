"""字幕时间轴偏移的异常层级"""

from typing import Optional


class SrtShiftError(Exception):
    """所有偏移错误的基类"""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TimestampParseError(SrtShiftError):
    """时间戳解析失败

    `text` 保存原始的时间戳文本，`field` 为出错字段（整体格式错误时为 None）。
    """

    def __init__(self, message: str, text: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.text = text
        self.field = field


class FormatMismatch(TimestampParseError):
    """文本不符合 HH:MM:SS,mmm 格式"""

    def __init__(self, text: str) -> None:
        super().__init__(f"时间戳不符合SRT格式: {text}", text)


class FieldOutOfRange(TimestampParseError):
    """字段数字合法但超出取值范围"""

    def __init__(self, field: str, text: str) -> None:
        super().__init__(f"时间戳{field}字段超出范围: {text}", text, field)


class FieldParseError(TimestampParseError):
    """字段无法解析为整数"""

    def __init__(self, field: str, text: str) -> None:
        super().__init__(f"时间戳{field}字段无法解析: {text}", text, field)


class RangeLineError(SrtShiftError):
    """时间轴行已匹配但其中的时间戳无法解析"""

    def __init__(self, line: str, cause: TimestampParseError) -> None:
        super().__init__(f"时间轴行解析失败: {line} ({cause.message})")
        self.line = line


class SubtitleReadError(SrtShiftError):
    """字幕文件无法按指定编码解码"""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"无法读取字幕文件: {path}, {reason}")
        self.path = path


class SameFileError(SrtShiftError):
    """输入输出为同一文件（不支持原地修改）"""

    def __init__(self, path: str) -> None:
        super().__init__(f"输出文件不能与输入文件相同: {path}")
        self.path = path
