"""SRT时间戳模型"""

import re
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from .errors import FieldOutOfRange, FieldParseError, FormatMismatch

# 小时组放宽到两位以上，超宽由范围校验报告
TIMESTAMP_PATTERN = re.compile(r"([0-9]{2,}):([0-9]{2}):([0-9]{2}),([0-9]{3})")

# 按校验顺序排列: (字段名, 上限)
FIELD_LIMITS: Tuple[Tuple[str, int], ...] = (
    ("hours", 99),
    ("minutes", 59),
    ("seconds", 59),
    ("milliseconds", 999),
)

MS_PER_HOUR = 3_600_000
MS_PER_MINUTE = 60_000
MS_PER_SECOND = 1_000


class Timestamp(BaseModel):
    """字幕时间戳（时:分:秒,毫秒）

    解析时小时限定在 0-99；正向偏移后小时可以超过 99，渲染时自动加宽。
    """

    model_config = ConfigDict(validate_assignment=True)

    # 不设上限: 解析限定 0-99，正向偏移后允许超过 99
    hours: int = Field(0, ge=0, description="小时")
    minutes: int = Field(0, ge=0, le=59, description="分钟")
    seconds: int = Field(0, ge=0, le=59, description="秒")
    milliseconds: int = Field(0, ge=0, le=999, description="毫秒")

    @classmethod
    def zero(cls) -> "Timestamp":
        """00:00:00,000"""
        return cls(hours=0, minutes=0, seconds=0, milliseconds=0)

    @classmethod
    def parse(cls, text: str) -> "Timestamp":
        """解析 HH:MM:SS,mmm 格式的时间戳

        Raises:
            FormatMismatch: 文本整体不符合格式
            FieldOutOfRange: 某字段超出取值范围
            FieldParseError: 某字段无法解析为整数
        """
        match = TIMESTAMP_PATTERN.fullmatch(text)
        if match is None:
            raise FormatMismatch(text)

        values = {}
        for (field, limit), digits in zip(FIELD_LIMITS, match.groups()):
            try:
                value = int(digits)
            except ValueError:
                raise FieldParseError(field, text) from None
            if field == "hours" and len(digits) != 2:
                raise FieldOutOfRange(field, text)
            if value > limit:
                raise FieldOutOfRange(field, text)
            values[field] = value

        return cls(**values)

    @property
    def total_milliseconds(self) -> int:
        """换算为总毫秒数"""
        return (
            self.hours * MS_PER_HOUR
            + self.minutes * MS_PER_MINUTE
            + self.seconds * MS_PER_SECOND
            + self.milliseconds
        )

    def apply_offset(self, offset_ms: int) -> "Timestamp":
        """原地偏移 offset_ms 毫秒，结果不大于零时归零"""
        total = self.total_milliseconds + offset_ms
        if total <= 0:
            total = 0

        hours, remaining = divmod(total, MS_PER_HOUR)
        minutes, remaining = divmod(remaining, MS_PER_MINUTE)
        seconds, milliseconds = divmod(remaining, MS_PER_SECOND)

        self.hours = hours
        self.minutes = minutes
        self.seconds = seconds
        self.milliseconds = milliseconds
        return self

    def render(self) -> str:
        """渲染为 HH:MM:SS,mmm"""
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d},{self.milliseconds:03d}"

    def __str__(self) -> str:
        return self.render()
