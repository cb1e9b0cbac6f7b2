"""配置管理模块"""

import os
from pathlib import Path


class Settings:
    """应用配置"""

    def __init__(self, env_file: str = ".env"):
        # 日志配置
        self.log_level: str = "INFO"
        self.log_file: str = "./logs/srt_shift.log"

        # 字幕文件配置
        self.encoding: str = "utf-8"
        self.default_offset_ms: int = 0  # 命令行未指定偏移量时使用

        self._load_env(env_file)
        self._ensure_directories()

    def _load_env(self, env_file: str) -> None:
        """加载环境变量"""
        if os.path.exists(env_file):
            with open(env_file, "r", encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith("#") and "=" in line:
                        key, value = line.split("=", 1)
                        key = key.strip().lower()
                        value = value.strip()

                        # 映射环境变量到属性
                        attr_mapping = {
                            "log_level": "log_level",
                            "log_file": "log_file",
                            "srt_encoding": "encoding",
                            "default_offset_ms": "default_offset_ms",
                        }

                        attr_name = attr_mapping.get(key)
                        if attr_name:
                            if key.endswith("_ms"):
                                try:
                                    setattr(self, attr_name, int(value))
                                except ValueError:
                                    pass
                            else:
                                setattr(self, attr_name, value)

    def _ensure_directories(self) -> None:
        """确保目录存在"""
        Path(self.log_file).parent.mkdir(parents=True, exist_ok=True)


# 全局配置实例
settings = Settings()
