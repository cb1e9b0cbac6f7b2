"""日志配置模块"""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .config import settings


class Logger:
    """日志管理器"""

    def __init__(self, name: str = "srt_shift") -> None:
        self.console = Console(stderr=True)
        self._setup_logger(name)

    def _setup_logger(self, name: str) -> None:
        """设置日志配置"""
        # 创建日志目录
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # 文件处理器
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

        # 控制台处理器
        console_handler = RichHandler(
            console=self.console,
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
        self.logger.addHandler(file_handler)
        self.logger.addHandler(console_handler)
        self.logger.propagate = False

    def info(self, message: str) -> None:
        """记录信息日志"""
        self.logger.info(message)

    def error(self, message: str) -> None:
        """记录错误日志"""
        self.logger.error(message)

    def warning(self, message: str) -> None:
        """记录警告日志"""
        self.logger.warning(message)

    def debug(self, message: str) -> None:
        """记录调试日志"""
        self.logger.debug(message)


# 全局日志实例
logger = Logger()
