"""
中央日志配置

提供统一的日志目录常量和 logger 配置。
"""

import sys
from pathlib import Path

from loguru import logger

# 路径常量
PROJECT_ROOT = Path(__file__).parent.parent
RUNTIME_LOGS_DIR = PROJECT_ROOT / "logs"
DEFAULT_LOG_FILE = RUNTIME_LOGS_DIR / "app.log"


def setup_logging(console_level: str = "INFO", log_file: Path | None = None) -> None:
    """重新配置 logger

    控制台输出到 stderr；指定 log_file 时同时写文件（按大小轮转）。
    """
    logger.remove()
    logger.add(sys.stderr, level=console_level.upper())

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            rotation="10 MB",
            retention="7 days",
            level="DEBUG",
        )


__all__ = ["logger", "DEFAULT_LOG_FILE", "RUNTIME_LOGS_DIR", "setup_logging"]
