"""日志配置模块

统一配置标准库 logging：控制台输出，可选写入文件。
各模块通过 get_logger(__name__) 获取日志器。
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from ..config.settings import settings

LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """配置根日志器，重复调用只生效一次"""
    global _configured
    root = logging.getLogger()
    if _configured:
        return root

    level_name = (level or settings.LOG_LEVEL).upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    log_file = log_file if log_file is not None else settings.LOG_FILE
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    _configured = True
    return root


def get_logger(name: str = "troupe_api") -> logging.Logger:
    """获取模块日志器"""
    return logging.getLogger(name)
