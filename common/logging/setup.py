"""日志后端配置"""

import logging
import os
import sys
from typing import Optional

from loguru import logger as loguru_logger

LOG_BACKENDS = ("simple", "loguru")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOGURU_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[logger_name]}</cyan> - <level>{message}</level>"
)

_backend: Optional[str] = None


class InterceptHandler(logging.Handler):
    """把标准 logging 记录转发给 Loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        loguru_logger.bind(logger_name=record.name).opt(
            exception=record.exc_info
        ).log(level, record.getMessage())


def setup_logging(level: Optional[str] = None, backend: Optional[str] = None) -> None:
    """
    配置根日志记录器

    未指定参数时读取 LOG_LEVEL / LOG_BACKEND 环境变量。
    日志输出到 stderr，不干扰 stdout 上的报告输出。

    Args:
        level: 日志级别，如 "INFO"
        backend: 日志后端，simple 或 loguru

    Raises:
        ValueError: 未知的日志后端
    """
    global _backend

    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    backend = (backend or os.getenv("LOG_BACKEND", "simple")).lower()
    if backend not in LOG_BACKENDS:
        raise ValueError(f"Unknown log backend: {backend}. Valid values: {', '.join(LOG_BACKENDS)}")

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    if backend == "loguru":
        loguru_logger.remove()
        loguru_logger.configure(extra={"logger_name": "root"})
        loguru_logger.add(sys.stderr, level=level, format=LOGURU_FORMAT)
        root.addHandler(InterceptHandler())
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    root.setLevel(level)

    # 第三方库的请求日志过于冗长
    logging.getLogger("googleapiclient.discovery_cache").setLevel(logging.ERROR)
    logging.getLogger("googleapiclient.discovery").setLevel(logging.WARNING)

    _backend = backend


def set_log_backend(backend: str) -> None:
    """切换日志后端，保持当前级别"""
    current_level = logging.getLevelName(logging.getLogger().level)
    setup_logging(level=current_level, backend=backend)


def get_log_backend() -> Optional[str]:
    """当前日志后端，未配置时为 None"""
    return _backend


def get_logger(name: str) -> logging.Logger:
    """
    获取日志记录器

    Args:
        name: 记录器名称，通常为 __name__

    Returns:
        标准 logging.Logger（两种后端下接口一致）
    """
    return logging.getLogger(name)
