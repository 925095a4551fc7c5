"""
日志模块

支持两种后端：
- simple: 标准 logging（无额外依赖）
- loguru: 标准 logging 记录转发到 Loguru（彩色输出）

用法：
    from common.logging import setup_logging, get_logger

    setup_logging(level="INFO", backend="loguru")
    logger = get_logger(__name__)
"""

from common.logging.setup import (
    LOG_BACKENDS,
    InterceptHandler,
    get_log_backend,
    get_logger,
    set_log_backend,
    setup_logging,
)

__all__ = [
    "LOG_BACKENDS",
    "InterceptHandler",
    "get_log_backend",
    "get_logger",
    "set_log_backend",
    "setup_logging",
]
