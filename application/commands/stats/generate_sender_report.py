"""生成发件人统计报告命令"""

from dataclasses import dataclass
from typing import Optional

from domain.stats.value_objects.stats_report import StatsReport


@dataclass
class GenerateSenderReportCommand:
    """
    生成发件人统计报告命令

    Attributes:
        user: 目标邮箱（"me" 表示已认证用户）
        query: 查询表达式，如 "label:INBOX"
        threshold: 最小出现次数阈值（严格大于才输出）
        max_workers: 并发获取线程数
    """

    user: str
    query: str
    threshold: int = 5
    max_workers: int = 32


@dataclass
class GenerateSenderReportResult:
    """
    生成发件人统计报告结果

    Attributes:
        success: 是否成功（认证和收集均成功即为成功）
        report: 统计报告（成功时）
        message: 消息
        error_code: 错误码（失败时）：INVALID_ARGUMENT / AUTH_FAILED / COLLECTION_FAILED
    """

    success: bool
    report: Optional[StatsReport] = None
    message: str = ""
    error_code: Optional[str] = None
