"""发件人统计值对象模块"""

from domain.stats.value_objects.message_ref import MessageRef, MessagePage
from domain.stats.value_objects.message_header import MessageHeader, Label
from domain.stats.value_objects.sender_address import SenderAddress
from domain.stats.value_objects.fetch_result import FetchResult, FetchErrorKind
from domain.stats.value_objects.stats_report import (
    PipelineState,
    ResultEntry,
    StatsReport,
)

__all__ = [
    "MessageRef",
    "MessagePage",
    "MessageHeader",
    "Label",
    "SenderAddress",
    "FetchResult",
    "FetchErrorKind",
    "PipelineState",
    "ResultEntry",
    "StatsReport",
]
