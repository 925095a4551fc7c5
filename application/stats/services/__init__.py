"""发件人统计应用服务模块"""

from application.stats.services.inbox_collector import InboxCollector
from application.stats.services.message_fetcher import MessageFetcher
from application.stats.services.stats_pipeline import StatsPipeline

__all__ = [
    "InboxCollector",
    "MessageFetcher",
    "StatsPipeline",
]
