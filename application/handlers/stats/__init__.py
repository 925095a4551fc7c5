"""发件人统计处理器模块"""

from application.handlers.stats.generate_sender_report_handler import (
    GenerateSenderReportHandler,
)
from application.handlers.stats.list_labels_handler import ListLabelsHandler

__all__ = [
    "GenerateSenderReportHandler",
    "ListLabelsHandler",
]
