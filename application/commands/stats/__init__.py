"""发件人统计命令模块"""

from application.commands.stats.generate_sender_report import (
    GenerateSenderReportCommand,
    GenerateSenderReportResult,
)

__all__ = [
    "GenerateSenderReportCommand",
    "GenerateSenderReportResult",
]
