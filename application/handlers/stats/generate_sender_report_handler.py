"""生成发件人统计报告处理器"""

import asyncio
import logging
from typing import Callable, Optional

from application.commands.stats.generate_sender_report import (
    GenerateSenderReportCommand,
    GenerateSenderReportResult,
)
from application.stats.services.stats_pipeline import StatsPipeline
from domain.stats.services.mail_client import CollectionError, MailAuthenticationError


class GenerateSenderReportHandler:
    """
    生成发件人统计报告处理器

    处理 GenerateSenderReportCommand：按命令参数创建流水线，
    在线程中执行阻塞的统计过程，并把致命错误转换为失败结果。
    """

    def __init__(
        self,
        pipeline_factory: Callable[..., StatsPipeline],
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化处理器

        Args:
            pipeline_factory: 流水线工厂，接受 threshold / max_workers 关键字参数
            logger: 可选的日志记录器
        """
        self._pipeline_factory = pipeline_factory
        self._logger = logger or logging.getLogger(__name__)

    async def handle(self, command: GenerateSenderReportCommand) -> GenerateSenderReportResult:
        """
        处理命令

        Args:
            command: 生成报告命令

        Returns:
            GenerateSenderReportResult: 处理结果
        """
        if command.threshold < 0:
            return GenerateSenderReportResult(
                success=False,
                message=f"Threshold cannot be negative: {command.threshold}",
                error_code="INVALID_ARGUMENT",
            )
        if command.max_workers < 1:
            return GenerateSenderReportResult(
                success=False,
                message=f"Worker count must be at least 1: {command.max_workers}",
                error_code="INVALID_ARGUMENT",
            )

        pipeline = self._pipeline_factory(
            threshold=command.threshold,
            max_workers=command.max_workers,
        )

        # run 是阻塞方法，在 executor 中执行避免阻塞事件循环
        loop = asyncio.get_running_loop()
        try:
            report = await loop.run_in_executor(
                None, pipeline.run, command.user, command.query
            )
        except MailAuthenticationError as e:
            self._logger.error(f"Authentication failed: {e}")
            return GenerateSenderReportResult(
                success=False,
                message=str(e),
                error_code="AUTH_FAILED",
            )
        except CollectionError as e:
            self._logger.error(f"Message collection failed: {e}")
            return GenerateSenderReportResult(
                success=False,
                message=str(e),
                error_code="COLLECTION_FAILED",
            )

        return GenerateSenderReportResult(
            success=True,
            report=report,
            message=f"Reported {len(report.entries)} senders",
        )
