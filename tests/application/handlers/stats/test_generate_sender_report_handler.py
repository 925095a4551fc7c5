"""GenerateSenderReportHandler 单元测试"""

from unittest.mock import Mock

import pytest

from application.commands.stats.generate_sender_report import GenerateSenderReportCommand
from application.handlers.stats.generate_sender_report_handler import GenerateSenderReportHandler
from application.stats.services.inbox_collector import InboxCollector
from application.stats.services.message_fetcher import MessageFetcher
from application.stats.services.stats_pipeline import StatsPipeline
from domain.stats.services.mail_client import CollectionError, MailAuthenticationError
from domain.stats.value_objects.stats_report import StatsReport
from tests.helpers import FakeMailClient, make_messages


@pytest.fixture
def fake_client():
    """创建包含 6/3/1 封邮件的内存客户端"""
    senders = make_messages({"a@x.com": 6, "b@x.com": 3}, no_sender=1)
    return FakeMailClient(pages=[list(senders)], senders=senders)


@pytest.fixture
def pipeline_factory(fake_client):
    """创建流水线工厂"""

    def factory(**kwargs):
        return StatsPipeline(
            collector=InboxCollector(fake_client),
            fetcher=MessageFetcher(fake_client),
            **kwargs,
        )

    return factory


class TestGenerateSenderReportHandler:
    """生成报告处理器测试"""

    @pytest.mark.asyncio
    async def test_handle_success(self, pipeline_factory):
        """测试成功生成报告"""
        handler = GenerateSenderReportHandler(pipeline_factory=pipeline_factory)

        result = await handler.handle(
            GenerateSenderReportCommand(user="me", query="label:INBOX", threshold=5, max_workers=4)
        )

        assert result.success is True
        assert result.error_code is None
        assert result.report.format_lines() == ["Address : a@x.com Count : 6"]

    @pytest.mark.asyncio
    async def test_handle_passes_threshold_and_workers(self):
        """测试命令参数传递给流水线工厂"""
        pipeline = Mock()
        pipeline.run.return_value = StatsReport(user="me", query="q", threshold=2)
        factory = Mock(return_value=pipeline)
        handler = GenerateSenderReportHandler(pipeline_factory=factory)

        result = await handler.handle(
            GenerateSenderReportCommand(user="me", query="q", threshold=2, max_workers=3)
        )

        factory.assert_called_once_with(threshold=2, max_workers=3)
        pipeline.run.assert_called_once_with("me", "q")
        assert result.success is True
        assert result.message == "Reported 0 senders"

    @pytest.mark.asyncio
    async def test_handle_authentication_failure(self):
        """测试认证失败返回 AUTH_FAILED"""
        pipeline = Mock()
        pipeline.run.side_effect = MailAuthenticationError(user="me", message="invalid_grant")
        handler = GenerateSenderReportHandler(pipeline_factory=Mock(return_value=pipeline))

        result = await handler.handle(GenerateSenderReportCommand(user="me", query="q"))

        assert result.success is False
        assert result.error_code == "AUTH_FAILED"
        assert "invalid_grant" in result.message

    @pytest.mark.asyncio
    async def test_handle_collection_failure(self):
        """测试收集失败返回 COLLECTION_FAILED"""
        pipeline = Mock()
        pipeline.run.side_effect = CollectionError(query="q", message="Backend Error")
        handler = GenerateSenderReportHandler(pipeline_factory=Mock(return_value=pipeline))

        result = await handler.handle(GenerateSenderReportCommand(user="me", query="q"))

        assert result.success is False
        assert result.error_code == "COLLECTION_FAILED"
        assert result.report is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("threshold, max_workers", [(-1, 4), (5, 0)])
    async def test_handle_invalid_arguments(self, threshold, max_workers):
        """测试非法参数返回 INVALID_ARGUMENT 且不创建流水线"""
        factory = Mock()
        handler = GenerateSenderReportHandler(pipeline_factory=factory)

        result = await handler.handle(
            GenerateSenderReportCommand(user="me", query="q", threshold=threshold, max_workers=max_workers)
        )

        assert result.success is False
        assert result.error_code == "INVALID_ARGUMENT"
        factory.assert_not_called()
