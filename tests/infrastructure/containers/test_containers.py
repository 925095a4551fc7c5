"""依赖注入容器测试"""

from unittest.mock import Mock

from application.handlers.stats.generate_sender_report_handler import GenerateSenderReportHandler
from application.handlers.stats.list_labels_handler import ListLabelsHandler
from application.stats.services.stats_pipeline import StatsPipeline
from infrastructure.config.settings import Settings
from infrastructure.containers import bootstrap
from infrastructure.gmail.services.gmail_mail_client import GmailMailClient


class TestContainers:
    """容器装配测试"""

    def test_pipeline_uses_settings(self):
        """测试流水线使用配置值"""
        boot = bootstrap(Settings(_env_file=None, max_workers=4, min_occurrences_threshold=2))

        pipeline = boot.app.stats_pipeline()

        assert isinstance(pipeline, StatsPipeline)
        assert pipeline.max_workers == 4
        assert pipeline.threshold == 2

    def test_mail_client_is_singleton(self):
        """测试邮件客户端为单例"""
        boot = bootstrap(Settings(_env_file=None))

        assert isinstance(boot.infra.mail_client(), GmailMailClient)
        assert boot.infra.mail_client() is boot.infra.mail_client()

    def test_handlers_resolve_with_overridden_client(self):
        """测试覆盖邮件客户端后处理器可以创建"""
        boot = bootstrap(Settings(_env_file=None))
        boot.infra.mail_client.override(Mock())

        assert isinstance(boot.app.generate_sender_report_handler(), GenerateSenderReportHandler)
        assert isinstance(boot.app.list_labels_handler(), ListLabelsHandler)

    def test_pipeline_factory_accepts_overrides(self):
        """测试流水线工厂可以覆盖阈值与线程数"""
        boot = bootstrap(Settings(_env_file=None))
        boot.infra.mail_client.override(Mock())

        handler = boot.app.generate_sender_report_handler()
        pipeline = handler._pipeline_factory(threshold=9, max_workers=3)

        assert isinstance(pipeline, StatsPipeline)
        assert pipeline.threshold == 9
        assert pipeline.max_workers == 3
