"""
应用容器（AppContainer）

管理应用层组件：统计服务、命令/查询处理器。
依赖 InfraContainer 获取基础设施。
"""

from dependency_injector import containers, providers

from application.stats.services.inbox_collector import InboxCollector
from application.stats.services.message_fetcher import MessageFetcher
from application.stats.services.stats_pipeline import StatsPipeline
from application.handlers.stats.generate_sender_report_handler import GenerateSenderReportHandler
from application.handlers.stats.list_labels_handler import ListLabelsHandler


class AppContainer(containers.DeclarativeContainer):
    """应用容器 - 管理应用层服务"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # 依赖基础设施容器
    infra = providers.DependenciesContainer()

    # ============ 应用服务 ============

    inbox_collector = providers.Factory(
        InboxCollector,
        mail_client=infra.mail_client,
        page_size=config.settings.provided.list_page_size,
    )

    message_fetcher = providers.Factory(
        MessageFetcher,
        mail_client=infra.mail_client,
        max_retries=config.settings.provided.fetch_max_retries,
        base_delay=config.settings.provided.fetch_retry_base_delay,
    )

    # 每次运行创建新的流水线（计数器随之新建）
    stats_pipeline = providers.Factory(
        StatsPipeline,
        collector=inbox_collector,
        fetcher=message_fetcher,
        max_workers=config.settings.provided.max_workers,
        threshold=config.settings.provided.min_occurrences_threshold,
        progress_interval=config.settings.provided.progress_interval,
    )

    # ============ 命令处理器 ============

    # 注意: 传递 .provider 作为工厂，处理器按命令参数覆盖 threshold / max_workers
    generate_sender_report_handler = providers.Factory(
        GenerateSenderReportHandler,
        pipeline_factory=stats_pipeline.provider,
    )

    # ============ 查询处理器 ============

    list_labels_handler = providers.Factory(
        ListLabelsHandler,
        mail_client=infra.mail_client,
    )
