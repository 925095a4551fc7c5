"""
基础设施容器（InfraContainer）

管理所有基础设施组件：Gmail 认证、Gmail 客户端等。
依赖 ConfigContainer 获取配置。
"""

from dependency_injector import containers, providers

from infrastructure.gmail.auth.gmail_authenticator import GmailAuthenticator
from infrastructure.gmail.services.gmail_mail_client import GmailMailClient


class InfraContainer(containers.DeclarativeContainer):
    """基础设施容器 - 管理技术实现"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # ============ 认证 ============

    # Gmail OAuth 认证器（单例，凭据在进程内缓存）
    gmail_authenticator = providers.Singleton(
        GmailAuthenticator,
        client_secrets_file=config.settings.provided.gmail_client_secrets_file,
        token_file=config.settings.provided.gmail_token_file,
        scopes=config.settings.provided.gmail_scopes,
        oauth_port=config.settings.provided.gmail_oauth_port,
    )

    # ============ 邮件客户端 ============

    # Gmail 客户端（单例，内部按线程持有 service 实例）
    mail_client = providers.Singleton(
        GmailMailClient,
        authenticator=gmail_authenticator,
    )
