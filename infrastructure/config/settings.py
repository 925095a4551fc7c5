"""
应用配置管理

使用 pydantic-settings 管理环境变量和配置
"""

from pathlib import Path
from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    应用配置类

    自动从环境变量和 .env 文件读取配置
    """

    # ========== 应用环境 ==========
    app_env: Literal["test", "dev", "prod"] = "dev"
    app_name: str = "GmailInboxStats"
    debug: bool = False

    # ========== 日志配置 ==========
    log_level: str = "INFO"
    log_backend: Literal["simple", "loguru"] = "simple"

    # ========== 统计配置 ==========
    gmail_user: str = "me"
    gmail_query: str = "label:INBOX"
    min_occurrences_threshold: int = Field(default=5, ge=0)
    max_workers: int = Field(default=32, ge=1)
    progress_interval: int = Field(default=100, ge=1)
    list_page_size: Optional[int] = Field(default=None, ge=1, le=500)

    # ========== 单封邮件重试 ==========
    fetch_max_retries: int = Field(default=0, ge=0)
    fetch_retry_base_delay: float = Field(default=1.0, ge=0)

    # ========== Gmail 认证 ==========
    gmail_client_secrets_file: str = "credentials.json"
    gmail_token_file: str = str(
        Path.home() / ".credentials" / "gmail-inbox-stats" / "token.json"
    )
    gmail_scopes: List[str] = [
        "https://www.googleapis.com/auth/gmail.labels",
        "https://www.googleapis.com/auth/gmail.readonly",
    ]
    gmail_oauth_port: int = 0  # 0 表示随机可用端口

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 忽略未定义的环境变量
    )

    @property
    def effective_log_level(self) -> str:
        """debug 开启时强制 DEBUG 级别"""
        return "DEBUG" if self.debug else self.log_level.upper()


# 全局配置实例（单例）
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    获取配置实例（单例模式）

    Returns:
        Settings 实例
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
