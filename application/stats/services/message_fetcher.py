"""单封邮件发件人获取服务"""

import logging
import time
from typing import Optional

from domain.stats.services.mail_client import (
    MailClient,
    MailClientError,
    MailAuthenticationError,
)
from domain.stats.value_objects.fetch_result import FetchResult
from domain.stats.value_objects.sender_address import SenderAddress

FROM_HEADER = "From"


class MessageFetcher:
    """
    单封邮件发件人获取服务

    只请求邮件头部，找到 From 头部后提取归一化地址。
    所有单封邮件的失败都以 FetchResult 返回，不抛出异常，
    一封邮件失败不影响整次运行。
    """

    DEFAULT_MAX_RETRIES = 0
    DEFAULT_BASE_DELAY = 1.0  # 秒

    def __init__(
        self,
        mail_client: MailClient,
        max_retries: int = DEFAULT_MAX_RETRIES,
        base_delay: float = DEFAULT_BASE_DELAY,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化获取服务

        Args:
            mail_client: 邮件客户端
            max_retries: 客户端错误时的最大重试次数，默认 0（不重试）
            base_delay: 指数退避的基础延迟（秒）
            logger: 可选的日志记录器
        """
        self._mail_client = mail_client
        self._max_retries = max(0, max_retries)
        self._base_delay = base_delay
        self._logger = logger or logging.getLogger(__name__)

    @property
    def max_retries(self) -> int:
        """客户端错误时的最大重试次数"""
        return self._max_retries

    def fetch(self, user: str, message_id: str) -> FetchResult:
        """
        获取单封邮件的发件人

        Args:
            user: 目标邮箱
            message_id: 邮件 ID

        Returns:
            FetchResult：成功时携带发件人，否则携带失败类型
        """
        attempts = 0
        last_error = ""

        for attempt in range(self._max_retries + 1):
            attempts = attempt + 1
            try:
                headers = self._mail_client.get_message_headers(user, message_id)
            except (MailClientError, MailAuthenticationError) as e:
                last_error = str(e)
                if attempt < self._max_retries:
                    delay = self._base_delay * (2**attempt)  # 1s, 2s, 4s
                    self._logger.warning(
                        f"Fetch attempt {attempts}/{self._max_retries + 1} for message "
                        f"{message_id} failed, retry in {delay}s: {e}"
                    )
                    time.sleep(delay)
                continue

            for header in headers:
                if header.name == FROM_HEADER:
                    sender = SenderAddress.from_header(header.value)
                    if sender.is_fallback:
                        self._logger.debug(
                            f"No address pattern in From header of message "
                            f"{message_id}, using raw value: {header.value!r}"
                        )
                    return FetchResult.ok(message_id, sender, attempts=attempts)

            return FetchResult.no_sender(message_id, attempts=attempts)

        self._logger.error(f"Failed to fetch message {message_id}: {last_error}")
        return FetchResult.client_error(message_id, last_error, attempts=attempts)
