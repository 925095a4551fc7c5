"""查询邮箱标签列表处理器"""

import logging
from typing import Optional

from application.queries.stats.list_labels import ListLabelsQuery, ListLabelsResult
from domain.stats.services.mail_client import (
    MailClient,
    MailClientError,
    MailAuthenticationError,
)


class ListLabelsHandler:
    """
    查询邮箱标签列表处理器

    标签仅用于信息展示，失败时返回失败结果而不抛出异常。
    """

    def __init__(self, mail_client: MailClient, logger: Optional[logging.Logger] = None):
        self._mail_client = mail_client
        self._logger = logger or logging.getLogger(__name__)

    async def handle(self, query: ListLabelsQuery) -> ListLabelsResult:
        """
        处理查询请求

        Args:
            query: 查询参数

        Returns:
            ListLabelsResult: 查询结果
        """
        try:
            labels = self._mail_client.list_labels(query.user)
        except MailAuthenticationError as e:
            self._logger.warning(f"Failed to list labels: {e}")
            return ListLabelsResult(success=False, message=str(e), error_code="AUTH_FAILED")
        except MailClientError as e:
            self._logger.warning(f"Failed to list labels: {e}")
            return ListLabelsResult(success=False, message=str(e), error_code="CLIENT_ERROR")

        return ListLabelsResult(
            success=True,
            data=labels,
            message="Query successful",
        )
