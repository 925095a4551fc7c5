"""收件箱邮件 ID 收集服务"""

import logging
from typing import List, Optional

from domain.stats.services.mail_client import (
    MailClient,
    MailClientError,
    MailAuthenticationError,
    CollectionError,
)
from domain.stats.value_objects.message_ref import MessageRef


class InboxCollector:
    """
    收件箱邮件 ID 收集服务

    按查询表达式分页列出所有邮件引用。分页天然有序，
    每次请求依赖上一页返回的令牌，因此严格串行执行。
    """

    def __init__(
        self,
        mail_client: MailClient,
        page_size: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化收集服务

        Args:
            mail_client: 邮件客户端
            page_size: 每页最大数量，None 使用服务端默认值
            logger: 可选的日志记录器
        """
        self._mail_client = mail_client
        self._page_size = page_size
        self._logger = logger or logging.getLogger(__name__)
        self._last_result_size_estimate = 0

    @property
    def last_result_size_estimate(self) -> int:
        """最近一次收集时首页返回的结果数量估计"""
        return self._last_result_size_estimate

    def collect_all(self, user: str, query: str) -> List[MessageRef]:
        """
        收集所有匹配查询的邮件引用

        直到某一页没有下一页令牌为止。若某一页没有任何邮件，
        即使带有令牌也视为结束，防止异常服务端导致死循环。

        Args:
            user: 目标邮箱
            query: 查询表达式

        Returns:
            按分页顺序排列的邮件引用

        Raises:
            MailAuthenticationError: 认证失败
            CollectionError: 列表请求失败
        """
        message_refs: List[MessageRef] = []
        page_token: Optional[str] = None
        pages = 0

        while True:
            try:
                page = self._mail_client.list_messages(
                    user, query, page_token=page_token, page_size=self._page_size
                )
            except MailAuthenticationError:
                raise
            except MailClientError as e:
                raise CollectionError(query=query, message=str(e), pages_collected=pages) from e

            if pages == 0:
                self._last_result_size_estimate = page.result_size_estimate
                self._logger.info(
                    f"Query {query} Result size: {page.result_size_estimate}"
                )

            pages += 1

            if page.is_empty:
                if page.has_next_page:
                    self._logger.warning(
                        f"Page {pages} returned no messages but a continuation "
                        f"token; treating as end of results"
                    )
                break

            message_refs.extend(page.message_refs)
            self._logger.debug(
                f"Page {pages}: {len(page.message_refs)} messages "
                f"(total: {len(message_refs)})"
            )

            if not page.has_next_page:
                break
            page_token = page.next_page_token

        self._logger.info(
            f"Collected {len(message_refs)} messages in {pages} page(s) for query '{query}'"
        )
        return message_refs
