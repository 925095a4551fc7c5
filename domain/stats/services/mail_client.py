"""邮件客户端接口"""

from abc import ABC, abstractmethod
from typing import List, Optional

from domain.stats.value_objects.message_ref import MessagePage
from domain.stats.value_objects.message_header import MessageHeader, Label


class MailClient(ABC):
    """
    邮件客户端接口

    定义统计流水线所需的邮件服务契约。
    具体实现在基础设施层，负责：
    - 认证与凭据管理
    - 分页列出邮件
    - 仅获取邮件头部（不下载正文）
    - 列出标签
    """

    @abstractmethod
    def list_messages(
        self,
        user: str,
        query: str,
        page_token: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> MessagePage:
        """
        列出一页匹配查询的邮件

        Args:
            user: 目标邮箱（"me" 表示已认证用户）
            query: 查询表达式，如 "label:INBOX"
            page_token: 上一页返回的令牌，首页为 None
            page_size: 每页最大数量，None 使用服务端默认值

        Returns:
            分页结果

        Raises:
            MailAuthenticationError: 认证失败
            MailClientError: 调用失败
        """
        raise NotImplementedError

    @abstractmethod
    def get_message_headers(self, user: str, message_id: str) -> List[MessageHeader]:
        """
        获取单封邮件的头部

        实现必须只请求头部字段，避免下载邮件正文。

        Args:
            user: 目标邮箱
            message_id: 邮件 ID

        Returns:
            头部列表（按原始顺序）

        Raises:
            MailAuthenticationError: 认证失败
            MailClientError: 调用失败
        """
        raise NotImplementedError

    @abstractmethod
    def list_labels(self, user: str) -> List[Label]:
        """
        列出邮箱标签

        Args:
            user: 目标邮箱

        Returns:
            标签列表

        Raises:
            MailAuthenticationError: 认证失败
            MailClientError: 调用失败
        """
        raise NotImplementedError


class MailClientError(Exception):
    """邮件客户端调用错误"""

    def __init__(self, operation: str, message: str, status_code: Optional[int] = None):
        self.operation = operation
        self.status_code = status_code
        detail = f" (HTTP {status_code})" if status_code else ""
        super().__init__(f"{operation} failed{detail} - {message}")


class MailAuthenticationError(Exception):
    """邮件服务认证错误"""

    def __init__(self, user: str, message: str):
        self.user = user
        super().__init__(f"Authentication failed for {user} - {message}")


class CollectionError(Exception):
    """邮件列表收集错误（致命，发生在获取阶段之前）"""

    def __init__(self, query: str, message: str, pages_collected: int = 0):
        self.query = query
        self.pages_collected = pages_collected
        super().__init__(
            f"Failed to collect messages for query '{query}' "
            f"after {pages_collected} page(s) - {message}"
        )
