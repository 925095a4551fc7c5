"""Gmail API 邮件客户端实现"""

import logging
import threading
from typing import Any, Callable, List, Optional

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from httplib2 import HttpLib2Error

from domain.stats.services.mail_client import (
    MailClient,
    MailClientError,
    MailAuthenticationError,
)
from domain.stats.value_objects.message_header import MessageHeader, Label
from domain.stats.value_objects.message_ref import MessageRef, MessagePage
from infrastructure.gmail.auth.gmail_authenticator import GmailAuthenticator

# 只取回头部，不下载邮件正文
HEADERS_ONLY_FIELDS = "payload/headers"


class GmailMailClient(MailClient):
    """
    Gmail API 邮件客户端实现

    使用 google-api-python-client 访问 Gmail，支持：
    - 分页列出邮件（users.messages.list）
    - 只获取头部字段（users.messages.get + fields）
    - 列出标签（users.labels.list）

    discovery 客户端底层的 httplib2 连接不是线程安全的，
    因此每个工作线程持有独立的 service 实例，只共享凭据。
    """

    API_NAME = "gmail"
    API_VERSION = "v1"

    def __init__(
        self,
        authenticator: GmailAuthenticator,
        service_factory: Optional[Callable[[], Any]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化 Gmail 客户端

        Args:
            authenticator: Gmail 认证器
            service_factory: 可选的 service 工厂（测试时注入）
            logger: 可选的日志记录器
        """
        self._authenticator = authenticator
        self._service_factory = service_factory or self._build_service
        self._local = threading.local()
        self._logger = logger or logging.getLogger(__name__)

    def list_messages(
        self,
        user: str,
        query: str,
        page_token: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> MessagePage:
        """列出一页匹配查询的邮件"""
        params = {"userId": user, "q": query}
        if page_token:
            params["pageToken"] = page_token
        if page_size:
            params["maxResults"] = page_size

        response = self._execute(
            "messages.list",
            user,
            lambda service: service.users().messages().list(**params),
        )

        refs = tuple(
            MessageRef(id=message["id"], thread_id=message.get("threadId"))
            for message in response.get("messages") or []
        )
        return MessagePage(
            message_refs=refs,
            next_page_token=response.get("nextPageToken"),
            result_size_estimate=int(response.get("resultSizeEstimate", 0)),
        )

    def get_message_headers(self, user: str, message_id: str) -> List[MessageHeader]:
        """获取单封邮件的头部"""
        response = self._execute(
            "messages.get",
            user,
            lambda service: service.users().messages().get(
                userId=user, id=message_id, fields=HEADERS_ONLY_FIELDS
            ),
        )

        headers = (response.get("payload") or {}).get("headers") or []
        return [
            MessageHeader(name=header.get("name", ""), value=header.get("value", ""))
            for header in headers
        ]

    def list_labels(self, user: str) -> List[Label]:
        """列出邮箱标签"""
        response = self._execute(
            "labels.list",
            user,
            lambda service: service.users().labels().list(userId=user),
        )
        return [
            Label(id=label.get("id", ""), name=label.get("name", ""), type=label.get("type"))
            for label in response.get("labels") or []
        ]

    def _service(self) -> Any:
        """获取当前线程的 service 实例"""
        service = getattr(self._local, "service", None)
        if service is None:
            service = self._service_factory()
            self._local.service = service
        return service

    def _build_service(self) -> Any:
        """构建 Gmail discovery service"""
        credentials = self._authenticator.get_credentials()
        self._logger.debug(
            f"Building Gmail service in thread {threading.current_thread().name}"
        )
        return build(
            self.API_NAME,
            self.API_VERSION,
            credentials=credentials,
            cache_discovery=False,
        )

    def _execute(self, operation: str, user: str, make_request: Callable[[Any], Any]) -> dict:
        """
        执行请求并转换异常

        Raises:
            MailAuthenticationError: HTTP 401
            MailClientError: 其他 API 或传输错误
        """
        try:
            return make_request(self._service()).execute()
        except HttpError as e:
            status = e.resp.status if e.resp is not None else None
            if status == 401:
                raise MailAuthenticationError(user=user, message=str(e)) from e
            raise MailClientError(operation=operation, message=str(e), status_code=status) from e
        except (HttpLib2Error, OSError) as e:
            raise MailClientError(operation=operation, message=str(e)) from e
