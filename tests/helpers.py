"""测试辅助：内存邮件客户端"""

import threading
from typing import Dict, List, Optional, Sequence

from domain.stats.services.mail_client import MailClient, MailClientError
from domain.stats.value_objects.message_header import MessageHeader, Label
from domain.stats.value_objects.message_ref import MessageRef, MessagePage


class FakeMailClient(MailClient):
    """
    内存邮件客户端

    pages: 按顺序返回的分页（每页为邮件 ID 列表）
    senders: 邮件 ID -> From 头部值（None 表示没有 From 头部）
    failing_ids: 获取头部时抛出 MailClientError 的邮件 ID
    """

    def __init__(
        self,
        pages: Sequence[Sequence[str]] = (),
        senders: Optional[Dict[str, Optional[str]]] = None,
        failing_ids: Sequence[str] = (),
        labels: Sequence[str] = (),
        result_size_estimate: int = 0,
    ):
        self.pages = [list(page) for page in pages]
        self.senders = senders or {}
        self.failing_ids = set(failing_ids)
        self.labels = list(labels)
        self.result_size_estimate = result_size_estimate
        self.list_calls: List[Optional[str]] = []
        self.get_calls: List[str] = []
        self._lock = threading.Lock()

    def list_messages(self, user, query, page_token=None, page_size=None) -> MessagePage:
        self.list_calls.append(page_token)
        index = int(page_token) if page_token else 0
        ids = self.pages[index] if index < len(self.pages) else []
        next_token = str(index + 1) if index + 1 < len(self.pages) else None
        return MessagePage(
            message_refs=tuple(MessageRef(id=message_id) for message_id in ids),
            next_page_token=next_token,
            result_size_estimate=self.result_size_estimate,
        )

    def get_message_headers(self, user, message_id) -> List[MessageHeader]:
        with self._lock:
            self.get_calls.append(message_id)
        if message_id in self.failing_ids:
            raise MailClientError(operation="messages.get", message="Backend Error", status_code=500)
        headers = [MessageHeader(name="Subject", value=f"Message {message_id}")]
        sender = self.senders.get(message_id)
        if sender is not None:
            headers.append(MessageHeader(name="From", value=sender))
        return headers

    def list_labels(self, user) -> List[Label]:
        return [Label(id=name, name=name, type="system") for name in self.labels]


def make_messages(counts: Dict[str, int], no_sender: int = 0) -> Dict[str, Optional[str]]:
    """按发件人数量生成 邮件 ID -> From 头部值"""
    senders: Dict[str, Optional[str]] = {}
    index = 0
    for address, count in counts.items():
        for _ in range(count):
            senders[f"m{index}"] = address
            index += 1
    for _ in range(no_sender):
        senders[f"m{index}"] = None
        index += 1
    return senders


