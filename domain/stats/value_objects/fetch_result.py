"""单封邮件获取结果值对象"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from domain.common.base_value_object import BaseValueObject
from domain.stats.value_objects.sender_address import SenderAddress


class FetchErrorKind(str, Enum):
    """获取失败类型"""

    NO_SENDER = "no_sender"
    """邮件没有 From 头部"""

    CLIENT_ERROR = "client_error"
    """邮件客户端调用失败"""


@dataclass(frozen=True)
class FetchResult(BaseValueObject):
    """
    单封邮件获取结果

    成功时携带 sender，失败时携带 error 与 error_detail，
    调用方据此决定是否计数，不依赖异常控制流。

    Attributes:
        message_id: 邮件 ID
        sender: 发件人地址（成功时）
        error: 失败类型（失败时）
        error_detail: 失败详情
        attempts: 实际调用次数
    """

    message_id: str
    sender: Optional[SenderAddress] = None
    error: Optional[FetchErrorKind] = None
    error_detail: str = ""
    attempts: int = 1

    @classmethod
    def ok(cls, message_id: str, sender: SenderAddress, attempts: int = 1) -> "FetchResult":
        """创建成功结果"""
        return cls(message_id=message_id, sender=sender, attempts=attempts)

    @classmethod
    def no_sender(cls, message_id: str, attempts: int = 1) -> "FetchResult":
        """创建“无发件人”结果"""
        return cls(
            message_id=message_id,
            error=FetchErrorKind.NO_SENDER,
            error_detail="Message has no From header",
            attempts=attempts,
        )

    @classmethod
    def client_error(cls, message_id: str, detail: str, attempts: int = 1) -> "FetchResult":
        """创建客户端错误结果"""
        return cls(
            message_id=message_id,
            error=FetchErrorKind.CLIENT_ERROR,
            error_detail=detail,
            attempts=attempts,
        )

    @property
    def is_success(self) -> bool:
        """是否成功获取到发件人"""
        return self.sender is not None and self.error is None
