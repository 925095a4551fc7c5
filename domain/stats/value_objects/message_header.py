"""邮件头部与标签值对象"""

from dataclasses import dataclass
from typing import Optional

from domain.common.base_value_object import BaseValueObject


@dataclass(frozen=True)
class MessageHeader(BaseValueObject):
    """邮件头部（名称/值）"""

    name: str
    value: str


@dataclass(frozen=True)
class Label(BaseValueObject):
    """
    邮箱标签

    Attributes:
        id: 标签 ID
        name: 标签名称（如 INBOX）
        type: 标签类型（system / user）
    """

    id: str
    name: str
    type: Optional[str] = None
