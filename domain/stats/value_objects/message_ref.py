"""邮件引用值对象"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException


@dataclass(frozen=True)
class MessageRef(BaseValueObject):
    """
    邮件引用值对象

    指向邮箱中一封邮件的不透明标识，由列表接口返回，
    每个引用只被获取一次。

    Attributes:
        id: 邮件 ID
        thread_id: 会话 ID（可选，仅作信息保留）
    """

    id: str
    thread_id: Optional[str] = None

    def validate(self) -> None:
        """验证邮件 ID 非空"""
        if not self.id or not self.id.strip():
            raise InvalidValueObjectException(
                value_object_type="MessageRef",
                value=self.id,
                reason="Message ID cannot be empty"
            )


@dataclass(frozen=True)
class MessagePage(BaseValueObject):
    """
    邮件列表分页结果

    Attributes:
        message_refs: 本页的邮件引用
        next_page_token: 下一页令牌，None 表示已是最后一页
        result_size_estimate: 服务端估计的结果总数（仅供参考）
    """

    message_refs: Tuple[MessageRef, ...] = field(default_factory=tuple)
    next_page_token: Optional[str] = None
    result_size_estimate: int = 0

    @property
    def is_empty(self) -> bool:
        """本页是否没有邮件"""
        return len(self.message_refs) == 0

    @property
    def has_next_page(self) -> bool:
        """是否存在下一页"""
        return bool(self.next_page_token)
