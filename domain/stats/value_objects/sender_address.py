"""发件人地址值对象"""

from dataclasses import dataclass

from domain.common.base_value_object import BaseValueObject
from domain.stats.services.email_address_extractor import find_email_address


@dataclass(frozen=True)
class SenderAddress(BaseValueObject):
    """
    发件人地址值对象

    由 From 头部原始值归一化而来，作为计数器的键。

    Attributes:
        raw: From 头部原始值
        address: 归一化后的地址（小写）；无法匹配时为原始值
        is_fallback: 是否未匹配到地址格式而退回原始值
    """

    raw: str
    address: str
    is_fallback: bool = False

    @classmethod
    def from_header(cls, raw: str) -> "SenderAddress":
        """
        从 From 头部值创建

        Args:
            raw: From 头部原始值

        Returns:
            SenderAddress 实例
        """
        found = find_email_address(raw)
        if found is None:
            return cls(raw=raw, address=raw, is_fallback=True)
        return cls(raw=raw, address=found)

    def __str__(self) -> str:
        return self.address
