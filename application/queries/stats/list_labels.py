"""查询邮箱标签列表"""

from dataclasses import dataclass, field
from typing import List, Optional

from domain.stats.value_objects.message_header import Label


@dataclass
class ListLabelsQuery:
    """
    查询邮箱标签列表

    Attributes:
        user: 目标邮箱
    """

    user: str


@dataclass
class ListLabelsResult:
    """查询邮箱标签列表结果"""

    success: bool
    data: List[Label] = field(default_factory=list)
    message: str = ""
    error_code: Optional[str] = None
