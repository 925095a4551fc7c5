"""发件人统计查询模块"""

from application.queries.stats.list_labels import (
    ListLabelsQuery,
    ListLabelsResult,
)

__all__ = [
    "ListLabelsQuery",
    "ListLabelsResult",
]
