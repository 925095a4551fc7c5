"""统计报告值对象"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException


class PipelineState(str, Enum):
    """
    统计流水线状态

    Attributes:
        IDLE: 尚未开始
        COLLECTING: 正在分页收集邮件 ID
        FETCHING: 正在并行获取发件人
        AGGREGATED: 所有获取任务已完成
        REPORTED: 已生成报告
        FAILED: 认证或收集失败（致命）
    """

    IDLE = "idle"
    COLLECTING = "collecting"
    FETCHING = "fetching"
    AGGREGATED = "aggregated"
    REPORTED = "reported"
    FAILED = "failed"


@dataclass(frozen=True)
class ResultEntry(BaseValueObject):
    """报告条目：发件人地址与邮件数量"""

    address: str
    count: int

    def validate(self) -> None:
        """验证数量非负"""
        if self.count < 0:
            raise InvalidValueObjectException(
                value_object_type="ResultEntry",
                value=self.count,
                reason="Count cannot be negative"
            )

    def format(self) -> str:
        """控制台输出格式"""
        return f"Address : {self.address} Count : {self.count}"


@dataclass(frozen=True)
class StatsReport(BaseValueObject):
    """
    一次统计运行的结果

    Attributes:
        user: 目标邮箱
        query: 查询表达式
        threshold: 最小出现次数阈值（严格大于才输出）
        result_size_estimate: 服务端估计的结果总数
        total_messages: 收集到的邮件数量
        tallied_count: 成功计数的邮件数量
        no_sender_count: 没有 From 头部的邮件数量
        failed_count: 获取失败的邮件数量
        fallback_count: 地址未能解析、以原始值计数的邮件数量
        entries: 过滤、排序后的报告条目
        final_state: 流水线最终状态
    """

    user: str
    query: str
    threshold: int
    result_size_estimate: int = 0
    total_messages: int = 0
    tallied_count: int = 0
    no_sender_count: int = 0
    failed_count: int = 0
    fallback_count: int = 0
    entries: List[ResultEntry] = field(default_factory=list)
    final_state: PipelineState = PipelineState.REPORTED

    def format_lines(self) -> List[str]:
        """按顺序返回每个条目的输出行"""
        return [entry.format() for entry in self.entries]
