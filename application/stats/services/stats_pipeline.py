"""发件人统计流水线"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime, timezone
from typing import Dict, List, Optional

from application.stats.services.inbox_collector import InboxCollector
from application.stats.services.message_fetcher import MessageFetcher
from domain.stats.services.sender_tally import SenderTally
from domain.stats.value_objects.fetch_result import FetchErrorKind, FetchResult
from domain.stats.value_objects.stats_report import (
    PipelineState,
    ResultEntry,
    StatsReport,
)


class StatsPipeline:
    """
    发件人统计流水线

    状态：IDLE -> COLLECTING -> FETCHING -> AGGREGATED -> REPORTED

    - 串行分页收集所有邮件引用（失败即致命，不进入获取阶段）
    - 使用有界线程池并行获取每封邮件的发件人
    - 单封邮件失败只记录日志，不影响其他邮件
    - 所有任务完成后过滤（严格大于阈值）并按数量升序排序
    """

    DEFAULT_MAX_WORKERS = 32
    DEFAULT_THRESHOLD = 5
    DEFAULT_PROGRESS_INTERVAL = 100

    def __init__(
        self,
        collector: InboxCollector,
        fetcher: MessageFetcher,
        max_workers: int = DEFAULT_MAX_WORKERS,
        threshold: int = DEFAULT_THRESHOLD,
        progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
        tally: Optional[SenderTally] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化统计流水线

        Args:
            collector: 邮件 ID 收集服务
            fetcher: 单封邮件发件人获取服务
            max_workers: 并发获取线程数，默认 32
            threshold: 最小出现次数阈值，数量严格大于该值才输出，默认 5
            progress_interval: 每完成多少封邮件记录一次进度
            tally: 可选的计数器（默认每次运行新建）
            logger: 可选的日志记录器
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")

        self._collector = collector
        self._fetcher = fetcher
        self._max_workers = max_workers
        self._threshold = threshold
        self._progress_interval = max(1, progress_interval)
        self._tally = tally or SenderTally()
        self._logger = logger or logging.getLogger(__name__)
        self._state = PipelineState.IDLE

    @property
    def state(self) -> PipelineState:
        """当前状态"""
        return self._state

    @property
    def max_workers(self) -> int:
        """并发获取线程数"""
        return self._max_workers

    @property
    def threshold(self) -> int:
        """最小出现次数阈值"""
        return self._threshold

    @property
    def tally(self) -> SenderTally:
        """发件人计数器"""
        return self._tally

    def run(self, user: str, query: str) -> StatsReport:
        """
        执行一次完整统计

        Args:
            user: 目标邮箱
            query: 查询表达式

        Returns:
            统计报告

        Raises:
            MailAuthenticationError: 认证失败
            CollectionError: 邮件列表收集失败
        """
        run_start = datetime.now(timezone.utc)

        self._state = PipelineState.COLLECTING
        try:
            message_refs = self._collector.collect_all(user, query)
        except Exception:
            self._state = PipelineState.FAILED
            raise

        self._state = PipelineState.FETCHING
        self._logger.info(
            f"Fetching senders of {len(message_refs)} messages "
            f"with {self._max_workers} workers"
        )

        tallied_count = 0
        no_sender_count = 0
        failed_count = 0
        fallback_count = 0

        with ThreadPoolExecutor(
            max_workers=self._max_workers,
            thread_name_prefix="gmail-fetch-"
        ) as executor:
            futures = {
                executor.submit(self._fetch_and_tally, user, ref.id): ref.id
                for ref in message_refs
            }

            for completed, future in enumerate(as_completed(futures), start=1):
                message_id = futures[future]
                try:
                    result = future.result()
                except Exception as e:
                    self._logger.error(f"Unexpected error processing message {message_id}: {e}")
                    failed_count += 1
                else:
                    if result.is_success:
                        tallied_count += 1
                        if result.sender is not None and result.sender.is_fallback:
                            fallback_count += 1
                    elif result.error == FetchErrorKind.NO_SENDER:
                        no_sender_count += 1
                    else:
                        failed_count += 1

                if completed % self._progress_interval == 0:
                    self._logger.info(f"Processed {completed}/{len(futures)} messages")

        # 线程池退出即所有任务完成
        self._state = PipelineState.AGGREGATED

        entries = self.build_entries(self._tally.snapshot(), self._threshold)
        self._state = PipelineState.REPORTED

        run_duration = (datetime.now(timezone.utc) - run_start).total_seconds()
        self._logger.info(
            f"Stats run complete: {len(message_refs)} messages, "
            f"{tallied_count} tallied, {no_sender_count} without sender, "
            f"{failed_count} failed, {fallback_count} unparsed senders, "
            f"{len(entries)} senders above threshold, {run_duration:.2f}s"
        )

        return StatsReport(
            user=user,
            query=query,
            threshold=self._threshold,
            result_size_estimate=self._collector.last_result_size_estimate,
            total_messages=len(message_refs),
            tallied_count=tallied_count,
            no_sender_count=no_sender_count,
            failed_count=failed_count,
            fallback_count=fallback_count,
            entries=entries,
            final_state=self._state,
        )

    def _fetch_and_tally(self, user: str, message_id: str) -> FetchResult:
        """获取单封邮件发件人，成功则计数（在工作线程中执行）"""
        result = self._fetcher.fetch(user, message_id)
        if result.is_success and result.sender is not None:
            previous = self._tally.increment(result.sender.address)
            self._logger.debug(f"{result.sender.address}: {previous + 1}")
        return result

    @staticmethod
    def build_entries(counts: Dict[str, int], threshold: int) -> List[ResultEntry]:
        """
        过滤并排序计数结果

        Args:
            counts: 地址 -> 数量
            threshold: 数量严格大于该值才保留

        Returns:
            按数量升序（相同数量按地址升序）排列的报告条目
        """
        return [
            ResultEntry(address=address, count=count)
            for address, count in sorted(counts.items(), key=lambda item: (item[1], item[0]))
            if count > threshold
        ]
