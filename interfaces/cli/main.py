"""Gmail 收件箱发件人统计 - 命令行入口"""

import argparse
import asyncio
import sys
from typing import List, Optional, TextIO

from application.commands.stats.generate_sender_report import (
    GenerateSenderReportCommand,
    GenerateSenderReportResult,
)
from application.queries.stats.list_labels import ListLabelsQuery, ListLabelsResult
from common.logging import get_logger, setup_logging
from infrastructure.config.settings import Settings, get_settings
from infrastructure.containers import Bootstrap, bootstrap

logger = get_logger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """构建参数解析器（默认值来自配置）"""
    parser = argparse.ArgumentParser(
        prog="gmail-inbox-stats",
        description=(
            "Count Gmail messages per sender for a query and print the senders "
            "with more messages than a threshold, ascending by count."
        ),
    )
    parser.add_argument(
        "--user",
        default=settings.gmail_user,
        help=f"Mailbox to read; 'me' is the authorized user (default: {settings.gmail_user}).",
    )
    parser.add_argument(
        "--query",
        default=settings.gmail_query,
        help=f"Gmail search query scoping the messages (default: {settings.gmail_query}).",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=settings.min_occurrences_threshold,
        help=(
            "Only report senders with strictly more messages than this "
            f"(default: {settings.min_occurrences_threshold})."
        ),
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=settings.max_workers,
        help=f"Concurrent header fetches (default: {settings.max_workers}).",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=settings.list_page_size,
        help="Messages per listing page, 1-500 (default: server default).",
    )
    parser.add_argument(
        "--retries",
        type=int,
        default=settings.fetch_max_retries,
        help=f"Retries per failed header fetch (default: {settings.fetch_max_retries}).",
    )
    parser.add_argument(
        "--no-labels",
        action="store_true",
        help="Skip printing the mailbox labels before the report.",
    )
    parser.add_argument(
        "--log-level",
        default=settings.effective_log_level,
        help=f"Log level (default: {settings.effective_log_level}).",
    )
    return parser


def print_labels(result: ListLabelsResult, out: TextIO) -> None:
    """打印标签列表，查询失败时提示写入 stderr"""
    if not result.success:
        print(f"Could not list labels: {result.message}", file=sys.stderr)
        return
    if not result.data:
        print("No labels found.", file=out)
        return
    print("Labels:", file=out)
    for label in result.data:
        print(f"- {label.name}", file=out)


def print_report(result: GenerateSenderReportResult, out: TextIO) -> None:
    """打印统计报告"""
    report = result.report
    if report is None:
        return
    print(f"Query {report.query} Result size: {report.result_size_estimate}", file=out)
    print("RESULTS ORDERED AND FILTERED", file=out)
    for line in report.format_lines():
        print(line, file=out)


async def run(boot: Bootstrap, args: argparse.Namespace, out: TextIO) -> int:
    """
    执行标签展示与统计报告

    Returns:
        进程退出码：0 成功（允许单封邮件失败），1 认证/收集失败或参数错误
    """
    if not args.no_labels:
        labels_handler = boot.app.list_labels_handler()
        labels_result = await labels_handler.handle(ListLabelsQuery(user=args.user))
        # 认证失败时后续统计同样无法进行
        if labels_result.error_code == "AUTH_FAILED":
            print(f"Error [AUTH_FAILED]: {labels_result.message}", file=sys.stderr)
            return 1
        print_labels(labels_result, out)

    handler = boot.app.generate_sender_report_handler()
    result = await handler.handle(
        GenerateSenderReportCommand(
            user=args.user,
            query=args.query,
            threshold=args.threshold,
            max_workers=args.workers,
        )
    )

    if not result.success:
        print(f"Error [{result.error_code}]: {result.message}", file=sys.stderr)
        return 1

    print_report(result, out)
    return 0


def main(argv: Optional[List[str]] = None, out: Optional[TextIO] = None) -> int:
    """命令行主函数"""
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)

    setup_logging(level=args.log_level, backend=settings.log_backend)

    if args.page_size is not None and not 1 <= args.page_size <= 500:
        print("Error [INVALID_ARGUMENT]: page size must be between 1 and 500", file=sys.stderr)
        return 1
    if args.retries < 0:
        print("Error [INVALID_ARGUMENT]: retries cannot be negative", file=sys.stderr)
        return 1

    run_settings = settings.model_copy(
        update={
            "list_page_size": args.page_size,
            "fetch_max_retries": args.retries,
        }
    )
    boot = bootstrap(run_settings)

    logger.debug(f"Starting {settings.app_name} for user={args.user} query={args.query!r}")
    return asyncio.run(run(boot, args, out or sys.stdout))


if __name__ == "__main__":
    raise SystemExit(main())
