"""
命令行接口层

用法：
    gmail-inbox-stats --query "label:INBOX" --threshold 5
"""

from interfaces.cli.main import build_parser, main

__all__ = ["build_parser", "main"]
