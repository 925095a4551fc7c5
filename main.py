"""
Gmail Inbox Stats - 发件人统计入口

运行：
    uv run python main.py --query "label:INBOX" --threshold 5

或安装后：
    gmail-inbox-stats --help
"""

from interfaces.cli.main import main


if __name__ == "__main__":
    raise SystemExit(main())
