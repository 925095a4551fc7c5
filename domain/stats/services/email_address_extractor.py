"""邮件地址提取"""

import re
from typing import Optional

# 简化的邮件地址格式：local-part@domain.tld，顶级域 2-6 个字母
EMAIL_ADDRESS_PATTERN = re.compile(
    r"(?P<email>[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,6})",
    re.IGNORECASE | re.ASCII,
)


def find_email_address(raw: str) -> Optional[str]:
    """
    查找头部值中的第一个邮件地址

    Args:
        raw: 头部原始值，如 "John Doe <JOHN@EXAMPLE.COM>"

    Returns:
        小写的邮件地址，未找到返回 None
    """
    match = EMAIL_ADDRESS_PATTERN.search(raw)
    if match is None:
        return None
    return match.group("email").lower()


def extract_email_address(raw: str) -> str:
    """
    提取并归一化邮件地址

    未匹配到地址时原样返回输入（不做小写处理），
    保证任何邮件都不会因头部无法解析而被丢弃。

    Args:
        raw: 头部原始值

    Returns:
        小写的邮件地址，或原始字符串
    """
    found = find_email_address(raw)
    return raw if found is None else found
