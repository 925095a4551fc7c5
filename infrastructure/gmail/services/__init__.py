"""Gmail 服务模块"""

from infrastructure.gmail.services.gmail_mail_client import GmailMailClient

__all__ = ["GmailMailClient"]
