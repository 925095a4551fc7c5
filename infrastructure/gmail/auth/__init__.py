"""Gmail 认证模块"""

from infrastructure.gmail.auth.gmail_authenticator import GmailAuthenticator

__all__ = ["GmailAuthenticator"]
