"""Gmail OAuth 认证"""

import logging
import threading
from pathlib import Path
from typing import List, Optional

from google.auth.exceptions import GoogleAuthError, RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from domain.stats.services.mail_client import MailAuthenticationError


class GmailAuthenticator:
    """
    Gmail OAuth 认证

    - 优先加载本地缓存的 token 文件
    - token 过期且有 refresh_token 时自动刷新
    - 否则启动本地浏览器授权流程
    - 新凭据写回 token 文件供下次使用
    """

    def __init__(
        self,
        client_secrets_file: str,
        token_file: str,
        scopes: List[str],
        oauth_port: int = 0,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化认证器

        Args:
            client_secrets_file: OAuth 客户端密钥文件路径
            token_file: 凭据缓存文件路径
            scopes: 授权范围
            oauth_port: 本地回调端口，0 表示随机端口
            logger: 可选的日志记录器
        """
        self._client_secrets_file = Path(client_secrets_file).expanduser()
        self._token_file = Path(token_file).expanduser()
        self._scopes = list(scopes)
        self._oauth_port = oauth_port
        self._logger = logger or logging.getLogger(__name__)
        self._credentials: Optional[Credentials] = None
        self._lock = threading.Lock()

    def get_credentials(self) -> Credentials:
        """
        获取有效凭据（结果在进程内缓存）

        Returns:
            已授权的凭据

        Raises:
            MailAuthenticationError: 认证失败
        """
        with self._lock:
            if self._credentials is None or not self._credentials.valid:
                self._credentials = self._authorize()
            return self._credentials

    def _authorize(self) -> Credentials:
        """加载、刷新或重新申请凭据"""
        creds = self._load_cached()

        if creds is not None and creds.valid:
            return creds

        try:
            if creds is not None and creds.expired and creds.refresh_token:
                self._logger.debug("Refreshing expired Gmail credentials")
                creds.refresh(Request())
            else:
                creds = self._run_flow()
        except RefreshError as e:
            self._logger.warning(f"Credential refresh failed, re-authorizing: {e}")
            creds = self._run_flow()
        except GoogleAuthError as e:
            raise MailAuthenticationError(user=str(self._token_file), message=str(e))

        self._save(creds)
        return creds

    def _load_cached(self) -> Optional[Credentials]:
        """加载本地缓存凭据"""
        if not self._token_file.exists():
            return None
        try:
            return Credentials.from_authorized_user_file(str(self._token_file), self._scopes)
        except ValueError as e:
            self._logger.warning(f"Ignoring unreadable token file {self._token_file}: {e}")
            return None

    def _run_flow(self) -> Credentials:
        """启动本地授权流程"""
        if not self._client_secrets_file.exists():
            raise MailAuthenticationError(
                user="user",
                message=f"Client secrets file not found: {self._client_secrets_file}",
            )
        try:
            flow = InstalledAppFlow.from_client_secrets_file(
                str(self._client_secrets_file), self._scopes
            )
            return flow.run_local_server(port=self._oauth_port)
        except (GoogleAuthError, ValueError) as e:
            raise MailAuthenticationError(user="user", message=str(e))

    def _save(self, creds: Credentials) -> None:
        """写回凭据缓存"""
        self._token_file.parent.mkdir(parents=True, exist_ok=True)
        self._token_file.write_text(creds.to_json(), encoding="utf-8")
        self._logger.info(f"Credentials saved to {self._token_file}")
