"""MessageFetcher 单元测试"""

from unittest.mock import Mock, patch

from application.stats.services.message_fetcher import MessageFetcher
from domain.stats.services.mail_client import MailAuthenticationError, MailClientError
from domain.stats.value_objects.fetch_result import FetchErrorKind
from domain.stats.value_objects.message_header import MessageHeader


def headers(**pairs) -> list:
    """创建测试用头部列表"""
    return [MessageHeader(name=name, value=value) for name, value in pairs.items()]


class TestMessageFetcherSuccess:
    """成功获取测试"""

    def test_extracts_from_header(self):
        """测试提取 From 头部地址"""
        client = Mock()
        client.get_message_headers.return_value = headers(
            Subject="Hi", From="John Doe <JOHN@EXAMPLE.COM>"
        )

        result = MessageFetcher(client).fetch("me", "m1")

        assert result.is_success
        assert result.sender.address == "john@example.com"
        assert result.message_id == "m1"
        assert result.attempts == 1
        client.get_message_headers.assert_called_once_with("me", "m1")

    def test_header_name_match_is_case_sensitive(self):
        """测试头部名称区分大小写"""
        client = Mock()
        client.get_message_headers.return_value = headers(FROM="a@x.com")

        result = MessageFetcher(client).fetch("me", "m1")

        assert result.error == FetchErrorKind.NO_SENDER

    def test_first_from_header_wins(self):
        """测试多个 From 头部时使用第一个"""
        client = Mock()
        client.get_message_headers.return_value = [
            MessageHeader(name="From", value="first@x.com"),
            MessageHeader(name="From", value="second@x.com"),
        ]

        result = MessageFetcher(client).fetch("me", "m1")

        assert result.sender.address == "first@x.com"

    def test_unparseable_sender_falls_back_to_raw_value(self):
        """测试无法解析的发件人退回原始值并记录日志"""
        client = Mock()
        client.get_message_headers.return_value = headers(From="Mail Delivery System")
        logger = Mock()

        result = MessageFetcher(client, logger=logger).fetch("me", "m1")

        assert result.is_success
        assert result.sender.address == "Mail Delivery System"
        assert result.sender.is_fallback
        logger.debug.assert_called_once()


class TestMessageFetcherFailures:
    """失败处理测试"""

    def test_missing_from_header(self):
        """测试没有 From 头部"""
        client = Mock()
        client.get_message_headers.return_value = headers(Subject="No sender")
        logger = Mock()

        result = MessageFetcher(client, logger=logger).fetch("me", "m1")

        assert not result.is_success
        assert result.error == FetchErrorKind.NO_SENDER
        logger.error.assert_not_called()

    def test_client_error_returns_result_instead_of_raising(self):
        """测试客户端错误返回失败结果而不抛出"""
        client = Mock()
        client.get_message_headers.side_effect = MailClientError(
            operation="messages.get", message="Not Found", status_code=404
        )

        result = MessageFetcher(client).fetch("me", "m1")

        assert result.error == FetchErrorKind.CLIENT_ERROR
        assert "HTTP 404" in result.error_detail

    def test_authentication_error_is_isolated(self):
        """测试单封邮件认证错误同样被隔离"""
        client = Mock()
        client.get_message_headers.side_effect = MailAuthenticationError(user="me", message="expired")

        result = MessageFetcher(client).fetch("me", "m1")

        assert result.error == FetchErrorKind.CLIENT_ERROR

    def test_no_retry_by_default(self):
        """测试默认不重试"""
        client = Mock()
        client.get_message_headers.side_effect = MailClientError(operation="messages.get", message="x")

        fetcher = MessageFetcher(client)
        result = fetcher.fetch("me", "m1")

        assert fetcher.max_retries == 0
        assert result.attempts == 1
        assert client.get_message_headers.call_count == 1


class TestMessageFetcherRetry:
    """重试测试"""

    @patch("application.stats.services.message_fetcher.time.sleep")
    def test_retry_success_on_second_attempt(self, mock_sleep):
        """测试第二次尝试成功"""
        client = Mock()
        client.get_message_headers.side_effect = [
            MailClientError(operation="messages.get", message="Rate limit", status_code=429),
            headers(From="a@x.com"),
        ]

        result = MessageFetcher(client, max_retries=2, base_delay=1).fetch("me", "m1")

        assert result.is_success
        assert result.attempts == 2
        mock_sleep.assert_called_once_with(1)

    @patch("application.stats.services.message_fetcher.time.sleep")
    def test_all_attempts_fail(self, mock_sleep):
        """测试所有重试都失败"""
        client = Mock()
        client.get_message_headers.side_effect = MailClientError(operation="messages.get", message="x")

        result = MessageFetcher(client, max_retries=2, base_delay=1).fetch("me", "m1")

        assert result.error == FetchErrorKind.CLIENT_ERROR
        assert result.attempts == 3
        assert client.get_message_headers.call_count == 3
        assert [c.args[0] for c in mock_sleep.call_args_list] == [1, 2]  # 指数退避
