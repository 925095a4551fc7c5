"""发件人统计领域服务模块"""

from domain.stats.services.email_address_extractor import (
    EMAIL_ADDRESS_PATTERN,
    extract_email_address,
    find_email_address,
)
from domain.stats.services.sender_tally import SenderTally
from domain.stats.services.mail_client import (
    MailClient,
    MailClientError,
    MailAuthenticationError,
    CollectionError,
)

__all__ = [
    "EMAIL_ADDRESS_PATTERN",
    "extract_email_address",
    "find_email_address",
    "SenderTally",
    "MailClient",
    "MailClientError",
    "MailAuthenticationError",
    "CollectionError",
]
