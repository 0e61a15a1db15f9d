"""
Zendesk API Client
Thin synchronous binding for the Zendesk REST API (v2)

Components:
- client.py: ZendeskClientBase transport (auth, send, send_file, status check)
- tickets.py: Ticket operations
- users.py: User operations
- config.py: Immutable ClientConfig
- errors.py: Exception hierarchy
"""

from .client import ApiResult, ZendeskClientBase, is_success_status
from .config import ClientConfig
from .errors import ZendeskAPIError, ZendeskArgumentError, ZendeskError
from .tickets import TicketMixin
from .users import UserMixin


class ZendeskAPI(ZendeskClientBase, TicketMixin, UserMixin):
    """Zendesk API client with ticket and user operations"""
    pass


__all__ = [
    "ZendeskAPI",
    "ApiResult",
    "ClientConfig",
    "ZendeskError",
    "ZendeskAPIError",
    "ZendeskArgumentError",
    "is_success_status",
]
