"""Exception hierarchy for Zendesk API calls"""

from typing import Optional

import httpx

# Message of every non-success response;
# status and body live on the error attributes
GENERIC_ERROR_MESSAGE = "Error! Please, check status and body to get error details"


class ZendeskError(Exception):
    """Base exception for Zendesk client operations"""
    pass


class ZendeskAPIError(ZendeskError):
    """
    Non-success status returned by the Zendesk API.

    The message is always the generic one. Inspect ``status_code``,
    ``body`` or ``response`` for the details the service returned.
    """

    def __init__(
        self,
        message: str = GENERIC_ERROR_MESSAGE,
        status_code: Optional[int] = None,
        body: bytes = b"",
        response: Optional[httpx.Response] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.response = response


class ZendeskArgumentError(ZendeskError, ValueError):
    """Required argument missing before any request was made"""
    pass
