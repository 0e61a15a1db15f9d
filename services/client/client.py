"""
Zendesk REST Client
Synchronous transport for the Zendesk API (v2) using token authentication

Every call builds its own request, reads the whole response and releases
the connection before returning. Non-success responses raise ZendeskAPIError;
all failures are reported to the optional error handler before they propagate.
"""

import functools
import json
import re
from pathlib import Path
from typing import Any, Callable, NamedTuple, Optional, Union

import httpx
import structlog
from pydantic import BaseModel

from .config import ClientConfig
from .errors import GENERIC_ERROR_MESSAGE, ZendeskAPIError

logger = structlog.get_logger()

API_VERSION = "api/v2"

# 2xx and 3xx are successes, anything else is an error
SUCCESS_STATUS_PATTERN = re.compile(r"^[23]")

ErrorHandler = Callable[[Exception], None]


def is_success_status(status_code: int) -> bool:
    """Classify an HTTP status code"""
    return SUCCESS_STATUS_PATTERN.match(str(status_code)) is not None


class ApiResult(NamedTuple):
    """Parsed response of a typed call together with the raw exchange"""
    data: Any
    body: bytes
    response: httpx.Response


def encode_body(data: Any) -> bytes:
    """
    Serialize a request value to JSON.

    Pydantic models are dumped by alias with only the fields that were set
    and are not None, so defaults never overwrite remote data. Mappings are
    sent as given; use one to send an explicit null.
    """
    def _default(value: Any) -> Any:
        if isinstance(value, BaseModel):
            return value.model_dump(mode="json", by_alias=True, exclude_unset=True, exclude_none=True)
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")

    return json.dumps(data, default=_default).encode("utf-8")


class CallerOwnedTransport(httpx.BaseTransport):
    """Delegates to a transport supplied by the caller without ever closing it"""

    def __init__(self, transport: httpx.BaseTransport):
        self._transport = transport

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        return self._transport.handle_request(request)

    def close(self):
        pass


def reports_errors(func: Callable) -> Callable:
    """Report any exception raised by a public call to the error handler, then re-raise"""
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        try:
            return func(self, *args, **kwargs)
        except Exception as e:
            self.handle_error(e)
            raise
    return wrapper


class ZendeskClientBase:
    """
    Low-level Zendesk API client.

    Usage:
        api = ZendeskAPI("agent@acme.com", "api-token", "https://acme.zendesk.com")
        body, response = api.send("GET", "tickets/1.json")
    """

    def __init__(
        self,
        email: str,
        token: str,
        host: str,
        error_handler: Optional[ErrorHandler] = None,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Args:
            email: Account email
            token: API token
            host: Account host, e.g. https://acme.zendesk.com
            error_handler: Called with every exception a public call raises
            timeout: Request timeout in seconds (default: no timeout)
            transport: Custom httpx transport for every request; it stays open
                across calls and closing it is left to the caller
        """
        self._config = ClientConfig(email=email, token=token, host=host, timeout=timeout)
        self._error_handler = error_handler
        self._transport = CallerOwnedTransport(transport) if transport is not None else None

    @property
    def config(self) -> ClientConfig:
        return self._config

    @reports_errors
    def send(
        self,
        method: str,
        path: str,
        data: Optional[bytes] = None,
    ) -> tuple[bytes, httpx.Response]:
        """
        Send a raw request relative to the API root.

        Args:
            method: HTTP method
            path: Path under /api/v2, may carry a query string
            data: Raw request body (JSON for POST/PUT)

        Returns:
            Tuple of (response body, response)
        """
        return self._send(method, path, data)

    @reports_errors
    def send_file(
        self,
        method: str,
        path: str,
        param_name: str,
        file_path: Union[str, Path],
    ) -> tuple[bytes, httpx.Response]:
        """
        Upload a local file as multipart form data.

        Args:
            method: HTTP method
            path: Path under /api/v2
            param_name: Form field name for the file part
            file_path: Local file; its base name is used as filename

        Returns:
            Tuple of (response body, response)
        """
        return self._send_file(method, path, param_name, file_path)

    def handle_error(self, err: Exception):
        """Pass an error to the configured handler without letting it interfere"""
        if self._error_handler is None:
            return
        try:
            self._error_handler(err)
        except Exception as e:
            logger.error("Error handler raised", error=str(e), original_error=str(err))

    def _send(self, method: str, path: str, data: Optional[bytes] = None) -> tuple[bytes, httpx.Response]:
        method = method.upper()
        headers = {"Accept": "application/json"}
        if method in ("POST", "PUT"):
            headers["Content-Type"] = "application/json"
        return self._send_request(method, self._prepare_url(path), headers=headers, content=data)

    def _send_file(
        self,
        method: str,
        path: str,
        param_name: str,
        file_path: Union[str, Path],
    ) -> tuple[bytes, httpx.Response]:
        url = self._prepare_url(path)
        file_path = Path(file_path)
        with open(file_path, "rb") as f:
            # httpx sets the multipart Content-Type with its boundary
            return self._send_request(
                method.upper(),
                url,
                headers={"Accept": "application/json"},
                files={param_name: (file_path.name, f)},
            )

    def _send_request(self, method: str, url: str, **kwargs) -> tuple[bytes, httpx.Response]:
        """Authenticate, send, read the body and classify the status"""
        logger.debug("Sending Zendesk request", method=method, url=url)

        with httpx.Client(
            auth=httpx.BasicAuth(self._config.username, self._config.token),
            timeout=self._config.timeout,
            transport=self._transport,
        ) as client:
            response = client.request(method, url, **kwargs)
            body = response.content

        if not is_success_status(response.status_code):
            logger.warning(
                "Zendesk request failed",
                method=method,
                url=url,
                status=response.status_code,
            )
            raise ZendeskAPIError(
                GENERIC_ERROR_MESSAGE,
                status_code=response.status_code,
                body=body,
                response=response,
            )

        return body, response

    def _prepare_url(self, path: str) -> str:
        return "/".join([self._config.host, API_VERSION, path])
