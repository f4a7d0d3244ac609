"""
Nexmo Client
============
Entry point holding the configuration and the HTTP client shared by the
SMS and Numbers resources.

Usage:
    from nexmo_client import NexmoClient, SMSMessage

    with NexmoClient.from_api(api_key, api_secret) as nexmo:
        nexmo.sms.send(SMSMessage(from_="Acme", to="447700900000", text="Hi"))
        nexmo.numbers.search_available("US")
"""

import threading
from dataclasses import replace
from typing import Any, Optional

import httpx
import structlog

from .config import NexmoConfig
from .numbers import Numbers
from .sms import SMS
from .utils import redact

logger = structlog.get_logger(__name__)


class NexmoClient:
    """
    Synchronous client for the Nexmo REST API.

    Attributes:
        sms: Messaging resource.
        numbers: Number management resource.
    """

    def __init__(
        self,
        config: Optional[NexmoConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config or NexmoConfig()
        self._transport = transport
        self._client: Optional[httpx.Client] = None
        self._client_lock = threading.Lock()
        self.sms = SMS(self)
        self.numbers = Numbers(self)

    @classmethod
    def from_api(cls, api_key: str, api_secret: str, **kwargs: Any) -> "NexmoClient":
        """Create a client that authenticates with an API key and secret."""
        config = replace(NexmoConfig(), api_key=api_key, api_secret=api_secret, use_oauth=False)
        return cls(config, **kwargs)

    def __enter__(self):
        self._get_client()
        return self

    def __exit__(self, *args):
        self.close()

    def _get_client(self) -> httpx.Client:
        # Resources may be called from several threads at once.
        with self._client_lock:
            if self._client is None:
                self._client = httpx.Client(
                    base_url=self.config.api_root,
                    timeout=self.config.timeout,
                    headers={"Accept": "application/json"},
                    transport=self._transport,
                )
            return self._client

    def close(self):
        with self._client_lock:
            if self._client:
                self._client.close()
                self._client = None

    def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """
        Issue a single request against the API root.

        No retries. ``httpx.HTTPError`` propagates to the caller unchanged.
        """
        client = self._get_client()
        request = client.build_request(method, path, **kwargs)
        verbose = self.config.verbose_logging
        secret = self.config.api_secret

        if verbose:
            logger.debug("Sending request", method=method, url=redact(str(request.url), secret))

        try:
            response = client.send(request)
        except httpx.HTTPError as e:
            logger.warning(
                "Nexmo request failed",
                method=method,
                url=redact(str(request.url), secret),
                error=redact(str(e), secret),
            )
            raise

        if verbose:
            logger.debug("Response status code", status_code=response.status_code)
            logger.debug("Response", body=redact(response.text, secret))

        return response
