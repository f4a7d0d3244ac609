"""
SMS Resource
============
Sends messages through the ``/sms/json`` endpoint.
"""

from typing import TYPE_CHECKING
from urllib.parse import urlencode

import pydantic
import structlog

from ..utils import redact
from .models import MessageResponse, SMSMessage

if TYPE_CHECKING:
    from ..client import NexmoClient

logger = structlog.get_logger(__name__)


class SMS:
    """SMS API functions for sending text, binary, WAP push and unicode messages."""

    path = "/sms/json"

    def __init__(self, client: "NexmoClient"):
        self._client = client

    def send(self, message: SMSMessage) -> MessageResponse:
        """
        Send a message.

        Args:
            message: The message to send. It is validated first and never mutated.

        Returns:
            MessageResponse with one MessageReport per segment. Per-recipient
            failures are reported through each report's status, not raised.

        Raises:
            ValidationError: the message is incomplete; nothing was sent.
            httpx.HTTPError: the request failed.
            pydantic.ValidationError: the response body could not be decoded.
        """
        message.validate()

        config = self._client.config
        form = message.to_values()
        if not config.use_oauth:
            form["api_key"] = config.api_key
            form["api_secret"] = config.api_secret

        if config.verbose_logging:
            logger.debug(
                "Sending encoded form",
                form=redact(urlencode(form), config.api_secret),
            )

        response = self._client.request(
            "POST",
            self.path,
            data=form,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

        try:
            return MessageResponse.model_validate_json(response.content)
        except pydantic.ValidationError as e:
            logger.warning(
                "Could not decode send response",
                status_code=response.status_code,
                error=str(e),
            )
            raise
