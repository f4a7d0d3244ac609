"""
Numbers Resource
================
Search, buy and cancel virtual numbers.

The provider takes the API key and secret as path segments:

    GET  /number/search/{api_key}/{api_secret}/{country}?pattern=..&search_pattern=..
    POST /number/buy/{api_key}/{api_secret}/{country}/{msisdn}
    POST /number/cancel/{api_key}/{api_secret}/{country}/{msisdn}
"""

from typing import Optional, TYPE_CHECKING
from urllib.parse import quote

import structlog

from ..exceptions import (
    AuthenticationError,
    BadParametersError,
    ProviderError,
    ValidationError,
)
from ..utils import redact
from .models import NumberSearchOptions, NumberSearchResponse

if TYPE_CHECKING:
    from ..client import NexmoClient

logger = structlog.get_logger(__name__)


class Numbers:
    """Number management API functions."""

    def __init__(self, client: "NexmoClient"):
        self._client = client

    def _path(self, action: str, *segments: str) -> str:
        config = self._client.config
        parts = (action, config.api_key, config.api_secret) + segments
        return "/number/" + "/".join(quote(part, safe="") for part in parts)

    def search_available(self, country: str) -> NumberSearchResponse:
        """Search for available phone numbers in a country."""
        return self.search_available_with_options(country, NumberSearchOptions())

    def search_available_with_options(
        self,
        country: str,
        options: Optional[NumberSearchOptions] = None,
    ) -> NumberSearchResponse:
        """
        Search for available phone numbers in a country, filtered by a pattern.

        The pattern filter is only applied when both ``options.pattern`` and
        ``options.search_pattern`` are set; otherwise neither is sent.

        Failures are signalled by the provider in the payload, so the HTTP
        status is not checked here.
        """
        if not country:
            raise ValidationError("Invalid country code field specified")

        options = options or NumberSearchOptions()
        params = None
        if options.pattern and options.search_pattern:
            params = {
                "pattern": options.pattern,
                "search_pattern": options.search_pattern,
            }

        response = self._client.request("GET", self._path("search", country), params=params)
        return NumberSearchResponse.model_validate_json(response.content)

    def buy_phone_number(self, country: str, msisdn: str) -> bool:
        """Buy a phone number. Returns True on success, raises otherwise."""
        return self._update_number("buy", country, msisdn)

    def cancel_phone_number(self, country: str, msisdn: str) -> bool:
        """Cancel a phone number. Returns True on success, raises otherwise."""
        return self._update_number("cancel", country, msisdn)

    def _update_number(self, action: str, country: str, msisdn: str) -> bool:
        if not country:
            raise ValidationError("Invalid country code field specified")

        if not msisdn:
            raise ValidationError("Invalid number field specified")

        response = self._client.request("POST", self._path(action, country, msisdn))
        status = response.status_code
        if status == 200:
            return True

        logger.warning(
            "Number request rejected",
            action=action,
            country=country,
            msisdn=msisdn,
            status_code=status,
        )
        details = redact(response.text, self._client.config.api_secret)
        if status == 401:
            raise AuthenticationError("Wrong credentials", status_code=status, details=details)
        if status == 420:
            raise BadParametersError("Bad parameters", status_code=status, details=details)
        raise ProviderError("Other error", status_code=status, details=details)
