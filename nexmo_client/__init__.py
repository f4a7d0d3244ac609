"""
Nexmo Client Library
====================
Client binding for the Nexmo SMS and Numbers APIs.
"""

__version__ = "0.1.0"

from nexmo_client.client import NexmoClient
from nexmo_client.config import NexmoConfig

from nexmo_client.exceptions import (
    NexmoError,
    ValidationError,
    ProviderError,
    AuthenticationError,
    BadParametersError,
)

# SMS
from nexmo_client.sms import (
    SMS,
    SMSMessage,
    MessageType,
    MessageClass,
    ResponseCode,
    MessageReport,
    MessageResponse,
)

# Numbers
from nexmo_client.numbers import (
    Numbers,
    NumberSearchOptions,
    AvailableNumber,
    NumberSearchResponse,
)

__all__ = [
    "__version__",
    "NexmoClient",
    "NexmoConfig",
    "NexmoError",
    "ValidationError",
    "ProviderError",
    "AuthenticationError",
    "BadParametersError",
    "SMS",
    "SMSMessage",
    "MessageType",
    "MessageClass",
    "ResponseCode",
    "MessageReport",
    "MessageResponse",
    "Numbers",
    "NumberSearchOptions",
    "AvailableNumber",
    "NumberSearchResponse",
]
