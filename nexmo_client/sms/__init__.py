"""
SMS
===
Outbound messages and send responses.
"""

from .models import (
    MAX_CLIENT_REFERENCE_LENGTH,
    MessageClass,
    MessageReport,
    MessageResponse,
    MessageType,
    ResponseCode,
    SMSMessage,
)
from .resource import SMS

__all__ = [
    "SMS",
    "SMSMessage",
    "MessageType",
    "MessageClass",
    "ResponseCode",
    "MessageReport",
    "MessageResponse",
    "MAX_CLIENT_REFERENCE_LENGTH",
]
