"""
SMS Models
==========
Outbound message definition and the provider's send response.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import ValidationError

MAX_CLIENT_REFERENCE_LENGTH = 40


class MessageType(str, Enum):
    TEXT = "text"
    BINARY = "binary"
    WAP_PUSH = "wappush"
    UNICODE = "unicode"
    VCAL = "vcal"
    VCARD = "vcard"


class MessageClass(IntEnum):
    """
    GSM message classes.

    FLASH: shown on screen without being stored unless the user saves it.
    STANDARD: stored in device memory or on the SIM card.
    SIM_DATA: SIM card data, must reach the SIM before acknowledgment.
    FORWARD: forwarded to an external device; acknowledged regardless.
    """
    FLASH = 0
    STANDARD = 1
    SIM_DATA = 2
    FORWARD = 3

    def __str__(self) -> str:
        return MESSAGE_CLASS_NAMES[self]


MESSAGE_CLASS_NAMES = {
    MessageClass.FLASH: "flash",
    MessageClass.STANDARD: "standard",
    MessageClass.SIM_DATA: "SIM data",
    MessageClass.FORWARD: "forward",
}


class ResponseCode(IntEnum):
    """Per-message status codes returned by the send endpoint."""
    SUCCESS = 0
    THROTTLED = 1
    MISSING_PARAMS = 2
    INVALID_PARAMS = 3
    INVALID_CREDENTIALS = 4
    INTERNAL_ERROR = 5
    INVALID_MESSAGE = 6
    NUMBER_BARRED = 7
    PARTNER_ACCOUNT_BARRED = 8
    PARTNER_QUOTA_EXCEEDED = 9
    REST_NOT_ENABLED = 10
    MESSAGE_TOO_LONG = 11
    COMMUNICATION_FAILED = 12
    INVALID_SIGNATURE = 13
    INVALID_SENDER_ADDRESS = 14
    INVALID_TTL = 15
    FACILITY_NOT_ALLOWED = 16
    INVALID_MESSAGE_CLASS = 17

    def __str__(self) -> str:
        return RESPONSE_CODE_NAMES[self]


RESPONSE_CODE_NAMES = {
    ResponseCode.SUCCESS: "Success",
    ResponseCode.THROTTLED: "Throttled",
    ResponseCode.MISSING_PARAMS: "Missing params",
    ResponseCode.INVALID_PARAMS: "Invalid params",
    ResponseCode.INVALID_CREDENTIALS: "Invalid credentials",
    ResponseCode.INTERNAL_ERROR: "Internal error",
    ResponseCode.INVALID_MESSAGE: "Invalid message",
    ResponseCode.NUMBER_BARRED: "Number barred",
    ResponseCode.PARTNER_ACCOUNT_BARRED: "Partner account barred",
    ResponseCode.PARTNER_QUOTA_EXCEEDED: "Partner quota exceeded",
    ResponseCode.REST_NOT_ENABLED: "Account not enabled for REST",
    ResponseCode.MESSAGE_TOO_LONG: "Message too long",
    ResponseCode.COMMUNICATION_FAILED: "Communication failed",
    ResponseCode.INVALID_SIGNATURE: "Invalid signature",
    ResponseCode.INVALID_SENDER_ADDRESS: "Invalid sender address",
    ResponseCode.INVALID_TTL: "Invalid TTL",
    ResponseCode.FACILITY_NOT_ALLOWED: "Facility not allowed",
    ResponseCode.INVALID_MESSAGE_CLASS: "Invalid message class",
}


def _encode_binary(value: Union[bytes, str]) -> str:
    # The API expects hex; strings are assumed to be hex already.
    if isinstance(value, bytes):
        return value.hex()
    return value


@dataclass
class SMSMessage:
    """
    A single outbound message.

    ``body`` and ``udh`` take raw octets as ``bytes``, which are hex-encoded
    for the wire, or an already hex-encoded ``str``, which is sent unchanged.
    Do not pass hex text as ``bytes``; it would be encoded twice.
    """
    from_: str
    to: str
    type: MessageType = MessageType.TEXT
    text: str = ""
    status_report_required: bool = False
    client_reference: str = ""
    network_code: str = ""
    vcard: str = ""
    vcal: str = ""
    ttl: int = 0  # milliseconds
    message_class: Optional[MessageClass] = None
    body: Union[bytes, str] = b""  # binary only
    udh: Union[bytes, str] = b""  # binary only

    # WAP push only
    title: str = ""
    url: str = ""
    validity: int = 0  # milliseconds

    def __post_init__(self):
        try:
            self.type = MessageType(self.type)
        except ValueError as e:
            raise ValidationError(f"Unknown message type: {self.type}") from e

    def validate(self) -> None:
        """Raise ValidationError if the message cannot be sent."""
        if not self.from_:
            raise ValidationError("Invalid From field specified")

        if not self.to:
            raise ValidationError("Invalid To field specified")

        if len(self.client_reference) > MAX_CLIENT_REFERENCE_LENGTH:
            raise ValidationError("Client reference too long")

        if self.type == MessageType.UNICODE:
            if not self.text:
                raise ValidationError("Invalid message text")
        elif self.type == MessageType.BINARY:
            if not self.udh or not self.body:
                raise ValidationError("Invalid binary message")
        elif self.type == MessageType.WAP_PUSH:
            if not self.url or not self.title:
                raise ValidationError("Invalid WAP Push parameters")

    def to_values(self) -> Dict[str, str]:
        """Form fields for the send endpoint. Empty optional fields are left out."""
        values = {
            "from": self.from_,
            "to": self.to,
            "type": self.type.value,
        }
        if self.text:
            values["text"] = self.text
        if self.status_report_required:
            values["status-report-req"] = "1"
        if self.client_reference:
            values["client-ref"] = self.client_reference
        if self.network_code:
            values["network-code"] = self.network_code
        if self.vcard:
            values["vcard"] = self.vcard
        if self.vcal:
            values["vcal"] = self.vcal
        if self.ttl:
            values["ttl"] = str(self.ttl)
        if self.message_class is not None:
            values["message-class"] = str(int(self.message_class))
        if self.body:
            values["body"] = _encode_binary(self.body)
        if self.udh:
            values["udh"] = _encode_binary(self.udh)
        if self.title:
            values["title"] = self.title
        if self.url:
            values["url"] = self.url
        if self.validity:
            values["validity"] = str(self.validity)
        return values


class MessageReport(BaseModel):
    """Status report for one 160-character segment of a sent message."""
    model_config = ConfigDict(populate_by_name=True)

    status: int
    message_id: str = Field("", alias="message-id")
    to: str = ""
    client_reference: str = Field("", alias="client-ref")
    remaining_balance: str = Field("", alias="remaining-balance")
    message_price: str = Field("", alias="message-price")
    network: str = ""
    error_text: str = Field("", alias="error-text")

    @property
    def response_code(self) -> Optional[ResponseCode]:
        """The known ResponseCode for ``status``, or None for codes outside the table."""
        try:
            return ResponseCode(self.status)
        except ValueError:
            return None

    @property
    def ok(self) -> bool:
        return self.status == ResponseCode.SUCCESS


class MessageResponse(BaseModel):
    """Send response. Holds one MessageReport per segment, in provider order."""
    model_config = ConfigDict(populate_by_name=True)

    message_count: int = Field(alias="message-count")
    messages: List[MessageReport] = Field(default_factory=list)
