"""Helpers for keeping credentials out of log output."""

from typing import Optional
from urllib.parse import quote, quote_plus


def mask_secret(secret: Optional[str]) -> Optional[str]:
    if not secret:
        return secret

    if len(secret) <= 6:
        return "****"

    return f"{secret[:2]}...{secret[-2:]}"


def redact(text: str, secret: Optional[str]) -> str:
    """Replace every plain or URL-encoded occurrence of ``secret`` in ``text``."""
    if not secret:
        return text

    masked = mask_secret(secret)
    for variant in {secret, quote(secret, safe=""), quote_plus(secret)}:
        text = text.replace(variant, masked)
    return text
