"""
Nexmo Client Configuration
==========================
Credentials and transport settings shared by every resource.
"""

import os
from dataclasses import dataclass, field

DEFAULT_API_ROOT = "https://rest.nexmo.com"

_TRUTHY = ("1", "true", "yes", "on")


def _env_str(name: str, default: str = ""):
    return lambda: os.environ.get(name, default)


def _env_bool(name: str):
    return lambda: os.environ.get(name, "").strip().lower() in _TRUTHY


def _env_float(name: str, default: float):
    return lambda: float(os.environ.get(name) or default)


@dataclass(frozen=True)
class NexmoConfig:
    """
    Immutable client configuration.

    Unset fields are read from the environment when the instance is created:
    NEXMO_API_ROOT, NEXMO_API_KEY, NEXMO_API_SECRET, NEXMO_USE_OAUTH,
    NEXMO_VERBOSE_LOGGING and NEXMO_TIMEOUT.
    """
    api_root: str = field(default_factory=_env_str("NEXMO_API_ROOT", DEFAULT_API_ROOT))
    api_key: str = field(default_factory=_env_str("NEXMO_API_KEY"))
    api_secret: str = field(default_factory=_env_str("NEXMO_API_SECRET"), repr=False)
    # When set, api_key/api_secret are not stamped onto outbound messages.
    use_oauth: bool = field(default_factory=_env_bool("NEXMO_USE_OAUTH"))
    # Logs request and response bodies at debug level. Secrets are masked.
    verbose_logging: bool = field(default_factory=_env_bool("NEXMO_VERBOSE_LOGGING"))
    timeout: float = field(default_factory=_env_float("NEXMO_TIMEOUT", 30.0))
