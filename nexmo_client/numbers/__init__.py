"""
Numbers
=======
Virtual number search, purchase and cancellation.
"""

from .models import AvailableNumber, NumberSearchOptions, NumberSearchResponse
from .resource import Numbers

__all__ = [
    "Numbers",
    "NumberSearchOptions",
    "AvailableNumber",
    "NumberSearchResponse",
]
