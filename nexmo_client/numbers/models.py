"""
Number Models
=============
Search filters and search results for virtual numbers.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field


@dataclass
class NumberSearchOptions:
    """Filters for a number search. Only sent when both are set."""
    pattern: str = ""
    search_pattern: str = ""


class AvailableNumber(BaseModel):
    """A phone number available for purchase."""
    country: str = ""
    msisdn: str = ""
    type: str = ""
    features: List[str] = Field(default_factory=list)
    cost: Decimal = Decimal("0")


class NumberSearchResponse(BaseModel):
    count: int = 0
    numbers: List[AvailableNumber] = Field(default_factory=list)
