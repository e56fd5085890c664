"""
Receipt Points schemas

Wire models for receipt submission and points lookup. JSON uses camelCase
field names; Python attributes are snake_case.
"""
from __future__ import annotations

import datetime as dt
import re
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_serializer

from app.receipts.errors import ReceiptValidationError

# ASCII digits only; \d would also accept other Unicode digits
AMOUNT_PATTERN = r"^[0-9]+\.[0-9]{2}$"
DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
TIME_PATTERN = re.compile(r"^[0-9]{2}:[0-9]{2}$")


def _require_text(pattern: re.Pattern, field: str, layout: str):
    """Reject anything but a string in the exact wire layout before pydantic converts it."""
    def check(value):
        if not isinstance(value, str) or not pattern.fullmatch(value):
            raise ReceiptValidationError(f"{field} must be a string formatted as {layout}")
        return value
    return check


PurchaseDate = Annotated[dt.date, BeforeValidator(_require_text(DATE_PATTERN, "purchaseDate", "YYYY-MM-DD"))]
PurchaseTime = Annotated[dt.time, BeforeValidator(_require_text(TIME_PATTERN, "purchaseTime", "HH:MM"))]


# ---------------------------------------------------------------------------
# Submitted receipt
# ---------------------------------------------------------------------------

class Item(BaseModel):
    """A single purchased line item."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: str = Field(
        ..., alias="shortDescription", min_length=1,
        description="Short product description for the item",
    )
    price: str = Field(
        ..., pattern=AMOUNT_PATTERN, description="Item price, e.g. '6.49'"
    )


class Receipt(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    retailer: str = Field(..., min_length=1, description="Retailer or store name")
    purchase_date: PurchaseDate = Field(
        ..., alias="purchaseDate", description="Purchase date, YYYY-MM-DD"
    )
    purchase_time: PurchaseTime = Field(
        ..., alias="purchaseTime", description="Purchase time, 24h HH:MM"
    )
    total: str = Field(..., pattern=AMOUNT_PATTERN, description="Total amount paid")
    items: tuple[Item, ...] = Field(..., min_length=1)

    @field_serializer("purchase_time", when_used="json")
    def dump_purchase_time(self, value: dt.time) -> str:
        return value.strftime("%H:%M")


# ---------------------------------------------------------------------------
# Scoring results
# ---------------------------------------------------------------------------

class RulePoints(BaseModel):
    """Points awarded by one scoring rule, with the reason it fired."""
    rule_id: str
    points: int
    reason: str


class PointsBreakdown(BaseModel):
    rules: list[RulePoints] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(r.points for r in self.rules)


# ---------------------------------------------------------------------------
# API response envelopes
# ---------------------------------------------------------------------------

class ReceiptIdResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int


class ErrorResponse(BaseModel):
    detail: str
