from app.receipts.schemas.base import (
    AMOUNT_PATTERN,
    ErrorResponse,
    Item,
    PointsBreakdown,
    PointsResponse,
    Receipt,
    ReceiptIdResponse,
    RulePoints,
)

__all__ = [
    "AMOUNT_PATTERN",
    "ErrorResponse",
    "Item",
    "PointsBreakdown",
    "PointsResponse",
    "Receipt",
    "ReceiptIdResponse",
    "RulePoints",
]
