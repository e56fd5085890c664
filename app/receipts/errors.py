"""
Receipt errors

Error taxonomy shared by the store, the scoring engine and the HTTP layer.
"""
from __future__ import annotations


class ReceiptError(Exception):
    """Base class for receipt failures."""


class ReceiptValidationError(ReceiptError, ValueError):
    """Raised when a submitted receipt has malformed or missing fields.

    Field validators raise it inside pydantic, which reports it as a
    validation error; raised directly it maps to 400 as well.
    """

    message = "The receipt is invalid."


class ReceiptNotFoundError(ReceiptError, KeyError):
    """Raised when no receipt is stored under the requested identifier."""

    message = "No receipt found for that ID."

    def __init__(self, receipt_id: str) -> None:
        super().__init__(receipt_id)
        self.receipt_id = receipt_id

    def __str__(self) -> str:
        return f"No receipt stored under {self.receipt_id!r}"


class ReceiptParseError(ReceiptError, ValueError):
    """Raised when a total or item price is not a well-formed decimal."""

    message = "The receipt could not be scored."

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"{field} is not a valid decimal amount: {value!r}")
        self.field = field
        self.value = value
