from app.receipts.models.receipt import ReceiptModel

__all__ = ["ReceiptModel"]
