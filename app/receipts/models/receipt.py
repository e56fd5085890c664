"""
SQLAlchemy model for stored receipts.
"""
from sqlalchemy import Column, String, JSON

from app.receipts.database import Base


class ReceiptModel(Base):
    __tablename__ = "receipts"

    id = Column(String, primary_key=True)
    created_at = Column(String, nullable=False)
    receipt_json = Column(JSON, nullable=False)
