"""
Receipt Points API endpoints.

POST /receipts/process        — store a receipt, return its id
GET  /receipts/{id}/points    — score a stored receipt
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.receipts.errors import ReceiptNotFoundError
from app.receipts.schemas import (
    ErrorResponse,
    PointsResponse,
    Receipt,
    ReceiptIdResponse,
)
from app.receipts.scoring import calculate_points
from app.receipts.store import ReceiptStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()


# ── POST /receipts/process ───────────────────────────────────────────────
@router.post(
    "/receipts/process",
    response_model=ReceiptIdResponse,
    responses={400: {"model": ErrorResponse}},
)
def process_receipt(receipt: Receipt, store: ReceiptStore = Depends(get_store)):
    logger.info(
        "Process: retailer=%r  items=%d", receipt.retailer, len(receipt.items)
    )
    receipt_id = store.put(receipt)
    logger.info("Stored receipt %s", receipt_id)
    return ReceiptIdResponse(id=receipt_id)


# ── GET /receipts/{receipt_id}/points ────────────────────────────────────
@router.get(
    "/receipts/{receipt_id}/points",
    response_model=PointsResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_points(receipt_id: str, store: ReceiptStore = Depends(get_store)):
    logger.info("Fetching points: %s", receipt_id)
    try:
        receipt = store.get(receipt_id)
    except ReceiptNotFoundError as e:
        logger.warning("Receipt not found: %s", receipt_id)
        raise HTTPException(status_code=404, detail=e.message)

    breakdown = calculate_points(receipt)
    for rule in breakdown.rules:
        logger.debug("%d points - %s", rule.points, rule.reason)
    logger.info("Receipt %s scored %d points", receipt_id, breakdown.total)
    return PointsResponse(points=breakdown.total)
