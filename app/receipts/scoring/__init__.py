"""
Receipt scoring engine.

Pure functions: a receipt goes in, points come out. No I/O, no shared state.
"""
from app.receipts.schemas import PointsBreakdown, Receipt
from app.receipts.scoring.rules import SCORING_RULES, apply_rules


def calculate_points(receipt: Receipt) -> PointsBreakdown:
    """Score ``receipt`` rule by rule.

    Raises ``ReceiptParseError`` if the total or a scored item price is not
    a valid decimal; no partial breakdown is returned in that case.
    """
    return PointsBreakdown(rules=apply_rules(receipt))


def score(receipt: Receipt) -> int:
    return calculate_points(receipt).total


__all__ = ["SCORING_RULES", "calculate_points", "score"]
