"""
Rule-based receipt scoring.

Every rule is independent and deterministic. A rule returns the points it
awards together with the reason, or ``None`` when it does not fire.
"""
from __future__ import annotations

from decimal import Decimal

from app.receipts.schemas import Receipt, RulePoints
from app.receipts.scoring.parsing import (
    combine_purchase_moment,
    parse_amount,
    round_up,
)

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
POINTS_PER_ITEM_PAIR = 5
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
# hour * 100 + minute, both bounds exclusive
AFTERNOON_START = 1400
AFTERNOON_END = 1560


def _is_ascii_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------

def check_retailer_name(receipt: Receipt) -> RulePoints | None:
    """+1 per ASCII alphanumeric character in the retailer name."""
    count = sum(1 for ch in receipt.retailer if _is_ascii_alnum(ch))
    if count == 0:
        return None
    return RulePoints(
        rule_id="retailer_name",
        points=count,
        reason=f'the retailer name, "{receipt.retailer}", has {count} alphanumeric characters',
    )


def check_round_dollar_total(receipt: Receipt) -> RulePoints | None:
    """+50 when the total has no cents."""
    total = parse_amount(receipt.total, "total")
    if total != int(total):
        return None
    return RulePoints(
        rule_id="round_dollar_total",
        points=ROUND_DOLLAR_POINTS,
        reason=f"total is ${total:.2f}, a round dollar amount",
    )


def check_quarter_multiple_total(receipt: Receipt) -> RulePoints | None:
    """+25 when the total in whole cents is a multiple of 25."""
    total = parse_amount(receipt.total, "total")
    if int(total * 100) % 25 != 0:
        return None
    return RulePoints(
        rule_id="quarter_multiple_total",
        points=QUARTER_MULTIPLE_POINTS,
        reason=f"the total, ${total:.2f}, is a multiple of 0.25",
    )


def check_item_pairs(receipt: Receipt) -> RulePoints | None:
    """+5 for every two items."""
    n_items = len(receipt.items)
    points = n_items // 2 * POINTS_PER_ITEM_PAIR
    if points == 0:
        return None
    return RulePoints(
        rule_id="item_pairs",
        points=points,
        reason=f"{n_items} items (5 points for every two items)",
    )


def check_item_description_length(receipt: Receipt) -> RulePoints | None:
    """price * 0.2, rounded up, for each item whose trimmed description
    length in UTF-8 bytes is a nonzero multiple of 3."""
    points = 0
    details: list[str] = []
    for item in receipt.items:
        desc = item.short_description.strip()
        length = len(desc.encode("utf-8"))
        if length == 0 or length % 3 != 0:
            continue
        price = parse_amount(item.price, "price")
        reduced = price * DESCRIPTION_PRICE_MULTIPLIER
        awarded = round_up(reduced)
        points += awarded
        details.append(
            f'"{desc}" is {length} bytes, ${price:.2f} * 0.2 = ${reduced:.2f} -> {awarded}'
        )

    if not details:
        return None
    return RulePoints(
        rule_id="item_description_length",
        points=points,
        reason="; ".join(details),
    )


def check_llm_generated(receipt: Receipt) -> RulePoints | None:
    """Never awards points."""
    return None


def check_odd_purchase_day(receipt: Receipt) -> RulePoints | None:
    """+6 when the day of the purchase date is odd."""
    day = receipt.purchase_date.day
    if day % 2 == 0:
        return None
    return RulePoints(
        rule_id="odd_purchase_day",
        points=ODD_DAY_POINTS,
        reason=f"the day, {day}, is odd",
    )


def check_afternoon_purchase(receipt: Receipt) -> RulePoints | None:
    """+10 when hour*100+minute falls strictly between 1400 and 1560."""
    moment = combine_purchase_moment(receipt.purchase_date, receipt.purchase_time)
    hhmm = moment.hour * 100 + moment.minute
    if not (AFTERNOON_START < hhmm < AFTERNOON_END):
        return None
    return RulePoints(
        rule_id="afternoon_purchase",
        points=AFTERNOON_POINTS,
        reason=f"the time is {moment:%H:%M}, which is between 2pm and 4pm",
    )


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

SCORING_RULES = [
    check_retailer_name,
    check_round_dollar_total,
    check_quarter_multiple_total,
    check_item_pairs,
    check_item_description_length,
    check_llm_generated,
    check_odd_purchase_day,
    check_afternoon_purchase,
]


def apply_rules(receipt: Receipt) -> list[RulePoints]:
    """Run every registered rule and return the ones that fired, in order."""
    fired: list[RulePoints] = []
    for fn in SCORING_RULES:
        result = fn(receipt)
        if result is not None:
            fired.append(result)
    return fired
