# receipt_points/rules/ruleset.py
from decimal import Decimal, ROUND_CEILING, localcontext
from typing import Callable, List, Tuple

from ..schemas import Item, Receipt
from .parsing import parse_amount, parse_date, is_within_time_range

# -----------------------------
# Tunables
# -----------------------------
POINTS = {
    "round_dollar_total": 50,
    "quarter_multiple_total": 25,
    "per_item_pair": 5,
    "odd_purchase_day": 6,
    "afternoon_purchase": 10,
}

QUARTERS_PER_DOLLAR = 4
ITEM_PRICE_RATE = Decimal("0.2")
DESCRIPTION_LENGTH_MULTIPLE = 3
AFTERNOON_WINDOW = ("14:00", "16:00")

# Each rule returns (points, reason); points == 0 means the rule did not fire.
Rule = Callable[[Receipt], Tuple[int, str]]

# -----------------------------
# Helpers
# -----------------------------
def count_alphanumeric(s: str) -> int:
    return sum(1 for ch in s if ch.isalnum())

def is_round_dollar_amount(total: str) -> bool:
    parts = total.split(".")
    return len(parts) == 2 and parts[1] == "00"

def is_multiple_of_quarter(total: str) -> bool:
    # exact at any magnitude: amount is a multiple of 0.25 iff amount * 4 is whole
    _, digits, exp = parse_amount(total).as_tuple()
    if exp >= 0:
        return True
    coeff = int(Decimal((0, digits, 0)))
    if coeff == 0:
        return True
    # coeff * 4 has at most len(digits) + 1 digits, so it can't carry more trailing zeros
    if -exp > len(digits) + 1:
        return False
    return (coeff * QUARTERS_PER_DOLLAR) % 10 ** -exp == 0

def description_length(description: str) -> int:
    """Length of the trimmed description in UTF-8 bytes."""
    return len(description.strip().encode("utf-8"))

def item_description_points(item: Item) -> int:
    if description_length(item.short_description) % DESCRIPTION_LENGTH_MULTIPLE != 0:
        return 0
    price = parse_amount(item.price)
    try:
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, len(price.as_tuple().digits) + 2)
            points = int((price * ITEM_PRICE_RATE).to_integral_value(rounding=ROUND_CEILING))
    except ArithmeticError:
        return 0
    return max(points, 0)

def is_purchase_day_odd(purchase_date: str) -> bool:
    d = parse_date(purchase_date)
    return d is not None and d.day % 2 == 1

# -----------------------------
# Rules
# -----------------------------
def retailer_name(receipt: Receipt) -> Tuple[int, str]:
    return count_alphanumeric(receipt.retailer), "retailer_alphanumeric"

def round_dollar_total(receipt: Receipt) -> Tuple[int, str]:
    hit = is_round_dollar_amount(receipt.total)
    return (POINTS["round_dollar_total"] if hit else 0), "round_dollar_total"

def quarter_multiple_total(receipt: Receipt) -> Tuple[int, str]:
    hit = is_multiple_of_quarter(receipt.total)
    return (POINTS["quarter_multiple_total"] if hit else 0), "quarter_multiple_total"

def item_pairs(receipt: Receipt) -> Tuple[int, str]:
    return (len(receipt.items) // 2) * POINTS["per_item_pair"], "item_pairs"

def item_descriptions(receipt: Receipt) -> Tuple[int, str]:
    return sum(item_description_points(i) for i in receipt.items), "item_descriptions"

def odd_purchase_day(receipt: Receipt) -> Tuple[int, str]:
    hit = is_purchase_day_odd(receipt.purchase_date)
    return (POINTS["odd_purchase_day"] if hit else 0), "odd_purchase_day"

def afternoon_purchase(receipt: Receipt) -> Tuple[int, str]:
    hit = is_within_time_range(receipt.purchase_time, *AFTERNOON_WINDOW)
    return (POINTS["afternoon_purchase"] if hit else 0), "afternoon_purchase"

DEFAULT_RULES: List[Rule] = [
    retailer_name,
    round_dollar_total,
    quarter_multiple_total,
    item_pairs,
    item_descriptions,
    odd_purchase_day,
    afternoon_purchase,
]
