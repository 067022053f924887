# scoring.py
from __future__ import annotations
from typing import Any, Dict, List

from ..rules.ruleset import DEFAULT_RULES
from ..schemas import Receipt

def score_receipt(receipt: Receipt) -> Dict[str, Any]:
    """
    Returns:
      {
        "points": int (>= 0),
        "reasons": [str]   # one tag per rule that fired, in rule order
      }
    Every rule is evaluated independently; an unreadable field only
    switches off the rules that read it.
    """
    points = 0
    reasons: List[str] = []
    for rule in DEFAULT_RULES:
        inc, why = rule(receipt)
        if inc:
            points += inc; reasons.append(why)
    return {"points": points, "reasons": reasons}

def calculate_points(receipt: Receipt) -> int:
    return score_receipt(receipt)["points"]
