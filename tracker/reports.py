from functools import reduce
from typing import Dict, Iterable, Sequence, Tuple

from tracker.domain import Transaction


def total_amount(trans: Iterable[Transaction]) -> float:
    return reduce(lambda acc, t: acc + t.amount, trans, 0.0)


def category_totals(trans: Iterable[Transaction]) -> Dict[str, float]:
    totals: Dict[str, float] = {}
    for t in trans:
        totals[t.category] = totals.get(t.category, 0.0) + t.amount
    return totals


def matched_transactions(
    trans: Sequence[Transaction], indices: Iterable[int]
) -> Tuple[Transaction, ...]:
    return tuple(trans[i] for i in indices if 0 <= i < len(trans))
