from abc import ABC, abstractmethod
from numbers import Real
from typing import List, Optional, Sequence

from tracker.domain import Transaction
from tracker.errors import InvalidArgumentError

__all__ = ["TransactionFilter", "CategoryFilter", "AmountFilter"]


class TransactionFilter(ABC):
    """Selection strategy over a transaction snapshot.

    Implementations leave the input untouched and return elements taken from
    it, keeping their relative order.
    """

    @abstractmethod
    def filter(self, transactions: Sequence[Transaction]) -> List[Transaction]:
        pass


class CategoryFilter(TransactionFilter):

    def __init__(self, category: str):
        if not isinstance(category, str) or not category.strip():
            raise InvalidArgumentError("The category to filter by must be a non-empty string.")
        self.category = category.strip()

    def filter(self, transactions: Sequence[Transaction]) -> List[Transaction]:
        wanted = self.category.casefold()
        return [t for t in transactions if t.category.casefold() == wanted]

    def __repr__(self) -> str:
        return f"CategoryFilter({self.category!r})"


def _check_bound(name: str, value) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}.")
    return float(value)


class AmountFilter(TransactionFilter):
    """Inclusive amount range; either bound may be left open."""

    def __init__(self, min_amount: Optional[float] = None, max_amount: Optional[float] = None):
        lo = _check_bound("min_amount", min_amount)
        hi = _check_bound("max_amount", max_amount)
        if lo is None and hi is None:
            raise InvalidArgumentError("At least one of min_amount and max_amount is required.")
        if lo is not None and hi is not None and lo > hi:
            raise InvalidArgumentError(f"min_amount {lo} is greater than max_amount {hi}.")
        self.min_amount = lo
        self.max_amount = hi

    def _matches(self, amount: float) -> bool:
        if self.min_amount is not None and amount < self.min_amount:
            return False
        if self.max_amount is not None and amount > self.max_amount:
            return False
        return True

    def filter(self, transactions: Sequence[Transaction]) -> List[Transaction]:
        return [t for t in transactions if self._matches(t.amount)]

    def __repr__(self) -> str:
        return f"AmountFilter(min_amount={self.min_amount}, max_amount={self.max_amount})"
