import math
from numbers import Real
from typing import Iterable, Optional, Tuple

from tracker import config


class InputValidation:
    """Amount and category checks consulted before a transaction is created.

    Allowed categories and the amount ceiling default to the values in
    ``tracker.config``; category comparison ignores case.
    """

    def __init__(self, categories: Optional[Iterable[str]] = None, max_amount: Optional[float] = None):
        cats = tuple(categories) if categories is not None else config.allowed_categories()
        self._categories: Tuple[str, ...] = tuple(c.strip() for c in cats if c and c.strip())
        self._allowed = {c.casefold() for c in self._categories}
        self.max_amount = float(max_amount) if max_amount is not None else config.max_amount()

    @property
    def categories(self) -> Tuple[str, ...]:
        return self._categories

    def is_valid_amount(self, amount) -> bool:
        if isinstance(amount, bool) or not isinstance(amount, Real):
            return False
        amount = float(amount)
        return math.isfinite(amount) and 0 < amount <= self.max_amount

    def is_valid_category(self, category) -> bool:
        if not isinstance(category, str) or not category.strip():
            return False
        return category.strip().casefold() in self._allowed

    def canonical_category(self, category: str) -> str:
        """Display spelling of an allowed category, e.g. ``"food"`` -> ``"Food"``."""
        key = category.strip().casefold()
        return next((c for c in self._categories if c.casefold() == key), category.strip())
