from abc import ABC, abstractmethod
from typing import List, Optional

from tracker.domain import Transaction
from tracker.filters import TransactionFilter
from tracker.logging_setup import get_logger
from tracker.store import StoreListener, TransactionStore
from tracker.validation import InputValidation

__all__ = ["NO_FILTER_MESSAGE", "TrackerView", "TrackerController"]

logger = get_logger(__name__)

NO_FILTER_MESSAGE = "No filter applied"


class TrackerView(ABC):
    """What the controller needs from a presentation layer."""

    @abstractmethod
    def on_store_changed(self, store: TransactionStore) -> None:
        pass

    @abstractmethod
    def show_advisory(self, message: str) -> None:
        pass


class TrackerController(StoreListener):
    """Validates input, runs the active filter and relays store changes to the view.

    The controller registers itself on the store when constructed, so every
    store mutation ends up in ``view.on_store_changed``.
    """

    def __init__(self, store: TransactionStore, view: TrackerView, validator: Optional[InputValidation] = None):
        self.store = store
        self.view = view
        self.validator = validator if validator is not None else InputValidation()
        self._filter: Optional[TransactionFilter] = None
        self.store.register(self)

    @property
    def filter(self) -> Optional[TransactionFilter]:
        return self._filter

    def set_filter(self, strategy: Optional[TransactionFilter]) -> None:
        self._filter = strategy

    def add_transaction(self, amount: float, category: str) -> bool:
        if not self.validator.is_valid_amount(amount) or not self.validator.is_valid_category(category):
            logger.info("rejected transaction amount=%r category=%r", amount, category)
            return False

        canonical = getattr(self.validator, "canonical_category", None)
        spelled = canonical(category) if canonical is not None else category.strip()
        t = Transaction(float(amount), spelled)
        self.store.add_transaction(t)
        return True

    def apply_filter(self) -> None:
        if self._filter is None:
            self.view.show_advisory(NO_FILTER_MESSAGE)
            return

        transactions = self.store.get_transactions()
        filtered = self._filter.filter(transactions)
        row_indexes: List[int] = []
        for t in filtered:
            row = self.store.index_of(t)
            if row != -1:
                row_indexes.append(row)
        logger.debug("%r matched rows %s", self._filter, row_indexes)
        self.store.set_matched_filter_indices(row_indexes)

    def undo_transaction(self, row_index: int) -> bool:
        transactions = self.store.get_transactions()
        if isinstance(row_index, bool) or not isinstance(row_index, int):
            return False
        if 0 <= row_index < len(transactions):
            self.store.remove_transaction(transactions[row_index])
            return True
        logger.info("undo of row %d refused; %d rows", row_index, len(transactions))
        return False

    def update(self, store: TransactionStore) -> None:
        self.view.on_store_changed(store)
