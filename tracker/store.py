from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Tuple

from tracker.domain import Transaction
from tracker.errors import InvalidArgumentError
from tracker.logging_setup import get_logger

__all__ = ["StoreListener", "TransactionStore"]

logger = get_logger(__name__)


class StoreListener(ABC):

    @abstractmethod
    def update(self, store: "TransactionStore") -> None:
        pass


class TransactionStore:
    """Observable owner of the transaction list and the matched filter rows.

    Every mutation clears or replaces state first and then calls
    ``update(store)`` on each registered listener, in registration order.
    Accessors hand out copies; nothing returned here aliases internal state.
    """

    def __init__(self):
        self._transactions: List[Transaction] = []
        self._matched_filter_indices: List[int] = []
        self._listeners: List[StoreListener] = []

    def __len__(self) -> int:
        return len(self._transactions)

    def add_transaction(self, transaction: Optional[Transaction]) -> None:
        if transaction is None:
            raise InvalidArgumentError("The new transaction must be non-null.")
        self._transactions.append(transaction)
        # row positions from the last filter no longer line up
        self._matched_filter_indices.clear()
        logger.debug("added %r (now %d rows)", transaction, len(self._transactions))
        self.state_changed()

    def remove_transaction(self, transaction: Transaction) -> None:
        idx = self.index_of(transaction)
        if idx != -1:
            del self._transactions[idx]
            logger.debug("removed row %d %r", idx, transaction)
        else:
            logger.debug("remove of absent %r ignored", transaction)
        self._matched_filter_indices.clear()
        self.state_changed()

    def index_of(self, transaction: Optional[Transaction]) -> int:
        """Row of ``transaction``: same ``id`` first, then first equal value, else -1."""
        if transaction is None:
            return -1
        tx_id = getattr(transaction, "id", None)
        for i, t in enumerate(self._transactions):
            if t.id == tx_id:
                return i
        for i, t in enumerate(self._transactions):
            if t == transaction:
                return i
        return -1

    def get_transactions(self) -> Tuple[Transaction, ...]:
        return tuple(self._transactions)

    def set_matched_filter_indices(self, indices: Optional[Iterable[int]]) -> None:
        if indices is None:
            raise InvalidArgumentError("The matched filter indices list must be non-null.")
        new_indices = list(indices)
        size = len(self._transactions)
        for idx in new_indices:
            if isinstance(idx, bool) or not isinstance(idx, int) or idx < 0 or idx >= size:
                raise InvalidArgumentError(
                    "Each matched filter index must be between 0 (inclusive) "
                    f"and the number of transactions {size} (exclusive), got {idx!r}."
                )
        self._matched_filter_indices = new_indices
        logger.debug("matched filter indices set to %s", new_indices)
        self.state_changed()

    def get_matched_filter_indices(self) -> List[int]:
        return list(self._matched_filter_indices)

    def register(self, listener: Optional[StoreListener]) -> bool:
        if listener is None or listener in self._listeners:
            return False
        self._listeners.append(listener)
        return True

    def number_of_listeners(self) -> int:
        return len(self._listeners)

    def contains_listener(self, listener: StoreListener) -> bool:
        return listener in self._listeners

    def state_changed(self) -> None:
        # a failing listener propagates and the rest are not called
        for listener in list(self._listeners):
            listener.update(self)
