import pytest

from tracker.domain import Transaction
from tracker.errors import InvalidArgumentError
from tracker.store import StoreListener, TransactionStore


class RecordingListener(StoreListener):
    def __init__(self, name="listener", log=None):
        self.name = name
        self.log = log if log is not None else []
        self.calls = []

    def update(self, store):
        self.calls.append(store)
        self.log.append(self.name)


class FailingListener(StoreListener):
    def update(self, store):
        raise RuntimeError("boom")


def make_store(*pairs):
    store = TransactionStore()
    for amount, category in pairs:
        store.add_transaction(Transaction(amount, category))
    return store


def test_add_appends_and_notifies_once():
    store = TransactionStore()
    listener = RecordingListener()
    store.register(listener)

    store.add_transaction(Transaction(25.0, "Food"))

    assert len(store.get_transactions()) == 1
    assert len(listener.calls) == 1
    assert listener.calls[0] is store
    assert store.get_matched_filter_indices() == []


def test_add_none_raises_without_notifying():
    store = TransactionStore()
    listener = RecordingListener()
    store.register(listener)

    with pytest.raises(InvalidArgumentError):
        store.add_transaction(None)

    assert store.get_transactions() == ()
    assert listener.calls == []


def test_insertion_order_and_net_count():
    a, b, c = Transaction(1.0, "Food"), Transaction(2.0, "Bills"), Transaction(3.0, "Other")
    store = TransactionStore()
    for t in (a, b, c):
        store.add_transaction(t)

    store.remove_transaction(b)
    store.remove_transaction(Transaction(99.0, "Food"))

    assert store.get_transactions() == (a, c)
    assert len(store) == 2


def test_remove_absent_is_noop_but_notifies():
    store = make_store((10.0, "Food"))
    listener = RecordingListener()
    store.register(listener)

    store.remove_transaction(Transaction(5.0, "Travel"))

    assert len(store) == 1
    assert len(listener.calls) == 1


def test_remove_by_value_takes_first_equal():
    store = make_store((10.0, "Food"), (20.0, "Transport"), (10.0, "Food"))
    first, _, last = store.get_transactions()

    store.remove_transaction(Transaction(10.0, "Food"))

    remaining = store.get_transactions()
    assert len(remaining) == 2
    assert remaining[1].id == last.id


def test_remove_prefers_same_id_among_duplicates():
    store = make_store((10.0, "Food"), (20.0, "Transport"), (10.0, "Food"))
    first, middle, last = store.get_transactions()

    store.remove_transaction(last)

    assert [t.id for t in store.get_transactions()] == [first.id, middle.id]


def test_index_of():
    store = make_store((10.0, "Food"), (20.0, "Transport"), (10.0, "Food"))
    rows = store.get_transactions()

    assert store.index_of(rows[2]) == 2
    assert store.index_of(Transaction(10.0, "Food")) == 0
    assert store.index_of(Transaction(1.0, "Food")) == -1
    assert store.index_of(None) == -1


def test_add_and_remove_clear_matched_indices():
    store = make_store((10.0, "Food"), (20.0, "Transport"))
    store.set_matched_filter_indices([0, 1])

    store.add_transaction(Transaction(5.0, "Bills"))
    assert store.get_matched_filter_indices() == []

    store.set_matched_filter_indices([2])
    store.remove_transaction(store.get_transactions()[0])
    assert store.get_matched_filter_indices() == []


def test_set_matched_filter_indices_notifies():
    store = make_store((10.0, "Food"), (20.0, "Transport"))
    listener = RecordingListener()
    store.register(listener)

    store.set_matched_filter_indices([1, 0])

    assert store.get_matched_filter_indices() == [1, 0]
    assert len(listener.calls) == 1


@pytest.mark.parametrize("bad", [[2], [-1], [0, 5], [0, -3], ["0"], [True]])
def test_set_matched_filter_indices_rejects_atomically(bad):
    store = make_store((10.0, "Food"), (20.0, "Transport"))
    store.set_matched_filter_indices([1])
    listener = RecordingListener()
    store.register(listener)

    with pytest.raises(InvalidArgumentError):
        store.set_matched_filter_indices(bad)

    assert store.get_matched_filter_indices() == [1]
    assert listener.calls == []


def test_set_matched_filter_indices_none():
    store = make_store((10.0, "Food"))
    with pytest.raises(InvalidArgumentError):
        store.set_matched_filter_indices(None)


def test_empty_index_list_on_empty_store():
    store = TransactionStore()
    store.set_matched_filter_indices([])
    assert store.get_matched_filter_indices() == []
    with pytest.raises(InvalidArgumentError):
        store.set_matched_filter_indices([0])


def test_accessors_return_copies():
    store = make_store((10.0, "Food"), (20.0, "Transport"))
    indices = [0]
    store.set_matched_filter_indices(indices)

    indices.append(1)
    got = store.get_matched_filter_indices()
    got.append(1)
    snapshot = store.get_transactions()

    assert store.get_matched_filter_indices() == [0]
    assert isinstance(snapshot, tuple)
    store.add_transaction(Transaction(5.0, "Bills"))
    assert len(snapshot) == 2


def test_register_is_idempotent():
    store = TransactionStore()
    listener = RecordingListener()

    assert store.register(listener) is True
    assert store.register(listener) is False
    assert store.register(None) is False
    assert store.number_of_listeners() == 1
    assert store.contains_listener(listener)
    assert not store.contains_listener(RecordingListener())


def test_listeners_notified_in_registration_order():
    log = []
    store = TransactionStore()
    for name in ("first", "second", "third"):
        store.register(RecordingListener(name, log))

    store.add_transaction(Transaction(10.0, "Food"))

    assert log == ["first", "second", "third"]


def test_failing_listener_stops_fan_out_after_mutation():
    store = TransactionStore()
    after = RecordingListener()
    store.register(FailingListener())
    store.register(after)

    with pytest.raises(RuntimeError):
        store.add_transaction(Transaction(10.0, "Food"))

    assert len(store) == 1
    assert after.calls == []
