from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4


def _now() -> str:
    return datetime.now().isoformat(timespec="seconds")


@dataclass(frozen=True)
class Transaction:
    amount: float
    category: str
    # excluded from equality: two entries with the same amount and category are equal
    timestamp: str = field(default_factory=_now, compare=False)
    id: str = field(default_factory=lambda: uuid4().hex, compare=False, repr=False)
