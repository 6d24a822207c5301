import dataclasses
import threading
from typing import Callable, Dict, Optional
from uuid import uuid4

from models import Receipt


def generate_receipt_id() -> str:
    return str(uuid4())


class ReceiptStore:
    """
    In-memory mapping of receipt id -> receipt, shared by all request threads.

    Every read and write of the mapping goes through a single lock. Only the
    dictionary access itself is done while holding it; id generation happens
    before the lock is taken. Receipts are frozen and their items are stored as
    a tuple, so the stored object can be handed out directly without copying.
    """

    def __init__(self, id_factory: Optional[Callable[[], str]] = None):
        self._id_factory = id_factory or generate_receipt_id
        self._receipts: Dict[str, Receipt] = {}
        self._lock = threading.Lock()

    def insert(self, receipt: Receipt) -> str:
        if not isinstance(receipt.items, tuple):
            receipt = dataclasses.replace(receipt, items=tuple(receipt.items))
        receipt_id = self._id_factory()
        with self._lock:
            self._receipts[receipt_id] = receipt
        return receipt_id

    def get(self, receipt_id: str) -> Optional[Receipt]:
        with self._lock:
            return self._receipts.get(receipt_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)
