# receipt_points/repository.py
import threading
from typing import Dict, Optional

class DuplicateReceiptId(ValueError):
    pass

class ScoreStore:
    """
    In-memory receipt id -> points map shared by all requests.

    Records are insert-only and live as long as the process. Every read and
    write happens under one lock, so a reader sees either no record or the
    complete one.
    """

    def __init__(self) -> None:
        self._points: Dict[str, int] = {}
        self._lock = threading.Lock()

    def put(self, receipt_id: str, points: int) -> None:
        with self._lock:
            if receipt_id in self._points:
                raise DuplicateReceiptId(f"Receipt id already stored: {receipt_id!r}")
            self._points[receipt_id] = points

    def get(self, receipt_id: str) -> Optional[int]:
        with self._lock:
            return self._points.get(receipt_id)

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._points

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)

_store = ScoreStore()

def get_store() -> ScoreStore:
    return _store
