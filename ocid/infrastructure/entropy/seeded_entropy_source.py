import random
import threading
from typing import Optional

from ...domain.ports.entropy_source_port import (
    EntropyExhaustedError,
    EntropySourcePort,
)

class SeededEntropySource(EntropySourcePort):
    """Reproducible pseudo-random bytes. Not suitable outside of tests."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._seed = seed
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def read(self, size: int) -> bytes:
        with self._lock:
            return self._rng.randbytes(size)

class FixedEntropySource(EntropySourcePort):
    """Replays ``data`` in order and fails once it runs out."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._offset = 0
        self._lock = threading.Lock()

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def read(self, size: int) -> bytes:
        with self._lock:
            available = len(self._data) - self._offset
            if size > available:
                raise EntropyExhaustedError(size, available)
            chunk = self._data[self._offset:self._offset + size]
            self._offset += size
            return chunk
