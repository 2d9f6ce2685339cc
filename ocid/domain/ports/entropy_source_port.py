from abc import ABC, abstractmethod

class EntropyExhaustedError(Exception):

    def __init__(self, requested: int, available: int):
        super().__init__(
            f"Entropy source exhausted: requested {requested} bytes, "
            f"{available} available"
        )
        self.requested = requested
        self.available = available

class EntropySourcePort(ABC):

    @abstractmethod
    def read(self, size: int) -> bytes:
        """Return exactly ``size`` random bytes or raise."""
        ...
