from abc import ABC, abstractmethod
from enum import Enum

class HashAlgorithm(Enum):

    BLAKE3 = "blake3"
    SHA256 = "sha256"

class ContentHasherPort(ABC):

    @property
    @abstractmethod
    def algorithm(self) -> HashAlgorithm:
        ...

    @property
    @abstractmethod
    def digest_size(self) -> int:
        ...

    @abstractmethod
    def hash(self, content: bytes) -> bytes:
        """Return the digest of the complete ``content`` buffer."""
        ...
