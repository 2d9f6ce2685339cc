from typing import Dict, Type

from ...domain.ports.content_hasher_port import ContentHasherPort, HashAlgorithm
from .blake3_hasher import Blake3ContentHasher
from .sha256_hasher import Sha256ContentHasher

HASHERS: Dict[HashAlgorithm, Type[ContentHasherPort]] = {
    HashAlgorithm.BLAKE3: Blake3ContentHasher,
    HashAlgorithm.SHA256: Sha256ContentHasher,
}

def create_hasher(algorithm: HashAlgorithm) -> ContentHasherPort:
    return HASHERS[algorithm]()

__all__ = [
    "Blake3ContentHasher",
    "Sha256ContentHasher",
    "HASHERS",
    "create_hasher",
]
