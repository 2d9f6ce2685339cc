import hashlib

from ...domain.ports.content_hasher_port import ContentHasherPort, HashAlgorithm

class Sha256ContentHasher(ContentHasherPort):

    @property
    def algorithm(self) -> HashAlgorithm:
        return HashAlgorithm.SHA256

    @property
    def digest_size(self) -> int:
        return hashlib.sha256().digest_size

    def hash(self, content: bytes) -> bytes:
        return hashlib.sha256(content).digest()
