import blake3

from ...domain.ports.content_hasher_port import ContentHasherPort, HashAlgorithm

class Blake3ContentHasher(ContentHasherPort):

    DIGEST_SIZE = 32

    @property
    def algorithm(self) -> HashAlgorithm:
        return HashAlgorithm.BLAKE3

    @property
    def digest_size(self) -> int:
        return self.DIGEST_SIZE

    def hash(self, content: bytes) -> bytes:
        return blake3.blake3(content).digest(length=self.DIGEST_SIZE)
