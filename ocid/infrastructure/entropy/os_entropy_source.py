import secrets

from ...domain.ports.entropy_source_port import EntropySourcePort

class OsEntropySource(EntropySourcePort):

    def read(self, size: int) -> bytes:
        return secrets.token_bytes(size)
