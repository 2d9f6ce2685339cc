from .content_hasher_port import ContentHasherPort, HashAlgorithm
from .entropy_source_port import EntropyExhaustedError, EntropySourcePort

__all__ = [
    "ContentHasherPort",
    "EntropySourcePort",
    "HashAlgorithm",
    "EntropyExhaustedError",
]
