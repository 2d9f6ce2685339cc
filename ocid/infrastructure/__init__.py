from .container import Container, ContainerConfig, create_container
from .entropy import FixedEntropySource, OsEntropySource, SeededEntropySource
from .hashing import Blake3ContentHasher, Sha256ContentHasher, create_hasher

__all__ = [
    "Container",
    "ContainerConfig",
    "create_container",
    "Blake3ContentHasher",
    "Sha256ContentHasher",
    "create_hasher",
    "OsEntropySource",
    "SeededEntropySource",
    "FixedEntropySource",
]
