from .os_entropy_source import OsEntropySource
from .seeded_entropy_source import FixedEntropySource, SeededEntropySource

__all__ = [
    "OsEntropySource",
    "SeededEntropySource",
    "FixedEntropySource",
]
