from dataclasses import dataclass
from typing import Optional

from ...domain.ports.content_hasher_port import HashAlgorithm

@dataclass
class HashingConfig:

    enabled: bool = True
    algorithm: HashAlgorithm = HashAlgorithm.BLAKE3

@dataclass
class EntropyConfig:

    enabled: bool = True
    seed: Optional[int] = None

    @property
    def is_deterministic(self) -> bool:
        return self.seed is not None

@dataclass
class ContainerConfig:

    hashing: HashingConfig = None
    entropy: EntropyConfig = None

    def __post_init__(self) -> None:
        if self.hashing is None:
            self.hashing = HashingConfig()
        if self.entropy is None:
            self.entropy = EntropyConfig()

    @classmethod
    def default(cls) -> "ContainerConfig":
        return cls()

    @classmethod
    def deterministic(
        cls,
        seed: int,
        algorithm: HashAlgorithm = HashAlgorithm.BLAKE3,
    ) -> "ContainerConfig":
        return cls(
            hashing=HashingConfig(algorithm=algorithm),
            entropy=EntropyConfig(seed=seed),
        )
