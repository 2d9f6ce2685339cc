import logging
from typing import Optional

from ...application.services.content_id_service import ContentIdService
from ...domain.ports.content_hasher_port import ContentHasherPort, HashAlgorithm
from ...domain.ports.entropy_source_port import EntropySourcePort
from ...domain.value_objects.content_id import CONTENT_ID_SIZE
from ..entropy import OsEntropySource, SeededEntropySource
from ..hashing import create_hasher
from .config import ContainerConfig, EntropyConfig, HashingConfig

logger = logging.getLogger(__name__)

class Container:

    def __init__(self, config: Optional[ContainerConfig] = None) -> None:
        self._config = config or ContainerConfig()

        self._hasher: Optional[ContentHasherPort] = None
        self._entropy_source: Optional[EntropySourcePort] = None
        self._content_id_service: Optional[ContentIdService] = None

    @property
    def config(self) -> ContainerConfig:
        return self._config

    @property
    def hasher(self) -> Optional[ContentHasherPort]:
        if not self._config.hashing.enabled:
            return None
        if self._hasher is None:
            hasher = create_hasher(self._config.hashing.algorithm)
            if hasher.digest_size != CONTENT_ID_SIZE:
                raise ValueError(
                    f"{hasher.algorithm.value} digest is {hasher.digest_size} "
                    f"bytes; content IDs need {CONTENT_ID_SIZE}"
                )
            self._hasher = hasher
            logger.debug(
                "Initialized %s hasher",
                self._config.hashing.algorithm.value,
            )
        return self._hasher

    @property
    def entropy_source(self) -> Optional[EntropySourcePort]:
        if not self._config.entropy.enabled:
            return None
        if self._entropy_source is None:
            if self._config.entropy.is_deterministic:
                self._entropy_source = SeededEntropySource(
                    self._config.entropy.seed
                )
                logger.debug(
                    "Initialized seeded entropy source (seed=%s)",
                    self._config.entropy.seed,
                )
            else:
                self._entropy_source = OsEntropySource()
                logger.debug("Initialized OS entropy source")
        return self._entropy_source

    @property
    def content_id_service(self) -> ContentIdService:
        if self._content_id_service is None:
            self._content_id_service = ContentIdService(
                hasher=self.hasher,
                entropy_source=self.entropy_source,
            )
            logger.debug(
                "Initialized content ID service (hashing=%s, entropy=%s)",
                self._config.hashing.enabled,
                self._config.entropy.enabled,
            )
        return self._content_id_service

def create_container(
    algorithm: HashAlgorithm = HashAlgorithm.BLAKE3,
    seed: Optional[int] = None,
    enable_hashing: bool = True,
    enable_entropy: bool = True,
) -> Container:
    config = ContainerConfig(
        hashing=HashingConfig(enabled=enable_hashing, algorithm=algorithm),
        entropy=EntropyConfig(enabled=enable_entropy, seed=seed),
    )

    return Container(config)
