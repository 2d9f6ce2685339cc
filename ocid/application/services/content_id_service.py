import logging
from typing import Optional

from ...domain.errors import DecodeError
from ...domain.ports.content_hasher_port import ContentHasherPort
from ...domain.ports.entropy_source_port import EntropySourcePort
from ...domain.value_objects.content_id import ContentId

logger = logging.getLogger(__name__)

class CapabilityUnavailableError(RuntimeError):

    def __init__(self, capability: str):
        super().__init__(f"{capability} capability is disabled")
        self.capability = capability

class ContentIdService:

    def __init__(
        self,
        hasher: Optional[ContentHasherPort] = None,
        entropy_source: Optional[EntropySourcePort] = None,
    ) -> None:
        self._hasher = hasher
        self._entropy_source = entropy_source

    @property
    def can_identify(self) -> bool:
        return self._hasher is not None

    @property
    def can_generate(self) -> bool:
        return self._entropy_source is not None

    def identify(self, content: bytes) -> ContentId:
        if self._hasher is None:
            raise CapabilityUnavailableError("hashing")

        content_id = ContentId.from_content(content, self._hasher)
        logger.debug(
            "Identified %d bytes as %s (%s)",
            len(content),
            content_id,
            self._hasher.algorithm.value,
        )
        return content_id

    def identify_text(self, text: str) -> ContentId:
        return self.identify(text.encode("utf-8"))

    def generate(self) -> ContentId:
        if self._entropy_source is None:
            raise CapabilityUnavailableError("entropy")

        content_id = ContentId.random(self._entropy_source)
        logger.debug("Generated random content ID %s", content_id)
        return content_id

    def parse(self, text: str) -> ContentId:
        return ContentId.from_text(text)

    def from_raw_bytes(self, data: bytes) -> ContentId:
        return ContentId.from_raw_bytes(data)

    def is_valid(self, text: str) -> bool:
        try:
            ContentId.from_text(text)
        except DecodeError as err:
            logger.warning("Rejected content ID %r: %s", text, err)
            return False
        return True
