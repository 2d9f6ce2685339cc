from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable, List, Tuple

from ..errors import InvalidCharacterError, LengthMismatchError
from ..ports.content_hasher_port import ContentHasherPort
from ..ports.entropy_source_port import EntropySourcePort
from ..services import ordered_base64

CONTENT_ID_SIZE = 32
CONTENT_ID_TEXT_LENGTH = ordered_base64.encoded_length(CONTENT_ID_SIZE)

_HEX_DIGITS = "0123456789abcdef"

@dataclass(frozen=True, order=True)
class ContentId:
    """Ocean content ID: a fixed-size address for immutable content.

    The payload is exactly ``SIZE`` bytes, normally the BLAKE3 hash of the
    content it names. Every ``SIZE``-byte sequence is a valid ID.

    IDs compare by their payload bytes. The text form uses an alphabet
    sorted by ASCII value, so IDs sort the same way as raw bytes, as text,
    or as hexadecimal.

    Comparisons are not constant-time. IDs are content addresses, not
    message authentication codes.
    """

    value: bytes

    SIZE: ClassVar[int] = CONTENT_ID_SIZE
    TEXT_LENGTH: ClassVar[int] = CONTENT_ID_TEXT_LENGTH

    def __post_init__(self) -> None:
        if not isinstance(self.value, bytes):
            if not isinstance(self.value, (bytearray, memoryview)):
                raise TypeError(
                    "Content ID must be bytes-like, "
                    f"got {type(self.value).__name__}"
                )
            object.__setattr__(self, "value", bytes(self.value))
        if len(self.value) != self.SIZE:
            raise LengthMismatchError(self.SIZE, len(self.value))

    @classmethod
    def from_content(
        cls,
        content: bytes,
        hasher: ContentHasherPort,
    ) -> ContentId:
        """Hash all of ``content`` with ``hasher``.

        Errors raised by the hasher propagate unchanged.
        """
        return cls(hasher.hash(content))

    @classmethod
    def random(cls, source: EntropySourcePort) -> ContentId:
        """Draw ``SIZE`` bytes from ``source`` without hashing them.

        Errors raised by the source propagate unchanged.
        """
        return cls(source.read(cls.SIZE))

    @classmethod
    def from_raw_bytes(cls, data: bytes) -> ContentId:
        return cls(data)

    @classmethod
    def from_text(cls, text: str) -> ContentId:
        return cls(ordered_base64.decode(text, cls.SIZE))

    @classmethod
    def from_hex(cls, text: str) -> ContentId:
        for position, char in enumerate(text):
            if char not in _HEX_DIGITS:
                raise InvalidCharacterError(position, char)
        if len(text) != cls.SIZE * 2:
            raise LengthMismatchError(
                cls.SIZE * 2, len(text), unit="hex digits"
            )
        return cls(bytes.fromhex(text))

    @classmethod
    def split_prefix(cls, data: bytes) -> Tuple[ContentId, bytes]:
        """Read one ID from the front of ``data`` and return the rest."""
        if len(data) < cls.SIZE:
            raise LengthMismatchError(cls.SIZE, len(data))
        head = bytes(data[:cls.SIZE])
        tail = bytes(data[cls.SIZE:])
        return cls(head), tail

    @classmethod
    def pack(cls, ids: Iterable[ContentId]) -> bytes:
        return b"".join(content_id.value for content_id in ids)

    @classmethod
    def unpack(cls, data: bytes) -> List[ContentId]:
        remainder = len(data) % cls.SIZE
        if remainder:
            raise LengthMismatchError(cls.SIZE, remainder)
        data = bytes(data)

        return [
            cls(data[offset:offset + cls.SIZE])
            for offset in range(0, len(data), cls.SIZE)
        ]

    def as_bytes(self) -> bytes:
        return self.value

    def to_text(self) -> str:
        return ordered_base64.encode(self.value)

    def to_hex(self) -> str:
        return self.value.hex()

    def __bytes__(self) -> bytes:
        return self.value

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"ContentId({self.to_text()!r})"

    def __hash__(self) -> int:
        # Covers every payload byte; independent of PYTHONHASHSEED.
        return int.from_bytes(self.value, "big")
