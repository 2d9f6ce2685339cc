"""Base64 with a URL-safe alphabet sorted by ASCII value.

| Values | Characters
| :----- | :---------
| 0      | ``-``
| 1-10   | ``0123456789``
| 11-36  | ``ABCDEFGHIJKLMNOPQRSTUVWXYZ``
| 37     | ``_``
| 38-63  | ``abcdefghijklmnopqrstuvwxyz``

Because the alphabet is sorted, fixed-length encodings compare in the same
order as the bytes they encode. Output carries no ``=`` padding.
"""

import base64

from ..errors import InvalidCharacterError, LengthMismatchError

ALPHABET = "-0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz"

_STANDARD_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
)

_TO_ORDERED = bytes.maketrans(
    _STANDARD_ALPHABET.encode("ascii"),
    ALPHABET.encode("ascii"),
)
_TO_STANDARD = str.maketrans(ALPHABET, _STANDARD_ALPHABET)

_VALUES = {char: value for value, char in enumerate(ALPHABET)}


def encoded_length(size: int) -> int:
    return (size * 8 + 5) // 6


def encode(data: bytes) -> str:
    encoded = base64.b64encode(data).translate(_TO_ORDERED)
    return encoded.rstrip(b"=").decode("ascii")


def decode(text: str, size: int) -> bytes:
    """Decode ``text`` into exactly ``size`` bytes.

    Characters are checked first, then the decoded length, then the unused
    low bits of the final character, which must be zero.
    """
    for position, char in enumerate(text):
        if char not in _VALUES:
            raise InvalidCharacterError(position, char)

    if len(text) != encoded_length(size):
        raise LengthMismatchError(size, len(text) * 6 // 8)

    unused_bits = len(text) * 6 - size * 8
    if unused_bits and _VALUES[text[-1]] & ((1 << unused_bits) - 1):
        raise InvalidCharacterError(len(text) - 1, text[-1])

    padded = text.translate(_TO_STANDARD) + "=" * (-len(text) % 4)
    return base64.b64decode(padded, validate=True)
