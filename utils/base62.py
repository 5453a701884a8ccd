"""
Base62 codec for fixed-width byte strings.

Bytes are read as one big-endian unsigned integer and written out in
base 62, most significant digit first. Padding is left to the caller.
"""

from core.errors import InvalidCharacterError

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE = len(ALPHABET)

_INDEX = {char: i for i, char in enumerate(ALPHABET)}


def encode(data):
    """Encode bytes as base62 digits. Zero encodes to an empty string."""
    n = int.from_bytes(data, byteorder="big", signed=False)

    chars = []
    while n > 0:
        n, remainder = divmod(n, BASE)
        chars.append(ALPHABET[remainder])

    return "".join(reversed(chars))


def decode(text, size=20):
    """Decode base62 digits into exactly `size` big-endian bytes.

    Leading zero bytes lost by the integer form are restored; anything
    wider than `size` keeps only its low-order bytes.
    """
    n = 0
    for position, char in enumerate(text):
        digit = _INDEX.get(char)
        if digit is None:
            raise InvalidCharacterError(
                f"Invalid base62 character: {char!r}", character=char, position=position
            )
        n = n * BASE + digit

    raw = n.to_bytes((n.bit_length() + 7) // 8, byteorder="big")
    if len(raw) > size:
        return raw[len(raw) - size:]
    return raw.rjust(size, b"\x00")
