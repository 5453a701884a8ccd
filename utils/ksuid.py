"""
KSUID - K-Sortable Unique Identifier, with an embedded 48-bit id.

Layout (20 bytes, big-endian):
    [0:4]   seconds since KSUID epoch
    [4:10]  low 48 bits of the caller's id
    [10:20] random
Encoded as a 27 char base62 string, left-padded with "0".
"""

import os
import struct
from collections import namedtuple

from core.errors import InvalidLengthError, KsuidError
from internal.logging import get_logger
from utils import base62
from utils.timestamp import from_epoch_offset, to_epoch_offset, utc_now

KSUID_LENGTH = 20
ENCODED_LENGTH = 27
TIMESTAMP_LENGTH = 4
PAYLOAD_LENGTH = 16
ID_LENGTH = 6
MAX_ID = (1 << (ID_LENGTH * 8)) - 1

DecodedKsuid = namedtuple("DecodedKsuid", ["id", "timestamp"])


class KsuidTranscoder:
    """Builds and parses id-carrying KSUIDs.

    clock: () -> aware UTC datetime, read once per generate().
    random_source: (n) -> n random bytes. os.urandom is thread-safe.
    """

    def __init__(self, clock=None, random_source=None):
        self.clock = clock or utc_now
        self.random_source = random_source or os.urandom

    def generate(self, id):
        """Encode `id` into a new 27-character KSUID string."""
        if id > MAX_ID:
            # Only the low 48 bits fit.
            get_logger().warn("ksuid id truncated", id=id, kept=id & MAX_ID)

        id_bytes = struct.pack(">Q", id & 0xFFFFFFFFFFFFFFFF)[8 - ID_LENGTH:]

        random_bytes = self.random_source(PAYLOAD_LENGTH - ID_LENGTH)
        if len(random_bytes) != PAYLOAD_LENGTH - ID_LENGTH:
            raise ValueError(
                f"random source returned {len(random_bytes)} bytes, "
                f"expected {PAYLOAD_LENGTH - ID_LENGTH}"
            )

        ts_bytes = struct.pack(">I", to_epoch_offset(self.clock()))

        raw = ts_bytes + id_bytes + random_bytes
        return base62.encode(raw).rjust(ENCODED_LENGTH, base62.ALPHABET[0])

    def decode(self, ksuid):
        """Recover (id, timestamp) from an encoded KSUID."""
        try:
            raw = base62.decode(ksuid, size=KSUID_LENGTH)
            return self.from_bytes(raw)
        except KsuidError as exc:
            get_logger().debug("ksuid decode fail", error=exc, ksuid=ksuid, **exc.context)
            raise

    def from_bytes(self, raw):
        """Parse the 20-byte KSUID layout."""
        if len(raw) != KSUID_LENGTH:
            raise InvalidLengthError(
                f"Invalid KSUID: must decode to {KSUID_LENGTH} bytes, got {len(raw)}",
                length=len(raw),
                expected=KSUID_LENGTH,
            )

        (offset,) = struct.unpack(">I", raw[:TIMESTAMP_LENGTH])
        id_bytes = raw[TIMESTAMP_LENGTH:TIMESTAMP_LENGTH + ID_LENGTH]
        (id,) = struct.unpack(">Q", b"\x00\x00" + id_bytes)

        return DecodedKsuid(id, from_epoch_offset(offset))


_default = KsuidTranscoder()


def generate_ksuid(id):
    """Generate a 27-character KSUID carrying `id` in its payload."""
    return _default.generate(id)


def decode_ksuid(ksuid):
    """Decode a KSUID string into DecodedKsuid(id, timestamp)."""
    return _default.decode(ksuid)
