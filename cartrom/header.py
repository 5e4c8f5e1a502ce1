"""
cartrom - ROM Header Model

The 64-byte header at the start of every cartridge image. All multi-byte
fields are stored big-endian; the 20-byte name is raw and not terminated.

SPDX-License-Identifier: BSD-3-Clause
Copyright (c) 2025 cartrom Project
"""

import io
import struct
from dataclasses import dataclass, field

from .errors import RomError
from .layout import (
    DEFAULT_CART_TIMING, DEFAULT_CLOCK_RATE, HEADER_LEN, HEADER_NAME_LEN
)

# Whole-header layout, used only for parsing
HEADER_FORMAT = f'>8I{HEADER_NAME_LEN}s2I2H'


def _default_name() -> bytes:
    return bytes(HEADER_NAME_LEN)


# Integer fields and their widths in bits
WORD_FIELDS = (
    ("cart_timing", 32), ("clock_rate", 32), ("load_addr", 32),
    ("release", 32), ("crc1", 32), ("crc2", 32), ("rsvd_18", 32),
    ("rsvd_1c", 32), ("rsvd_34", 32), ("manuf_id", 32),
    ("cart_id", 16), ("country_code", 16),
)


@dataclass
class RomHeader:
    """Cartridge header, in field order."""
    cart_timing: int = DEFAULT_CART_TIMING
    clock_rate: int = DEFAULT_CLOCK_RATE
    load_addr: int = 0
    release: int = 0
    crc1: int = 0
    crc2: int = 0
    rsvd_18: int = 0
    rsvd_1c: int = 0
    name: bytes = field(default_factory=_default_name)
    rsvd_34: int = 0
    manuf_id: int = 0
    cart_id: int = 0
    country_code: int = 0

    def serialize(self, writer) -> None:
        """
        Write the 64-byte header to a binary sink.

        Every field is checked before the first write, so a bad value
        raises ValueError with nothing written. Exceptions raised by
        writer.write() propagate unchanged.
        """
        if len(self.name) != HEADER_NAME_LEN:
            raise ValueError(
                f"Header name must be {HEADER_NAME_LEN} bytes, got {len(self.name)}")
        for name, bits in WORD_FIELDS:
            value = getattr(self, name)
            if not 0 <= value < (1 << bits):
                raise ValueError(f"Header field {name} out of range: {value:#x}")

        writer.write(struct.pack('>I', self.cart_timing))
        writer.write(struct.pack('>I', self.clock_rate))
        writer.write(struct.pack('>I', self.load_addr))
        writer.write(struct.pack('>I', self.release))
        writer.write(struct.pack('>I', self.crc1))
        writer.write(struct.pack('>I', self.crc2))
        writer.write(struct.pack('>I', self.rsvd_18))
        writer.write(struct.pack('>I', self.rsvd_1c))
        writer.write(bytes(self.name))
        writer.write(struct.pack('>I', self.rsvd_34))
        writer.write(struct.pack('>I', self.manuf_id))
        writer.write(struct.pack('>H', self.cart_id))
        writer.write(struct.pack('>H', self.country_code))

    def to_bytes(self) -> bytes:
        """Serialized header as bytes."""
        out = io.BytesIO()
        self.serialize(out)
        return out.getvalue()

    @classmethod
    def from_bytes(cls, data: bytes) -> 'RomHeader':
        """Parse the header from the start of a native-order image."""
        if len(data) < HEADER_LEN:
            raise RomError(f"ROM too small for header ({len(data)} bytes)")

        (cart_timing, clock_rate, load_addr, release, crc1, crc2,
         rsvd_18, rsvd_1c, name, rsvd_34, manuf_id,
         cart_id, country_code) = struct.unpack_from(HEADER_FORMAT, data, 0)

        return cls(cart_timing, clock_rate, load_addr, release, crc1, crc2,
                   rsvd_18, rsvd_1c, name, rsvd_34, manuf_id,
                   cart_id, country_code)

    @property
    def title(self) -> str:
        """Printable ASCII rendering of the name field."""
        chars = []
        for b in self.name:
            if b == 0:
                break
            if 0x20 <= b <= 0x7E:
                chars.append(chr(b))
        return ''.join(chars).rstrip()
