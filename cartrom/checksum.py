"""
cartrom - Boot Checksum

Calculates the two 32-bit words (CRC1, CRC2) the console checks against the
header before booting a cartridge, and reads/fixes the stored pair.

The calculation covers the first 1MB after the boot code and must be run on
a native-order image; convert with swap_cart_to() first.

SPDX-License-Identifier: BSD-3-Clause
Copyright (c) 2025 cartrom Project
"""

import struct
from typing import Tuple

from .errors import ErrorReadingBuffer, NotLongEnough, RomError
from .layout import BOOTCODE_END, CRC1_OFFSET, CRC2_OFFSET, LOAD_LEN

CHECKSUM_START = BOOTCODE_END
CHECKSUM_LENGTH = LOAD_LEN
CHECKSUM_END = CHECKSUM_START + CHECKSUM_LENGTH
CHECKSUM_START_VALUE = 0xF8CA4DDC

MASK32 = 0xFFFFFFFF


def rotate_left(value: int, bits: int) -> int:
    """Rotate a 32-bit value left by 0-31 bits."""
    return ((value << bits) | (value >> (32 - bits))) & MASK32


def calculate_cart_checksum(buffer) -> Tuple[int, int]:
    """
    Calculate (crc1, crc2) over the checksum window.

    Raises NotLongEnough if the buffer ends before the window does.
    """
    if len(buffer) < CHECKSUM_END:
        raise NotLongEnough(len(buffer), CHECKSUM_END)

    window = bytes(buffer[CHECKSUM_START:CHECKSUM_END])

    t1 = t2 = t3 = t4 = t5 = t6 = CHECKSUM_START_VALUE

    try:
        words = struct.iter_unpack('>I', window)
        for (c1,) in words:
            k1 = (t6 + c1) & MASK32
            if k1 < t6:
                t4 = (t4 + 1) & MASK32
            t6 = k1
            t3 ^= c1
            k2 = c1 & 0x1F
            k1 = rotate_left(c1, k2)
            t5 = (t5 + k1) & MASK32
            if c1 < t2:
                t2 ^= k1
            else:
                t2 ^= t6 ^ c1
            t1 = (t1 + (c1 ^ t5)) & MASK32
    except struct.error as e:
        raise ErrorReadingBuffer(str(e)) from e

    return (t6 ^ t4 ^ t3, t5 ^ t2 ^ t1)


#==============================================================================
# Header CRC words
#==============================================================================

def read_header_checksum(buffer) -> Tuple[int, int]:
    """Return the (crc1, crc2) pair stored in the header."""
    if len(buffer) < CRC2_OFFSET + 4:
        raise RomError(f"ROM too small for header ({len(buffer)} bytes)")
    crc1 = struct.unpack_from('>I', buffer, CRC1_OFFSET)[0]
    crc2 = struct.unpack_from('>I', buffer, CRC2_OFFSET)[0]
    return crc1, crc2


def verify_checksum(buffer) -> bool:
    """True if the stored checksum matches the calculated one."""
    return read_header_checksum(buffer) == calculate_cart_checksum(buffer)


def fix_checksum(buffer) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """
    Recalculate the checksum and store it in the header.

    Returns (old, new) checksum pairs.
    """
    old = read_header_checksum(buffer)
    new = calculate_cart_checksum(buffer)

    struct.pack_into('>I', buffer, CRC1_OFFSET, new[0])
    struct.pack_into('>I', buffer, CRC2_OFFSET, new[1])

    return old, new
