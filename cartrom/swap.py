"""
cartrom - Byte Swapping

Detects whether an image is a native big-endian dump or one with every
16-bit unit byte-swapped, and converts between the two in place.

SPDX-License-Identifier: BSD-3-Clause
Copyright (c) 2025 cartrom Project
"""

from enum import Enum
from typing import Optional

from .errors import SwapError
from .layout import MAGIC_NATIVE, MAGIC_U16_LITTLE_ENDIAN


class ByteSwapping(Enum):
    NATIVE = "Native"
    U16_LITTLE_ENDIAN = "U16 Little Endian"

    def __str__(self):
        return self.value


def detect_swapping(buffer) -> Optional[ByteSwapping]:
    """Identify the byte ordering from the first word, or None if unknown."""
    if len(buffer) < 4:
        return None

    magic = bytes(buffer[0:4])
    if magic == MAGIC_NATIVE:
        return ByteSwapping.NATIVE
    if magic == MAGIC_U16_LITTLE_ENDIAN:
        return ByteSwapping.U16_LITTLE_ENDIAN
    return None


def swap_cart_to(new_swapping: ByteSwapping, buffer) -> None:
    """
    Convert a mutable buffer to new_swapping in place.

    Raises SwapError if the current ordering is unknown or the length is odd.
    Nothing is modified when the buffer is already in the requested ordering.
    """
    original_swapping = detect_swapping(buffer)
    if original_swapping is None:
        raise SwapError("Unknown original byte swapping")

    if len(buffer) % 2 != 0:
        raise SwapError("Not an even length for swapping")

    if original_swapping == new_swapping:
        return

    # Exchange byte 0 and byte 1 of every 16-bit unit.
    # Slices of a memoryview alias the buffer, so copy both halves first.
    evens = bytes(buffer[0::2])
    odds = bytes(buffer[1::2])
    buffer[0::2] = odds
    buffer[1::2] = evens
