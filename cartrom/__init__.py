"""
cartrom - cartridge ROM image header, byte order and boot checksum tools

SPDX-License-Identifier: BSD-3-Clause
Copyright (c) 2025 cartrom Project
"""

from .checksum import (
    calculate_cart_checksum, fix_checksum, read_header_checksum,
    verify_checksum
)
from .errors import (
    ChecksumError, ErrorReadingBuffer, NotLongEnough, RomError, SwapError
)
from .header import RomHeader
from .swap import ByteSwapping, detect_swapping, swap_cart_to

__version__ = "0.1.0"
