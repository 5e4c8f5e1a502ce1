"""
cartrom - ROM Image Layout

Fixed byte offsets and lengths of a cartridge ROM image.

SPDX-License-Identifier: BSD-3-Clause
Copyright (c) 2025 cartrom Project
"""

DEFAULT_CART_TIMING = 0x80371240
DEFAULT_CLOCK_RATE = 0x0000000F

HEADER_NAME_LEN = 20

#==============================================================================
# Regions
#==============================================================================

HEADER_START = 0
HEADER_LEN = 64
HEADER_END = HEADER_START + HEADER_LEN

BOOTCODE_START = HEADER_LEN
BOOTCODE_LEN = 4096 - HEADER_LEN
BOOTCODE_END = BOOTCODE_START + BOOTCODE_LEN

LOAD_START = HEADER_LEN + BOOTCODE_LEN
LOAD_LEN = 0x100000

# Smallest image that holds the whole checksum window
ROM_LEN = HEADER_LEN + BOOTCODE_LEN + LOAD_LEN

#==============================================================================
# Header fields
#==============================================================================

CRC1_OFFSET = 0x10
CRC2_OFFSET = 0x14
NAME_OFFSET = 0x20

# First word of the header, as it appears on disk
MAGIC_NATIVE = b'\x80\x37\x12\x40'
MAGIC_U16_LITTLE_ENDIAN = b'\x37\x80\x40\x12'
