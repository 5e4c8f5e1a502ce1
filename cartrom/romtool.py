#!/usr/bin/env python3
"""
cartrom - ROM Tool

Inspects cartridge images, verifies and fixes the boot checksum, and
converts between native (.z64) and byte-swapped (.v64) dumps.

Usage:
    romtool info <romfile>                 - Show ROM information
    romtool check <romfile>                - Verify checksum
    romtool fix <romfile> [-o out]         - Fix checksum (in place by default)
    romtool swap <romfile> --to v64 -o out - Convert byte ordering

SPDX-License-Identifier: BSD-3-Clause
Copyright (c) 2025 cartrom Project
"""

import sys
import shutil
import argparse
from pathlib import Path

from .checksum import (
    calculate_cart_checksum, fix_checksum, read_header_checksum
)
from .config import ToolConfig, parse_swapping
from .errors import NotLongEnough, RomError
from .header import RomHeader
from .layout import ROM_LEN
from .swap import ByteSwapping, detect_swapping, swap_cart_to


def read_rom(filename):
    """Read ROM file into bytearray."""
    with open(filename, 'rb') as f:
        return bytearray(f.read())


def write_rom(filename, data):
    """Write bytearray to ROM file."""
    with open(filename, 'wb') as f:
        f.write(data)


def native_copy(data):
    """
    Return (swapping, native-order copy of data).

    Raises RomError if the ordering is not recognised.
    """
    swapping = detect_swapping(data)
    if swapping is None:
        raise RomError("Unknown original byte swapping")

    native = bytearray(data)
    if swapping != ByteSwapping.NATIVE:
        swap_cart_to(ByteSwapping.NATIVE, native)
    return swapping, native


def crc_status(stored, calculated):
    return 'VALID' if stored == calculated else 'INVALID'


#==============================================================================
# Commands
#==============================================================================

def show_info(filename, data):
    """Display ROM information."""
    print(f"ROM File: {filename}")
    print(f"File Size: {len(data)} bytes ({len(data) // (1024 * 1024)}MB)")

    swapping, native = native_copy(data)
    print(f"Byte Order: {swapping}")

    header = RomHeader.from_bytes(native)
    print(f"Title: {header.title!r}")
    print(f"Cart Timing: 0x{header.cart_timing:08X}")
    print(f"Clock Rate: 0x{header.clock_rate:08X}")
    print(f"Load Address: 0x{header.load_addr:08X}")
    print(f"Release: 0x{header.release:08X}")
    print(f"Manufacturer: 0x{header.manuf_id:08X}")
    print(f"Cart ID: 0x{header.cart_id:04X}")
    print(f"Country Code: 0x{header.country_code:04X}")

    print(f"CRC1: 0x{header.crc1:08X}")
    print(f"CRC2: 0x{header.crc2:08X}")

    try:
        crc1, crc2 = calculate_cart_checksum(native)
    except NotLongEnough:
        print(f"Checksum: n/a (need at least {ROM_LEN} bytes)")
        return 0

    print(f"Calculated CRC1: 0x{crc1:08X} ({crc_status(header.crc1, crc1)})")
    print(f"Calculated CRC2: 0x{crc2:08X} ({crc_status(header.crc2, crc2)})")
    return 0


def check_rom(data):
    """Verify the stored checksum; 0 if valid."""
    _, native = native_copy(data)
    stored = read_header_checksum(native)
    calculated = calculate_cart_checksum(native)

    if stored == calculated:
        print("VALID")
        return 0

    print(f"INVALID (stored 0x{stored[0]:08X} 0x{stored[1]:08X}, "
          f"calculated 0x{calculated[0]:08X} 0x{calculated[1]:08X})")
    return 1


def fix_rom(filename, data, config, output=None):
    """Recalculate the checksum and write it back in the original ordering."""
    if output is None:
        if not config.fix_in_place:
            print("Error: no output file given and fix_in_place is off",
                  file=sys.stderr)
            return 1
        output = filename

    swapping, native = native_copy(data)
    old, new = fix_checksum(native)
    if swapping != ByteSwapping.NATIVE:
        swap_cart_to(swapping, native)

    if config.backup_suffix and Path(output) == Path(filename):
        shutil.copyfile(filename, f"{filename}{config.backup_suffix}")

    write_rom(output, native)

    print(f"CRC1: 0x{old[0]:08X} -> 0x{new[0]:08X}")
    print(f"CRC2: 0x{old[1]:08X} -> 0x{new[1]:08X}")
    if old == new:
        print("Checksum already valid")
    return 0


def swap_rom(filename, data, target, output=None):
    """Convert the ROM to the target byte ordering."""
    original = detect_swapping(data)
    swap_cart_to(target, data)

    if output is None:
        output = filename
    write_rom(output, data)

    print(f"Byte Order: {original} -> {target}")
    return 0


#==============================================================================
# Entry Point
#==============================================================================

def build_parser():
    parser = argparse.ArgumentParser(
        prog='romtool',
        description='Cartridge ROM header, checksum and byte order tool'
    )
    parser.add_argument('--config', type=Path,
                        help='JSON file with tool defaults')

    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('info', help='Show ROM information')
    p.add_argument('romfile', help='ROM file to inspect')

    p = sub.add_parser('check', help='Verify checksum without modifying')
    p.add_argument('romfile', help='ROM file to verify')

    p = sub.add_parser('fix', help='Recalculate and store the checksum')
    p.add_argument('romfile', help='ROM file to fix')
    p.add_argument('-o', '--output', help='Write result here instead')

    p = sub.add_parser('swap', help='Convert byte ordering')
    p.add_argument('romfile', help='ROM file to convert')
    p.add_argument('--to', dest='target',
                   help='native/z64 or v64/u16le (default from config)')
    p.add_argument('-o', '--output', help='Write result here instead')

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    config = ToolConfig()
    try:
        if args.config:
            config.load_from_file(args.config)
        target = None
        if args.command == 'swap':
            target = parse_swapping(args.target) if args.target else config.target_swapping
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        data = read_rom(args.romfile)
    except FileNotFoundError:
        print(f"Error: File not found: {args.romfile}", file=sys.stderr)
        return 1
    except IOError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        return 1

    try:
        if args.command == 'info':
            return show_info(args.romfile, data)
        if args.command == 'check':
            return check_rom(data)
        if args.command == 'fix':
            return fix_rom(args.romfile, data, config, args.output)
        return swap_rom(args.romfile, data, target, args.output)
    except RomError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except IOError as e:
        print(f"Error writing file: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
