"""
cartrom - Exceptions

SPDX-License-Identifier: BSD-3-Clause
Copyright (c) 2025 cartrom Project
"""


class RomError(Exception):
    """Base class for all ROM image errors."""
    pass


class SwapError(RomError):
    """Byte swapping conversion could not be performed."""
    pass


class ChecksumError(RomError):
    """Boot checksum could not be calculated."""
    pass


class NotLongEnough(ChecksumError):
    """Buffer ends before the checksum window does."""

    def __init__(self, length: int, required: int):
        super().__init__(f"ROM too small ({length} bytes, need {required})")
        self.length = length
        self.required = required


class ErrorReadingBuffer(ChecksumError):
    """A word inside the checksum window could not be read."""
    pass
