"""Shared fixtures for cartrom tests."""

import pytest

from cartrom.header import RomHeader
from cartrom.layout import HEADER_LEN, ROM_LEN


def make_rom(fill: int = 0x00, size: int = ROM_LEN) -> bytearray:
    """Native-order image: default header followed by fill bytes."""
    rom = bytearray([fill]) * size
    rom[0:HEADER_LEN] = RomHeader().to_bytes()
    return rom


@pytest.fixture
def blank_rom() -> bytearray:
    return make_rom()


@pytest.fixture
def rom_file(tmp_path, blank_rom):
    path = tmp_path / "blank.z64"
    path.write_bytes(blank_rom)
    return path
