"""
cartrom - Tool Configuration

SPDX-License-Identifier: BSD-3-Clause
Copyright (c) 2025 cartrom Project
"""

import json
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from .swap import ByteSwapping

# Names accepted on the command line and in config files
SWAPPING_NAMES = {
    "native": ByteSwapping.NATIVE,
    "z64": ByteSwapping.NATIVE,
    "v64": ByteSwapping.U16_LITTLE_ENDIAN,
    "u16le": ByteSwapping.U16_LITTLE_ENDIAN,
}


def parse_swapping(name: str) -> ByteSwapping:
    """Map a user-supplied ordering name to a ByteSwapping."""
    key = name.strip().lower().replace(" ", "")
    for swapping in ByteSwapping:
        if key == swapping.value.lower().replace(" ", ""):
            return swapping
    if key in SWAPPING_NAMES:
        return SWAPPING_NAMES[key]
    raise ValueError(f"Unknown byte swapping: {name}")


@dataclass
class ToolConfig:
    """romtool defaults."""
    # Ordering written by 'swap' when --to is not given
    output_swapping: str = "Native"

    # 'fix' overwrites the input unless -o is given
    fix_in_place: bool = True

    # Copy the original to <rom><suffix> before overwriting it
    backup_suffix: str = ""

    @property
    def target_swapping(self) -> ByteSwapping:
        return parse_swapping(self.output_swapping)

    def load_from_file(self, path: Path):
        """Load config from JSON file."""
        if path.exists():
            data = json.loads(path.read_text())
            if not isinstance(data, dict):
                raise ValueError(f"{path}: config must be a JSON object")
            known = {f.name: f.type for f in fields(self)}
            for key, value in data.items():
                if key not in known:
                    continue
                if not isinstance(value, known[key]):
                    raise ValueError(
                        f"{path}: {key} must be {known[key].__name__}, "
                        f"got {type(value).__name__}")
                setattr(self, key, value)

    def save_to_file(self, path: Path):
        """Save config to JSON file."""
        path.write_text(json.dumps(asdict(self), indent=2))
