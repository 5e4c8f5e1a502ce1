"""
cartrom Configuration Tests

SPDX-License-Identifier: BSD-3-Clause
Copyright (c) 2025 cartrom Project
"""

import json

import pytest

from cartrom.config import ToolConfig, parse_swapping
from cartrom.swap import ByteSwapping


def test_defaults():
    config = ToolConfig()
    assert config.target_swapping == ByteSwapping.NATIVE
    assert config.fix_in_place
    assert config.backup_suffix == ""


@pytest.mark.parametrize("name,expected", [
    ("Native", ByteSwapping.NATIVE),
    ("z64", ByteSwapping.NATIVE),
    ("V64", ByteSwapping.U16_LITTLE_ENDIAN),
    ("u16le", ByteSwapping.U16_LITTLE_ENDIAN),
    ("U16 Little Endian", ByteSwapping.U16_LITTLE_ENDIAN),
])
def test_parse_swapping(name, expected):
    assert parse_swapping(name) == expected


def test_parse_swapping_unknown():
    with pytest.raises(ValueError):
        parse_swapping("n64")


def test_save_and_load(tmp_path):
    path = tmp_path / "romtool.json"
    config = ToolConfig(output_swapping="v64", fix_in_place=False,
                        backup_suffix=".bak")
    config.save_to_file(path)

    loaded = ToolConfig()
    loaded.load_from_file(path)
    assert loaded == config
    assert loaded.target_swapping == ByteSwapping.U16_LITTLE_ENDIAN


def test_load_ignores_unknown_keys(tmp_path):
    path = tmp_path / "romtool.json"
    path.write_text(json.dumps({"backup_suffix": ".old", "target_swapping": "x",
                                "colour": "blue"}))
    config = ToolConfig()
    config.load_from_file(path)
    assert config.backup_suffix == ".old"
    assert config.target_swapping == ByteSwapping.NATIVE


def test_load_missing_file(tmp_path):
    config = ToolConfig()
    config.load_from_file(tmp_path / "missing.json")
    assert config == ToolConfig()


@pytest.mark.parametrize("payload", [[1, 2], "native", 3])
def test_load_rejects_non_object(tmp_path, payload):
    path = tmp_path / "romtool.json"
    path.write_text(json.dumps(payload))
    with pytest.raises(ValueError, match="JSON object"):
        ToolConfig().load_from_file(path)


@pytest.mark.parametrize("payload", [
    {"output_swapping": 1},
    {"fix_in_place": "yes"},
    {"backup_suffix": None},
])
def test_load_rejects_wrong_types(tmp_path, payload):
    path = tmp_path / "romtool.json"
    path.write_text(json.dumps(payload))
    config = ToolConfig()
    with pytest.raises(ValueError, match=next(iter(payload))):
        config.load_from_file(path)
