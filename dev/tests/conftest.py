from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

# Ensure repo root on path
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gbafix.core.header import HEADER_SIZE  # noqa: E402


def _header_bytes() -> bytearray:
    data = bytearray(HEADER_SIZE)
    data[0x00:0x04] = b"\x2e\x00\x00\xea"  # b 0x080000C0
    for i in range(0x04, 0xA0):
        data[i] = (i * 7) & 0xFF
    data[0x9C] = 0x21
    data[0xA0:0xA7] = b"OLDNAME"
    data[0xAC:0xB0] = b"AXXE"
    data[0xB0:0xB2] = b"01"
    data[0xB2] = 0x96
    return data


@pytest.fixture
def header_bytes() -> bytearray:
    """A well-formed header with a nonzero logo and stale checksum."""
    return _header_bytes()


@pytest.fixture
def rom_buffer() -> Callable[[int], bytearray]:
    def _make(size: int = 1000) -> bytearray:
        data = _header_bytes()
        data.extend(bytes((i & 0xFF) | 1 for i in range(size - HEADER_SIZE)))
        return data

    return _make


@pytest.fixture
def rom_file(tmp_path: Path, rom_buffer) -> Callable[..., Path]:
    def _make(name: str = "mygame.gba", size: int = 1000) -> Path:
        path = tmp_path / name
        path.write_bytes(bytes(rom_buffer(size)))
        return path

    return _make
