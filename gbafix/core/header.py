"""GBA cartridge header view.

The header occupies the first 0xC0 bytes of every GBA ROM image. Each field
is read and written by offset and width on the borrowed buffer; nothing is
copied, so a ``GbaHeader`` must not outlive the patch pass that created it.

Layout (offsets in bytes):

    0x00  entry_point   4    ARM branch to the game entry
    0x04  logo          156  compressed Nintendo logo
    0xA0  title         12   uppercase ASCII, zero padded
    0xAC  game_code     4    ASCII, zero padded
    0xB0  maker_code    2    ASCII, zero padded
    0xB2  fixed_byte    1    must be 0x96
    0xB3  unit_code     1
    0xB4  device_type   1    bit 7 selects the debug handler address
    0xB5  reserved      7
    0xBC  version       1
    0xBD  checksum      1    complement over 0xA0..0xBC
    0xBE  reserved2     2
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class HeaderField:
    """Offset and width of one header field."""

    offset: int
    size: int

    @property
    def end(self) -> int:
        return self.offset + self.size

    def as_slice(self) -> slice:
        return slice(self.offset, self.end)


ENTRY_POINT = HeaderField(0x00, 4)
LOGO = HeaderField(0x04, 156)
TITLE = HeaderField(0xA0, 12)
GAME_CODE = HeaderField(0xAC, 4)
MAKER_CODE = HeaderField(0xB0, 2)
FIXED_BYTE = HeaderField(0xB2, 1)
UNIT_CODE = HeaderField(0xB3, 1)
DEVICE_TYPE = HeaderField(0xB4, 1)
RESERVED = HeaderField(0xB5, 7)
VERSION = HeaderField(0xBC, 1)
CHECKSUM = HeaderField(0xBD, 1)
RESERVED2 = HeaderField(0xBE, 2)

HEADER_SIZE = 0xC0

FIXED_BYTE_VALUE = 0x96
CHECKSUM_BIAS = 0x19
CHECKSUM_RANGE = slice(TITLE.offset, VERSION.end)

# Debug enable lives in the last logo bytes; bits 2 and 7 of 0x9C switch it on.
DEBUG_ENABLE_OFFSET = 0x9C
DEBUG_ENABLE_VALUE = 0xA5
DEBUG_ENABLE_MASK = 0x84
DEVICE_TYPE_DEBUG_BIT = 0x80
DEBUG_ENTRY_ADDRESS = 0x09FFC000


def compute_checksum(data: bytes) -> int:
    """Header complement for ``data``.

    ``data`` is either a whole header (at least ``HEADER_SIZE`` bytes) or the
    29 bytes of the title..version region on their own.
    """
    region = data[CHECKSUM_RANGE] if len(data) >= HEADER_SIZE else data
    return (0x100 - CHECKSUM_BIAS - sum(region)) & 0xFF


def _pad_field(value: bytes, field: HeaderField) -> bytes:
    if len(value) > field.size:
        raise ValueError(f"value is {len(value)} bytes, field holds {field.size}")
    return bytes(value).ljust(field.size, b"\x00")


class GbaHeader:
    """Mutable view over the header bytes of a ROM buffer.

    The caller guarantees ``len(buffer) >= HEADER_SIZE``.
    """

    def __init__(self, buffer: bytearray):
        self._buf = buffer

    def _read(self, field: HeaderField) -> bytes:
        return bytes(self._buf[field.as_slice()])

    def _write(self, field: HeaderField, value: bytes) -> None:
        if len(value) != field.size:
            raise ValueError(f"expected {field.size} bytes, got {len(value)}")
        self._buf[field.as_slice()] = value

    # -- text fields -------------------------------------------------------

    @property
    def title(self) -> bytes:
        return self._read(TITLE)

    @title.setter
    def title(self, value: bytes) -> None:
        self._write(TITLE, value)

    @property
    def game_code(self) -> bytes:
        return self._read(GAME_CODE)

    @game_code.setter
    def game_code(self, value: bytes) -> None:
        self._write(GAME_CODE, value)

    @property
    def maker_code(self) -> bytes:
        return self._read(MAKER_CODE)

    @maker_code.setter
    def maker_code(self, value: bytes) -> None:
        self._write(MAKER_CODE, value)

    # -- numeric fields ----------------------------------------------------

    @property
    def entry_point(self) -> int:
        return int.from_bytes(self._read(ENTRY_POINT), "little")

    @property
    def fixed_byte(self) -> int:
        return self._buf[FIXED_BYTE.offset]

    @property
    def fixed_byte_valid(self) -> bool:
        return self.fixed_byte == FIXED_BYTE_VALUE

    @property
    def unit_code(self) -> int:
        return self._buf[UNIT_CODE.offset]

    @property
    def device_type(self) -> int:
        return self._buf[DEVICE_TYPE.offset]

    @property
    def version(self) -> int:
        return self._buf[VERSION.offset]

    @version.setter
    def version(self, value: int) -> None:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"version out of range: {value}")
        self._buf[VERSION.offset] = value

    @property
    def checksum(self) -> int:
        return self._buf[CHECKSUM.offset]

    # -- debug -------------------------------------------------------------

    @property
    def debugging(self) -> bool:
        return (self._buf[DEBUG_ENABLE_OFFSET] & DEBUG_ENABLE_MASK) == DEBUG_ENABLE_MASK

    def set_debugging(self, enabled: bool) -> None:
        """Toggle the debug handler.

        Enabling also points the handler at ``DEBUG_ENTRY_ADDRESS`` through
        the device type bit. Disabling only clears the enable bits.
        """
        if enabled:
            self._buf[DEBUG_ENABLE_OFFSET] = DEBUG_ENABLE_VALUE
            self._buf[DEVICE_TYPE.offset] |= DEVICE_TYPE_DEBUG_BIT
        else:
            self._buf[DEBUG_ENABLE_OFFSET] &= ~DEBUG_ENABLE_MASK & 0xFF

    # -- checksum ----------------------------------------------------------

    def calculate_checksum(self) -> int:
        return compute_checksum(self._buf[:HEADER_SIZE])

    def update_checksum(self) -> int:
        value = self.calculate_checksum()
        self._buf[CHECKSUM.offset] = value
        return value

    def is_checksum_valid(self) -> bool:
        return self.checksum == self.calculate_checksum()

    def describe(self) -> Dict[str, Any]:
        """Decoded field values, for verbose output and reports."""
        return {
            "entry_point": f"0x{self.entry_point:08X}",
            "title": self.title.rstrip(b"\x00").decode("ascii", errors="replace"),
            "game_code": self.game_code.rstrip(b"\x00").decode("ascii", errors="replace"),
            "maker_code": self.maker_code.rstrip(b"\x00").decode("ascii", errors="replace"),
            "fixed_byte_valid": self.fixed_byte_valid,
            "unit_code": self.unit_code,
            "device_type": self.device_type,
            "version": self.version,
            "debugging": self.debugging,
            "debug_entry": (
                f"0x{DEBUG_ENTRY_ADDRESS:08X}" if self.device_type & DEVICE_TYPE_DEBUG_BIT else None
            ),
            "checksum": f"0x{self.checksum:02X}",
            "checksum_valid": self.is_checksum_valid(),
        }


def pad_title(value: bytes) -> bytes:
    return _pad_field(value, TITLE)


def pad_game_code(value: bytes) -> bytes:
    return _pad_field(value, GAME_CODE)


def pad_maker_code(value: bytes) -> bytes:
    return _pad_field(value, MAKER_CODE)
