import pytest

from gbafix.core.header import GbaHeader
from gbafix.patching import (
    Debug,
    GameCode,
    MakerCode,
    Pad,
    Title,
    Version,
    apply_patches,
    next_power_of_two,
    pad_to_power_of_two,
    title_from_name,
)


def _checksum_ok(data) -> bool:
    return (sum(data[0xA0:0xBD]) + data[0xBD] + 0x19) % 256 == 0


@pytest.mark.parametrize("length, expected", [(192, 256), (1000, 1024), (1025, 2048), (3, 4)])
def test_padding_reaches_next_power_of_two(length, expected):
    buf = bytearray(b"\xff" * length)
    added = pad_to_power_of_two(buf)

    assert len(buf) == expected
    assert added == expected - length
    assert buf[length:] == bytes(expected - length)
    assert buf[:length] == b"\xff" * length


def test_padding_is_noop_on_power_of_two(rom_buffer):
    buf = rom_buffer(512)
    before = bytes(buf)
    assert pad_to_power_of_two(buf) == 0
    assert bytes(buf) == before


def test_padding_twice_matches_once(rom_buffer):
    once = rom_buffer(700)
    twice = rom_buffer(700)
    apply_patches([Pad()], once, "a.gba")
    apply_patches([Pad()], twice, "a.gba")
    apply_patches([Pad()], twice, "a.gba")
    assert once == twice


def test_next_power_of_two():
    assert next_power_of_two(1) == 1
    assert next_power_of_two(5) == 8
    assert next_power_of_two(4096) == 4096


def test_title_from_name_strips_extension():
    assert title_from_name("mygame.gba") == b"mygame" + b"\x00" * 6
    assert title_from_name("/roms/dir.v2/longer_than_twelve.gba") == b"longer_than_"


def test_derived_title_written(header_bytes):
    apply_patches([Title(None)], header_bytes, "mygame.gba")
    assert header_bytes[0xA0:0xAC] == b"mygame" + b"\x00" * 6
    assert _checksum_ok(header_bytes)


def test_explicit_title_written(header_bytes):
    apply_patches([Title(b"AB".ljust(12, b"\x00"))], header_bytes, "ignored.gba")
    assert header_bytes[0xA0:0xAC] == b"AB" + b"\x00" * 10


def test_later_operation_wins(header_bytes):
    apply_patches([Version(1), Version(2)], header_bytes, "x.gba")

    assert header_bytes[0xBC] == 2
    assert _checksum_ok(header_bytes)


def test_empty_operation_list_still_fixes_checksum(header_bytes):
    header_bytes[0xBD] = 0x00
    apply_patches([], header_bytes, "x.gba")
    assert _checksum_ok(header_bytes)


def test_end_to_end_pad_maker_version(rom_buffer):
    buf = rom_buffer(1000)
    payload = bytes(buf[0xC0:1000])

    apply_patches([Pad(), MakerCode(b"AB"), Version(5)], buf, "game.gba")

    assert len(buf) == 1024
    assert buf[1000:] == bytes(24)
    assert buf[0xB0:0xB2] == b"AB"
    assert buf[0xBC] == 5
    assert bytes(buf[0xC0:1000]) == payload
    assert _checksum_ok(buf)


def test_debug_and_codes(header_bytes):
    apply_patches([GameCode(b"BPEE"), Debug(True)], header_bytes, "x.gba")
    header = GbaHeader(header_bytes)

    assert header.game_code == b"BPEE"
    assert header.debugging
    assert header.is_checksum_valid()


def test_logo_and_entry_untouched_without_debug(header_bytes):
    before = bytes(header_bytes[:0xA0])
    apply_patches([Pad(), Title(None), Version(3)], header_bytes, "x.gba")
    assert bytes(header_bytes[:0xA0]) == before
