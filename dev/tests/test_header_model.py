import pytest

from gbafix.core.header import (
    CHECKSUM,
    DEBUG_ENABLE_OFFSET,
    DEVICE_TYPE,
    HEADER_SIZE,
    GbaHeader,
    compute_checksum,
)


def _region_sum(data) -> int:
    return sum(data[0xA0:0xBD]) & 0xFF


def test_header_size_is_0xc0():
    assert HEADER_SIZE == 192


def test_update_checksum_satisfies_complement(header_bytes):
    header = GbaHeader(header_bytes)
    value = header.update_checksum()

    assert header_bytes[CHECKSUM.offset] == value
    assert (_region_sum(header_bytes) + value + 0x19) % 256 == 0
    assert header.is_checksum_valid()


def test_compute_checksum_on_region_only():
    region = bytes(range(29))
    expected = (0x100 - 0x19 - sum(region)) % 256
    assert compute_checksum(region) == expected


def test_checksum_of_zero_header():
    assert compute_checksum(bytes(HEADER_SIZE)) == 0xE7


def test_checksum_ignores_bytes_outside_title_to_version(header_bytes):
    before = compute_checksum(header_bytes)
    header_bytes[0x10] ^= 0xFF
    header_bytes[0xBE] = 0x55
    assert compute_checksum(header_bytes) == before


def test_checksum_detects_stale_value(header_bytes):
    header = GbaHeader(header_bytes)
    header.update_checksum()
    header.version = header.version + 1
    assert not header.is_checksum_valid()


def test_field_accessors_use_fixed_offsets(header_bytes):
    header = GbaHeader(header_bytes)
    header.title = b"HELLO".ljust(12, b"\x00")
    header.game_code = b"BPEE"
    header.maker_code = b"AB"
    header.version = 7

    assert header_bytes[0xA0:0xAC] == b"HELLO" + b"\x00" * 7
    assert header_bytes[0xAC:0xB0] == b"BPEE"
    assert header_bytes[0xB0:0xB2] == b"AB"
    assert header_bytes[0xBC] == 7
    assert header.fixed_byte_valid


def test_text_field_rejects_wrong_width(header_bytes):
    header = GbaHeader(header_bytes)
    with pytest.raises(ValueError):
        header.game_code = b"AB"
    with pytest.raises(ValueError):
        header.version = 256


def test_debug_enable_sets_indicator_and_entry(header_bytes):
    header = GbaHeader(header_bytes)
    header.set_debugging(True)

    assert header_bytes[DEBUG_ENABLE_OFFSET] == 0xA5
    assert header_bytes[DEVICE_TYPE.offset] & 0x80
    assert header.debugging
    assert header.describe()["debug_entry"] == "0x09FFC000"


def test_debug_disable_only_clears_indicator(header_bytes):
    header = GbaHeader(header_bytes)
    header.set_debugging(True)
    header.set_debugging(False)

    assert header_bytes[DEBUG_ENABLE_OFFSET] == 0x21
    assert header_bytes[DEVICE_TYPE.offset] & 0x80
    assert not header.debugging


def test_describe_decodes_fields(header_bytes):
    info = GbaHeader(header_bytes).describe()
    assert info["title"] == "OLDNAME"
    assert info["game_code"] == "AXXE"
    assert info["maker_code"] == "01"
    assert info["entry_point"] == "0xEA00002E"
