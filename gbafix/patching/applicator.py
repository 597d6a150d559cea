"""Apply parsed patch operations to an in-memory ROM buffer."""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import Sequence

from ..core.header import GbaHeader, TITLE, pad_title
from .ops import Debug, GameCode, MakerCode, Pad, PatchOperation, Title, Version

logger = logging.getLogger(__name__)


def next_power_of_two(length: int) -> int:
    """Smallest power of two >= ``length`` (1 for an empty buffer)."""
    if length <= 1:
        return 1
    return 1 << (length - 1).bit_length()


def is_power_of_two(length: int) -> bool:
    return length > 0 and (length & (length - 1)) == 0


def pad_to_power_of_two(buffer: bytearray) -> int:
    """Zero-extend ``buffer`` in place. Returns the number of bytes added."""
    length = len(buffer)
    if is_power_of_two(length):
        return 0
    added = next_power_of_two(length) - length
    buffer.extend(bytes(added))
    return added


def title_from_name(name_hint: str) -> bytes:
    """File stem, truncated to the title width and zero padded."""
    stem = PurePath(name_hint).stem.encode("utf-8")
    return pad_title(stem[:TITLE.size])


def apply_patches(ops: Sequence[PatchOperation], buffer: bytearray, name_hint: str) -> None:
    """Patch ``buffer`` in place.

    Padding first, then header fields in input order (later operations on the
    same field win), then the checksum. The caller has already checked that
    the buffer holds a complete header.
    """
    if any(isinstance(op, Pad) for op in ops):
        added = pad_to_power_of_two(buffer)
        if added:
            logger.debug("Padded %s by %d bytes to %d", name_hint, added, len(buffer))

    header = GbaHeader(buffer)
    for op in ops:
        if isinstance(op, Pad):
            continue
        if isinstance(op, Title):
            header.title = op.value if op.value is not None else title_from_name(name_hint)
        elif isinstance(op, GameCode):
            header.game_code = op.value
        elif isinstance(op, MakerCode):
            header.maker_code = op.value
        elif isinstance(op, Version):
            header.version = op.value
        elif isinstance(op, Debug):
            header.set_debugging(op.enabled)
        else:
            raise TypeError(f"Unsupported patch operation: {op!r}")

    checksum = header.update_checksum()
    logger.debug("Header checksum for %s set to 0x%02X", name_hint, checksum)
