"""File-level orchestration: load, patch and write back ROM images."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from ..core.header import HEADER_SIZE, GbaHeader
from ..exceptions import (
    FileOperationError,
    HeaderTooSmallError,
    RomFileError,
    UnsupportedFileError,
)
from ..patching import PatchOperation, apply_patches

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".gba",)

PathLike = Union[str, Path]


@dataclass
class FixResult:
    """Outcome of fixing one ROM file."""

    path: str
    success: bool
    original_size: int = 0
    patched_size: int = 0
    checksum: Optional[int] = None
    written: bool = False
    error: Optional[RomFileError] = None


def check_extension(path: Path, allowed_extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> None:
    if path.suffix.lower() not in allowed_extensions:
        accepted = ", ".join(f"'*{ext}'" for ext in allowed_extensions)
        raise UnsupportedFileError(
            f"{path}: can only process {accepted} files.", rom_path=str(path)
        )


def load_rom(path: PathLike, allowed_extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> bytearray:
    """Read a ROM into a mutable buffer after checking name and size."""
    rom_path = Path(path)
    logger.debug("Loading %s", rom_path)
    check_extension(rom_path, allowed_extensions)

    try:
        with open(rom_path, "rb") as f:
            data = bytearray(f.read())
    except OSError as exc:
        raise FileOperationError(
            f"couldn't read {rom_path}: {exc}", rom_path=str(rom_path), operation="read"
        ) from exc

    if len(data) < HEADER_SIZE:
        raise HeaderTooSmallError(
            f"{rom_path} is smaller than a rom header!", rom_path=str(rom_path), size=len(data)
        )
    return data


def write_rom(path: PathLike, data: bytes) -> None:
    """Overwrite the file from offset 0 with ``data``."""
    rom_path = Path(path)
    logger.debug("Writing %s", rom_path)
    try:
        with open(rom_path, "r+b") as f:
            f.seek(0)
            f.write(data)
            f.truncate()
    except OSError as exc:
        raise FileOperationError(
            f"couldn't save new data for {rom_path}: {exc}",
            rom_path=str(rom_path),
            operation="write",
        ) from exc


def fix_rom(
    path: PathLike,
    ops: Sequence[PatchOperation],
    allowed_extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    dry_run: bool = False,
) -> FixResult:
    """Patch one file. Per-file errors are returned, not raised."""
    rom_path = Path(path)
    logger.debug("Processing %s", rom_path)
    try:
        data = load_rom(rom_path, allowed_extensions)
        original_size = len(data)
        apply_patches(ops, data, str(rom_path))
        if not dry_run:
            write_rom(rom_path, data)
    except RomFileError as exc:
        logger.error("%s", exc, extra={"error": exc.to_dict()})
        return FixResult(path=str(rom_path), success=False, error=exc)

    header = GbaHeader(data)
    logger.debug("Header of %s: %s", rom_path, header.describe())
    if dry_run:
        logger.info("%s checked (dry run, not written)", rom_path)
    else:
        logger.debug("%s fixed!", rom_path)
    return FixResult(
        path=str(rom_path),
        success=True,
        original_size=original_size,
        patched_size=len(data),
        checksum=header.checksum,
        written=not dry_run,
    )


def fix_roms(
    paths: Iterable[PathLike],
    ops: Sequence[PatchOperation],
    allowed_extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    dry_run: bool = False,
) -> List[FixResult]:
    """Patch every file with the same operations, continuing past failures."""
    frozen_ops = tuple(ops)
    return [fix_rom(p, frozen_ops, allowed_extensions, dry_run) for p in paths]
