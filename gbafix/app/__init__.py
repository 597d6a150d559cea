"""Application layer: per-file processing."""

from .controller import FixResult, fix_rom, fix_roms, load_rom, write_rom

__all__ = ["FixResult", "fix_rom", "fix_roms", "load_rom", "write_rom"]
