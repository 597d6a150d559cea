"""Cartridge header model."""

from .header import (
    HEADER_SIZE,
    GbaHeader,
    HeaderField,
    compute_checksum,
)

__all__ = ["HEADER_SIZE", "GbaHeader", "HeaderField", "compute_checksum"]
