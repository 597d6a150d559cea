"""GBA Fix - header fixer for Game Boy Advance rom images."""

from .core.header import HEADER_SIZE, GbaHeader, compute_checksum
from .patching import apply_patches, parse_token, parse_tokens

__all__ = [
    "HEADER_SIZE",
    "GbaHeader",
    "compute_checksum",
    "apply_patches",
    "parse_token",
    "parse_tokens",
]
