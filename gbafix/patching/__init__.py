"""Header patching.

- Token parser producing typed patch operations
- Applicator that pads, edits header fields and rewrites the checksum
"""

from .ops import (
    Pad,
    Title,
    GameCode,
    MakerCode,
    Version,
    Debug,
    PatchOperation,
    parse_token,
    parse_tokens,
)
from .applicator import (
    apply_patches,
    is_power_of_two,
    next_power_of_two,
    pad_to_power_of_two,
    title_from_name,
)

__all__ = [
    # operations
    "Pad",
    "Title",
    "GameCode",
    "MakerCode",
    "Version",
    "Debug",
    "PatchOperation",
    "parse_token",
    "parse_tokens",
    # applicator
    "apply_patches",
    "is_power_of_two",
    "next_power_of_two",
    "pad_to_power_of_two",
    "title_from_name",
]
