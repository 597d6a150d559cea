"""Patch operations and the token parser.

Each command line token starting with ``-`` maps to exactly one operation:

    -p            Pad
    -t[<title>]   Title (empty: derive from the file name)
    -c<code>      GameCode
    -m<code>      MakerCode
    -r<version>   Version
    -d<0|1>       Debug
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from ..core.header import pad_game_code, pad_maker_code, pad_title, GAME_CODE, MAKER_CODE, TITLE
from ..exceptions import PatchParseError
from ..utils.result import Err, Ok, Result, collect

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Pad:
    """Grow the file to the next power of two."""


@dataclass(frozen=True)
class Title:
    value: Optional[bytes] = None


@dataclass(frozen=True)
class GameCode:
    value: bytes


@dataclass(frozen=True)
class MakerCode:
    value: bytes


@dataclass(frozen=True)
class Version:
    value: int


@dataclass(frozen=True)
class Debug:
    enabled: bool


PatchOperation = Union[Pad, Title, GameCode, MakerCode, Version, Debug]


def _parse_unsigned(text: str) -> Optional[int]:
    if not _UNSIGNED_RE.fullmatch(text):
        return None
    return int(text)


def _err(token: str, reason: str) -> Err:
    return Err(PatchParseError(reason, token=token))


def parse_token(token: str) -> Result[PatchOperation]:
    """Parse one patch token; never raises for malformed input."""
    if token == "-p":
        return Ok(Pad())

    prefix, payload = token[:2], token[2:]

    if prefix == "-t":
        if not payload:
            return Ok(Title(None))
        raw = payload.encode("utf-8")
        if len(raw) > TITLE.size:
            return _err(token, "title too long")
        return Ok(Title(pad_title(raw)))

    if prefix == "-c":
        raw = payload.encode("utf-8")
        if len(raw) > GAME_CODE.size:
            return _err(token, "game code too long")
        return Ok(GameCode(pad_game_code(raw)))

    if prefix == "-m":
        raw = payload.encode("utf-8")
        if len(raw) > MAKER_CODE.size:
            return _err(token, "maker code too long")
        return Ok(MakerCode(pad_maker_code(raw)))

    if prefix == "-r":
        number = _parse_unsigned(payload)
        if number is None or number > 0xFF:
            return _err(token, "invalid version")
        return Ok(Version(number))

    if prefix == "-d":
        number = _parse_unsigned(payload)
        if number not in (0, 1):
            return _err(token, "debug level must be 0 or 1")
        return Ok(Debug(number == 1))

    return _err(token, "unknown argument")


def parse_tokens(tokens: Iterable[str]) -> Result[List[PatchOperation]]:
    """Parse tokens in order; the first bad token wins."""
    return collect(parse_token(token) for token in tokens)
