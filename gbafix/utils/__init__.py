"""Small shared helpers."""

from .result import Err, Ok, Result, collect, is_err, is_ok, unwrap

__all__ = ["Ok", "Err", "Result", "collect", "is_err", "is_ok", "unwrap"]
