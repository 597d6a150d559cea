"""Lightweight Result types (Ok/Err) used by the token parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, List, TypeGuard, TypeVar, Union

from ..exceptions import GbaFixError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: GbaFixError


Result = Union[Ok[T], Err]


def is_ok(result: Result[T]) -> TypeGuard[Ok[T]]:
    return isinstance(result, Ok)


def is_err(result: Result[T]) -> TypeGuard[Err]:
    return isinstance(result, Err)


def unwrap(result: Result[T]) -> T:
    if isinstance(result, Ok):
        return result.value
    raise result.error


def collect(results: Iterable[Result[T]]) -> Result[List[T]]:
    """Gather values in order, stopping at the first Err."""
    values: List[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
