"""The success and error variants that a ``Result`` holds."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass
from typing import Generic, TypeVar

__all__ = ["Ok", "Err"]

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """The success variant of a ``Result``, wrapping its value.

    Two ``Ok`` values are equal when their contents are equal. An ``Ok`` is
    never equal to an ``Err``.
    """

    value: T

    def copy(self) -> T:
        """Return an independent copy of the contained value."""
        return _copy.deepcopy(self.value)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err(Generic[E]):
    """The error variant of a ``Result``, wrapping its error value.

    Two ``Err`` values are equal when their contents are equal. An ``Err`` is
    never equal to an ``Ok``.
    """

    value: E

    def copy(self) -> E:
        """Return an independent copy of the contained error value."""
        return _copy.deepcopy(self.value)

    def __repr__(self) -> str:
        return f"Err({self.value!r})"