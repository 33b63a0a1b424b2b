"""A value that is either a success (``Ok``) or a failure (``Err``)."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from stx.panic import SourceLocation, panic
from stx.variants import Err, Ok

__all__ = ["Result", "make_ok", "make_err"]

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


def _fail(info: str, *args: Any) -> None:
    # Two frames up: past this helper and the Result method to its caller.
    panic(info, *args, location=SourceLocation.current(2))


class Result(Generic[T, E]):
    """Either ``Ok`` holding a value or ``Err`` holding an error value.

    A ``Result`` compares equal to an ``Ok`` or ``Err`` with equal contents,
    and to another ``Result`` in the same state with equal contents. It is
    truthy when it is ``Ok``.
    """

    __slots__ = ("_variant",)

    def __init__(self, variant: Ok[T] | Err[E]) -> None:
        if not isinstance(variant, (Ok, Err)):
            raise TypeError(
                f"Result must be built from Ok or Err, not {type(variant).__name__}"
            )
        self._variant = variant

    @property
    def variant(self) -> Ok[T] | Err[E]:
        """The ``Ok`` or ``Err`` this result holds."""
        return self._variant

    def is_ok(self) -> bool:
        """Whether this result is ``Ok``."""
        return isinstance(self._variant, Ok)

    def is_err(self) -> bool:
        """Whether this result is ``Err``."""
        return not self.is_ok()

    def __bool__(self) -> bool:
        return self.is_ok()

    def contains(self, cmp: Any) -> bool:
        """Whether this is ``Ok`` with a value equal to ``cmp``."""
        return self.is_ok() and self._variant.value == cmp

    def contains_err(self, cmp: Any) -> bool:
        """Whether this is ``Err`` with an error equal to ``cmp``."""
        return self.is_err() and self._variant.value == cmp

    def exists(self, predicate: Callable[[T], Any]) -> bool:
        """``predicate`` applied to the value if ``Ok``, else ``False``."""
        if self.is_ok():
            return bool(predicate(self._variant.value))
        return False

    def err_exists(self, predicate: Callable[[E], Any]) -> bool:
        """``predicate`` applied to the error if ``Err``, else ``False``."""
        if self.is_err():
            return bool(predicate(self._variant.value))
        return False

    def value(self) -> T:
        """The contained value, without copying; panics on ``Err``."""
        if self.is_err():
            _fail("called `Result::value()` on an `Err` value", self._variant.value)
        return self._variant.value

    def err(self) -> E:
        """The contained error, without copying; panics on ``Ok``."""
        if self.is_ok():
            _fail("called `Result::err()` on an `Ok` value")
        return self._variant.value

    def map(self, op: Callable[[T], U]) -> Result[U, E]:
        """Apply ``op`` to an ``Ok`` value, leaving an ``Err`` untouched."""
        if self.is_ok():
            return Result(Ok(op(self._variant.value)))
        return Result(Err(self._variant.value))

    def map_or(self, op: Callable[[T], U], alt: U) -> U:
        """``op`` applied to an ``Ok`` value, or ``alt`` for ``Err``."""
        if self.is_ok():
            return op(self._variant.value)
        return alt

    def map_or_else(self, op: Callable[[T], U], alt_op: Callable[[E], U]) -> U:
        """``op`` applied to an ``Ok`` value, or ``alt_op`` to an error."""
        if self.is_ok():
            return op(self._variant.value)
        return alt_op(self._variant.value)

    def map_err(self, op: Callable[[E], F]) -> Result[T, F]:
        """Apply ``op`` to an ``Err`` value, leaving an ``Ok`` untouched."""
        if self.is_ok():
            return Result(Ok(self._variant.value))
        return Result(Err(op(self._variant.value)))

    def and_(self, res: Result[U, F]) -> Result[U, F]:
        """``res`` if this is ``Ok``, otherwise this result's error."""
        if self.is_ok():
            return res
        return Result(Err(self._variant.value))

    def and_then(self, op: Callable[[T], U]) -> Result[U, E]:
        """Wrap ``op`` applied to an ``Ok`` value in ``Ok``; pass on ``Err``."""
        if self.is_ok():
            return Result(Ok(op(self._variant.value)))
        return Result(Err(self._variant.value))

    def or_(self, alt: Result[T, E]) -> Result[T, E]:
        """This result if ``Ok``, otherwise ``alt``."""
        if self.is_ok():
            return Result(Ok(self._variant.value))
        return alt

    def or_else(self, op: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """This result if ``Ok``, otherwise ``op`` applied to the error."""
        if self.is_ok():
            return Result(Ok(self._variant.value))
        return op(self._variant.value)

    def unwrap_or(self, alt: T) -> T:
        """The ``Ok`` value, or ``alt``."""
        if self.is_ok():
            return self._variant.value
        return alt

    def unwrap_or_else(self, op: Callable[[E], T]) -> T:
        """The ``Ok`` value, or ``op`` applied to the error."""
        if self.is_ok():
            return self._variant.value
        return op(self._variant.value)

    def unwrap(self) -> T:
        """The ``Ok`` value; panics with the error's report on ``Err``."""
        if self.is_err():
            _fail("called `Result::unwrap()` on an `Err` value", self._variant.value)
        return self._variant.value

    def expect(self, msg: str) -> T:
        """The ``Ok`` value; panics with ``msg`` and the error on ``Err``."""
        if self.is_err():
            _fail(msg, self._variant.value)
        return self._variant.value

    def unwrap_err(self) -> E:
        """The ``Err`` value; panics on ``Ok``."""
        if self.is_ok():
            _fail("called `Result::unwrap_err()` on an `Ok` value")
        return self._variant.value

    def expect_err(self, msg: str) -> E:
        """The ``Err`` value; panics with ``msg`` on ``Ok``."""
        if self.is_ok():
            _fail(msg)
        return self._variant.value

    def unwrap_or_default(self, default_factory: Callable[[], T]) -> T:
        """The ``Ok`` value, or a fresh default from ``default_factory``."""
        if self.is_ok():
            return self._variant.value
        return default_factory()

    def match(self, ok_fn: Callable[[T], U], err_fn: Callable[[E], U]) -> U:
        """``ok_fn`` applied to the value, or ``err_fn`` to the error."""
        if self.is_ok():
            return ok_fn(self._variant.value)
        return err_fn(self._variant.value)

    def copy(self) -> Result[T, E]:
        """An independent copy of this result and its contents."""
        if self.is_ok():
            return Result(Ok(self._variant.copy()))
        return Result(Err(self._variant.copy()))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Result):
            return self._variant == other._variant
        if isinstance(other, (Ok, Err)):
            return self._variant == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._variant)

    def __repr__(self) -> str:
        return f"Result({self._variant!r})"


def make_ok(value: T) -> Result[T, Any]:
    """A ``Result`` holding ``Ok(value)``."""
    return Result(Ok(value))


def make_err(err: E) -> Result[Any, E]:
    """A ``Result`` holding ``Err(err)``."""
    return Result(Err(err))