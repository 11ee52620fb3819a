"""Persistent singly linked lists.

A list is either ``Nil`` or a ``Cons`` cell whose ``rest`` is another list.
Cells are never mutated once built, so any number of lists (and closures,
and in-flight evaluations) can share the same tail without copying.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from lispi import LispValue
from lispi.errors import LispiEmptyListError, LispiTypeError
from lispi.types.nil import Nil, NilType


class Cons:
    __slots__ = ("head", "rest")

    def __init__(self, head: LispValue, rest: Cons | NilType):
        object.__setattr__(self, "head", head)
        object.__setattr__(self, "rest", rest)

    def __setattr__(self, name, value):
        raise AttributeError("Cons cells are immutable")

    def __delattr__(self, name):
        raise AttributeError("Cons cells are immutable")

    def __iter__(self) -> Iterator[LispValue]:
        node = self
        while node is not Nil:
            yield node.head
            node = node.rest

    def __len__(self) -> int:
        count = 0
        node = self
        while node is not Nil:
            count += 1
            node = node.rest
        return count

    def __eq__(self, other: object) -> bool:
        # Walk both spines together; shared tails short-circuit.
        a, b = self, other
        while True:
            if a is b:
                return True
            if not isinstance(a, Cons) or not isinstance(b, Cons):
                return False
            if a.head != b.head or type(a.head) is not type(b.head):
                return False
            a, b = a.rest, b.rest

    __hash__ = None

    def __repr__(self) -> str:
        from lispi.printer import to_lisp_string
        return to_lisp_string(self)


def is_list(value: LispValue) -> bool:
    return value is Nil or isinstance(value, Cons)


def _require_list(value: LispValue, op: str) -> None:
    if not is_list(value):
        raise LispiTypeError(f"{op} expects a list, got {type(value).__name__}")


def cons(value: LispValue, lst: Cons | NilType) -> Cons:
    """Return a new list with `value` in front of `lst` (shared, not copied)."""
    _require_list(lst, "cons")
    return Cons(value, lst)


def head(lst: Cons | NilType, op: str = "head") -> LispValue:
    _require_list(lst, op)
    if lst is Nil:
        raise LispiEmptyListError(f"{op} of empty list")
    return lst.head


def rest(lst: Cons | NilType) -> Cons | NilType:
    _require_list(lst, "rest")
    if lst is Nil:
        raise LispiEmptyListError("rest of empty list")
    return lst.rest


def is_empty(lst: Cons | NilType) -> bool:
    _require_list(lst, "empty?")
    return lst is Nil


def from_iterable(values: Iterable[LispValue]) -> Cons | NilType:
    result: Cons | NilType = Nil
    for value in reversed(list(values)):
        result = Cons(value, result)
    return result


def make_list(*values: LispValue) -> Cons | NilType:
    """Build a list right to left so it keeps argument order."""
    return from_iterable(values)
