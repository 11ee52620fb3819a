"""Lisp-style rendering of runtime values, used by the REPL and error messages."""

from lispi import LispValue
from lispi.types.closure import Closure
from lispi.types.nil import Nil
from lispi.types.persistent_list import Cons
from lispi.types.symbol import Symbol

_STRING_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r"}


def _quote(text: str) -> str:
    return '"' + "".join(_STRING_ESCAPES.get(ch, ch) for ch in text) + '"'


def _atom_string(value: LispValue) -> str:
    if value is Nil:
        return "nil"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, Symbol):
        return value.id
    if isinstance(value, Closure):
        return str(value)
    if callable(value):
        name = getattr(value, "lisp_name", getattr(value, "__name__", "?"))
        return f"<builtin {name}>"
    return str(value)


def to_lisp_string(value: LispValue) -> str:
    """Convert a value to its printable form (Nil -> "nil", lists -> "(1 2 3)").

    Nested lists are walked with an explicit work stack of
    ``(is_text, item)`` pairs, so printing never recurses.
    """
    parts: list[str] = []
    work: list[tuple[bool, object]] = [(False, value)]
    while work:
        is_text, item = work.pop()
        if is_text:
            parts.append(item)
        elif isinstance(item, (Cons, list)):
            elements = list(item)
            work.append((True, ")"))
            for index in range(len(elements) - 1, -1, -1):
                work.append((False, elements[index]))
                if index:
                    work.append((True, " "))
            work.append((True, "("))
        else:
            parts.append(_atom_string(item))
    return "".join(parts)
