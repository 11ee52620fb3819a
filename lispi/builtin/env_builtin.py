"""Built-in functions for the lispi runtime environment.

This module defines arithmetic, comparison, list processing and predicate
functions exposed to Lisp code, plus `register` which installs them into a
global Environment. Every builtin is called as fn(env, args) with already
evaluated arguments and checks its own arity and argument kinds.
"""
from __future__ import annotations

from typing import Callable

from lispi import LispValue
from lispi.errors import LispiArityError, LispiDivisionByZero, LispiTypeError
from lispi.printer import to_lisp_string
from lispi.types.closure import Closure
from lispi.types.environment import Environment
from lispi.types.nil import Nil, is_truthy
from lispi.types.persistent_list import Cons, is_list
from lispi.types import persistent_list
from lispi.types.symbol import Symbol


def _is_number(x: LispValue) -> bool:
    # bool is an int subclass in Python but never a number here
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _check_numbers(name: str, args: list[LispValue]) -> None:
    for arg in args:
        if not _is_number(arg):
            raise LispiTypeError(f"Calling function '{name}' with arg: {to_lisp_string(arg)}")


def _check_arity(name: str, args: list[LispValue], expected: int) -> None:
    if len(args) != expected:
        raise LispiArityError(f"Function '{name}' requires {expected} argument(s), got {len(args)}")


def _check_at_least(name: str, args: list[LispValue], minimum: int) -> None:
    if len(args) < minimum:
        raise LispiArityError(f"Function '{name}' requires at least {minimum} argument(s), got {len(args)}")


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality: type-strict for atoms, element-wise for lists, identity for functions."""
    if a is b:
        return True
    if isinstance(a, Cons) or isinstance(b, Cons):
        return isinstance(a, Cons) and isinstance(b, Cons) and a == b
    if type(a) is not type(b):
        return False
    return a == b


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments; (+) is 0."""
    _check_numbers("+", args)
    return sum(args)


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    _check_at_least("-", args, 1)
    _check_numbers("-", args)
    if len(args) == 1:
        return -args[0]
    result = args[0]
    for x in args[1:]:
        result -= x
    return result


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the product of all arguments; (*) is 1."""
    _check_numbers("*", args)
    result = 1
    for x in args:
        result *= x
    return result


def _divide(a, b):
    if b == 0:
        raise LispiDivisionByZero("Division by zero")
    # Exact integer quotients stay integers
    if isinstance(a, int) and isinstance(b, int) and a % b == 0:
        return a // b
    return a / b


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Divide left-to-right; with one arg returns the reciprocal."""
    _check_at_least("/", args, 1)
    _check_numbers("/", args)
    if len(args) == 1:
        return _divide(1, args[0])
    result = args[0]
    for x in args[1:]:
        result = _divide(result, x)
    return result


def mod(env: Environment, args: list[LispValue]) -> LispValue:
    """(mod n d) => n % d. Exactly 2 integer arguments."""
    _check_arity("mod", args, 2)
    n, d = args
    if not isinstance(n, int) or not isinstance(d, int) or isinstance(n, bool) or isinstance(d, bool):
        raise LispiTypeError("All arguments to mod must be integers")
    if d == 0:
        raise LispiDivisionByZero("Modulo by zero")
    return n % d


def inc(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("inc", args, 1)
    _check_numbers("inc", args)
    return args[0] + 1


def dec(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("dec", args, 1)
    _check_numbers("dec", args)
    return args[0] - 1


# -------------------------------
# Comparison and logic
# -------------------------------
def equals(env: Environment, args: list[LispValue]) -> bool:
    """Return true if all arguments are structurally equal."""
    _check_at_least("=", args, 1)
    leader = args[0]
    return all(is_equal(leader, other) for other in args[1:])


def _chain(name, args, op) -> bool:
    _check_at_least(name, args, 1)
    _check_numbers(name, args)
    return all(op(a, b) for a, b in zip(args, args[1:]))


def lt(env: Environment, args: list[LispValue]) -> bool:
    """Chainable less-than: true if a0 < a1 < a2 ... holds for all pairs."""
    return _chain("<", args, lambda a, b: a < b)


def lte(env: Environment, args: list[LispValue]) -> bool:
    return _chain("<=", args, lambda a, b: a <= b)


def gt(env: Environment, args: list[LispValue]) -> bool:
    """Chainable greater-than: true if a0 > a1 > a2 ... holds for all pairs."""
    return _chain(">", args, lambda a, b: a > b)


def gte(env: Environment, args: list[LispValue]) -> bool:
    return _chain(">=", args, lambda a, b: a >= b)


def logical_not(env: Environment, args: list[LispValue]) -> bool:
    """Logical NOT for a single value; only nil and false are falsey."""
    _check_arity("not", args, 1)
    return not is_truthy(args[0])


# -------------------------------
# Lists
# -------------------------------
def list_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Build a persistent list holding the arguments in order."""
    return persistent_list.make_list(*args)


def cons(env: Environment, args: list[LispValue]) -> Cons:
    """Prepend a value to a list; the tail is shared, never copied."""
    _check_arity("cons", args, 2)
    return persistent_list.cons(args[0], args[1])


def head(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("head", args, 1)
    return persistent_list.head(args[0])


def first(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("first", args, 1)
    return persistent_list.head(args[0], "first")


def rest(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("rest", args, 1)
    return persistent_list.rest(args[0])


def is_empty(env: Environment, args: list[LispValue]) -> bool:
    _check_arity("empty?", args, 1)
    return persistent_list.is_empty(args[0])


def count(env: Environment, args: list[LispValue]) -> int:
    _check_arity("count", args, 1)
    if not is_list(args[0]):
        raise LispiTypeError(f"count expects a list, got {to_lisp_string(args[0])}")
    return len(args[0])


# -------------------------------
# Predicates
# -------------------------------
def is_nil(env: Environment, args: list[LispValue]) -> bool:
    _check_arity("nil?", args, 1)
    return args[0] is Nil


def is_list_builtin(env: Environment, args: list[LispValue]) -> bool:
    _check_arity("list?", args, 1)
    return is_list(args[0])


def is_number(env: Environment, args: list[LispValue]) -> bool:
    _check_arity("number?", args, 1)
    return _is_number(args[0])


def is_symbol(env: Environment, args: list[LispValue]) -> bool:
    _check_arity("symbol?", args, 1)
    return isinstance(args[0], Symbol)


def is_fn(env: Environment, args: list[LispValue]) -> bool:
    _check_arity("fn?", args, 1)
    return isinstance(args[0], Closure) or callable(args[0])


BUILTINS: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "mod": mod,
    "inc": inc,
    "dec": dec,
    "=": equals,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "not": logical_not,
    "list": list_builtin,
    "cons": cons,
    "head": head,
    "first": first,
    "rest": rest,
    "empty?": is_empty,
    "count": count,
    "nil?": is_nil,
    "list?": is_list_builtin,
    "number?": is_number,
    "symbol?": is_symbol,
    "fn?": is_fn,
}

# The printer shows builtins by the name Lisp code calls them with
for _name, _fn in BUILTINS.items():
    _fn.lisp_name = _name


def register(env: Environment) -> None:
    """Register all builtin functions and constants into the given environment."""
    env.update({Symbol(name): fn for name, fn in BUILTINS.items()})
    env.define(Symbol("nil"), Nil)
    env.define(Symbol("true"), True)
    env.define(Symbol("false"), False)
