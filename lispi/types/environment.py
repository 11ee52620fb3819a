"""Runtime environment for lispi.

An Environment stores bindings of Symbols to evaluated values and links to the
enclosing scope through `outer`. The global frame has no outer. Every closure
call (and every recur iteration) gets a fresh child of the closure's captured
environment; many children may share one parent.
"""

from __future__ import annotations

from typing import Mapping, Optional

from lispi import LispValue
from lispi.errors import LispiInvalidSymbol, LispiUnboundSymbol
from lispi.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only; last write wins.

        Raises LispiInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispiInvalidSymbol(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def update(self, bindings: Mapping[Symbol, LispValue]) -> None:
        for name, value in bindings.items():
            self.define(name, value)

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises LispiUnboundSymbol if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise LispiUnboundSymbol(f"Can't resolve symbol '{name}'")
        return env.vars[name]

    def child(self) -> Environment:
        return Environment(outer=self)

    def __repr__(self) -> str:
        depth = 0
        env = self.outer
        while env is not None:
            depth += 1
            env = env.outer
        return f"<Environment vars={len(self.vars)} depth={depth}>"
