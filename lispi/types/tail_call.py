from lispi.types.closure import Closure
from lispi.types.environment import Environment


class TailCall:
    """Pending evaluation of `fn.body` in `env`, bounced by the trampoline."""

    __slots__ = ("fn", "env")

    def __init__(self, fn: Closure, env: Environment):
        self.fn = fn
        self.env = env
