import math
from typing import Callable

from calculator.utils import PrintableEnum


class Op(PrintableEnum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "^"

    @property
    def symbol(self) -> str:
        return self.value

    def apply(self, a: float, b: float) -> float:
        return OP_IMPLS[self](a, b)


# highest precedence first, operators of one tier are reduced left to right
PRECEDENCE: list[frozenset[Op]] = [
    frozenset({Op.POW}),
    frozenset({Op.MOD, Op.DIV, Op.MUL}),
    frozenset({Op.SUB, Op.ADD}),
]


def _div(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _mod(a: float, b: float) -> float:
    try:
        return math.fmod(a, b)
    except ValueError:
        # fmod(x, 0) and fmod(inf, y)
        return math.nan


def _is_odd_integer(v: float) -> bool:
    return math.isfinite(v) and v.is_integer() and int(v) % 2 == 1


def _pow(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0 and _is_odd_integer(b):
            return -math.inf
        return math.inf
    except ValueError:
        if a == 0 and b < 0:
            if _is_odd_integer(b):
                return math.copysign(math.inf, a)
            return math.inf
        # negative base with a fractional exponent
        return math.nan


OP_IMPLS: dict[Op, Callable[[float, float], float]] = {
    Op.ADD: lambda a, b: a + b,
    Op.SUB: lambda a, b: a - b,
    Op.MUL: lambda a, b: a * b,
    Op.DIV: _div,
    Op.MOD: _mod,
    Op.POW: _pow,
}
