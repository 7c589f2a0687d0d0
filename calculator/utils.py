import enum
import math
from typing import Collection, Sequence


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def format_number(v: float) -> str:
    if v == 0 and math.copysign(1.0, v) < 0:
        return "-0"
    if math.isfinite(v) and v.is_integer():
        return str(int(v))
    return repr(v)


def format_error(tokens: Sequence[object], fault_index: int | Collection[int], message: str) -> str:
    """Renders message, the tokens joined by spaces and a line of carets under the faulting token(s)"""
    if not tokens:
        return message
    marked = {fault_index} if isinstance(fault_index, int) else set(fault_index)
    lexemes = [str(t) for t in tokens]
    markers = [("^" if i in marked else " ") * len(lexeme) for i, lexeme in enumerate(lexemes)]
    if len(tokens) in marked:
        # past the last token, e.g. an expression that ended too early
        markers.append("^")
    return "\n".join([message, " ".join(lexemes), " ".join(markers).rstrip()])
