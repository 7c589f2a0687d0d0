"""Token model of the calculator.

Tokens come in three layers, each accepting a strict subset of the one above it:

* ``InputToken`` is what the tokenizer produces: anything a user can type,
  including variable references and the assignment marker.
* ``GroupToken`` is what is left once variables are substituted and the
  assignment is split off: arithmetic tokens and parentheses.
* ``ArithToken`` is a flat run of numbers and operators, reduced by precedence.

Moving down a layer goes through ``narrow_to_group`` / ``narrow_to_arith``,
which raise ``InvalidTokenInGroup`` on a token the lower layer cannot hold.
"""
from dataclasses import dataclass
from typing import Sequence

from calculator.errors import InvalidTokenInGroup
from calculator.ops import Op
from calculator.utils import format_number


@dataclass(frozen=True)
class Number:
    value: float

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class Operator:
    op: Op

    def __str__(self) -> str:
        return self.op.symbol


@dataclass(frozen=True)
class LeftParen:
    def __str__(self) -> str:
        return "("


@dataclass(frozen=True)
class RightParen:
    def __str__(self) -> str:
        return ")"


@dataclass(frozen=True)
class VariableRef:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class AssignmentMarker:
    def __str__(self) -> str:
        return "="


ArithToken = Number | Operator
GroupToken = ArithToken | LeftParen | RightParen
InputToken = GroupToken | VariableRef | AssignmentMarker


def is_arith(token: object) -> bool:
    return isinstance(token, (Number, Operator))


def is_group(token: object) -> bool:
    return isinstance(token, (Number, Operator, LeftParen, RightParen))


def narrow_to_group(tokens: Sequence[InputToken]) -> list[GroupToken]:
    invalid = [i for i, t in enumerate(tokens) if not is_group(t)]
    if invalid:
        raise InvalidTokenInGroup("Token not allowed here", tokens=list(tokens), error_token_idx=invalid)
    return list(tokens)  # type: ignore


def narrow_to_arith(tokens: Sequence[GroupToken]) -> list[ArithToken]:
    for i, token in enumerate(tokens):
        if not is_arith(token):
            raise InvalidTokenInGroup("Token not allowed here", tokens=list(tokens), error_token_idx=i)
    return list(tokens)  # type: ignore
