from dataclasses import dataclass
from typing import Collection, Sequence

from calculator.utils import format_error


@dataclass
class CalcError(Exception):
    errmsg: str
    tokens: Sequence[object]
    error_token_idx: int | Collection[int]

    def __str__(self) -> str:
        return format_error(self.tokens, self.error_token_idx, self.errmsg)


@dataclass
class UnknownVariable(CalcError):
    name: str


@dataclass
class UnmatchedRightParen(CalcError):
    position: int


class InvalidTokenInGroup(CalcError):
    pass


class EmptyExpression(CalcError):
    pass


class DanglingOperator(CalcError):
    pass


class InvalidOperand(CalcError):
    pass


class UnresolvedExpression(CalcError):
    pass


class InvalidAssignmentTarget(CalcError):
    pass
