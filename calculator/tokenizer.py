import logging
from typing import Sequence

from calculator.ops import Op
from calculator.tokens import (
    AssignmentMarker,
    InputToken,
    LeftParen,
    Number,
    Operator,
    RightParen,
    VariableRef,
)

logger = logging.getLogger(__name__)


SINGLE_CHAR_TOKENS: dict[str, InputToken] = {
    "+": Operator(Op.ADD),
    "-": Operator(Op.SUB),
    "*": Operator(Op.MUL),
    "/": Operator(Op.DIV),
    "%": Operator(Op.MOD),
    "^": Operator(Op.POW),
    "=": AssignmentMarker(),
    "(": LeftParen(),
    ")": RightParen(),
}


def _token_from_lexeme(lexeme: str) -> InputToken:
    if lexeme in SINGLE_CHAR_TOKENS:
        return SINGLE_CHAR_TOKENS[lexeme]
    if not lexeme.isascii() or "_" in lexeme:
        # float() also takes digit separators and non-ascii digits
        return VariableRef(lexeme)
    try:
        return Number(float(lexeme))
    except ValueError:
        return VariableRef(lexeme)


def tokenize(code: str) -> list[InputToken]:
    """Splits code into tokens by accumulating characters until a symbol or whitespace flushes them.

    A minus directly after a number is subtraction, anywhere else it starts
    a negative number literal.
    """
    tokens: list[InputToken] = []
    acc = ""

    def flush() -> None:
        nonlocal acc
        if acc:
            tokens.append(_token_from_lexeme(acc))
            acc = ""

    for c in code:
        if c == "-":
            flush()
            if tokens and isinstance(tokens[-1], Number):
                tokens.append(SINGLE_CHAR_TOKENS[c])
            else:
                acc += c
        elif c in SINGLE_CHAR_TOKENS:
            flush()
            tokens.append(SINGLE_CHAR_TOKENS[c])
        elif c.isspace():
            flush()
        else:
            acc += c
    flush()

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Tokenized %r into %s", code, untokenize(tokens))
    return tokens


def untokenize(tokens: Sequence[object]) -> str:
    return " ".join(str(t) for t in tokens)
