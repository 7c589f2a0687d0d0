import logging

from calculator.errors import (
    DanglingOperator,
    EmptyExpression,
    InvalidOperand,
    InvalidTokenInGroup,
    UnmatchedRightParen,
    UnresolvedExpression,
)
from calculator.ops import PRECEDENCE
from calculator.tokens import (
    ArithToken,
    GroupToken,
    InputToken,
    LeftParen,
    Number,
    Operator,
    RightParen,
    is_arith,
    narrow_to_arith,
    narrow_to_group,
)
from calculator.tokenizer import untokenize

logger = logging.getLogger(__name__)


def evaluate(tokens: list[ArithToken]) -> float:
    """Reduces a flat run of numbers and operators to a single number.

    Tiers from ``PRECEDENCE`` are applied one after another, each scanned left
    to right, so ``2^3^2`` is ``(2^3)^2``. Mutates passed tokens list.
    """
    if not tokens:
        raise EmptyExpression("Empty expression", tokens=[], error_token_idx=0)

    for tier in PRECEDENCE:
        i = 0
        while i < len(tokens):
            token = tokens[i]
            if not (isinstance(token, Operator) and token.op in tier):
                i += 1
                continue
            if i == 0 or i == len(tokens) - 1:
                raise DanglingOperator("Operator without matching numbers", tokens=list(tokens), error_token_idx=i)
            right = tokens[i + 1]
            if not isinstance(right, Number):
                raise InvalidOperand("Invalid token after operator", tokens=list(tokens), error_token_idx=i + 1)
            left = tokens[i - 1]
            if not isinstance(left, Number):
                raise InvalidOperand("Invalid token before operator", tokens=list(tokens), error_token_idx=i - 1)
            result = token.op.apply(left.value, right.value)
            logger.debug("%s %s %s = %s", left, token, right, result)
            # the window collapses onto i - 1, so the next candidate operator is at i again
            tokens[i - 1 : i + 2] = [Number(result)]

    if len(tokens) == 1 and isinstance(tokens[0], Number):
        return tokens[0].value
    raise UnresolvedExpression(
        "No corresponding operators", tokens=list(tokens), error_token_idx=range(len(tokens))
    )


def reduce_groups(tokens: list[GroupToken]) -> float:
    """Resolves parenthesised groups innermost first, then evaluates what is left.

    Tokens are pushed onto a stack; every closing paren pops everything down to
    the nearest opening paren, evaluates it and pushes the result back.
    """
    stack: list[GroupToken] = []
    for i, token in enumerate(tokens):
        if not isinstance(token, RightParen):
            stack.append(token)
            continue

        open_idx = next((j for j in range(len(stack) - 1, -1, -1) if isinstance(stack[j], LeftParen)), None)
        if open_idx is None:
            raise UnmatchedRightParen(
                "No matching left paren", tokens=stack + [token], error_token_idx=len(stack), position=i
            )
        enclosure = stack[open_idx + 1 :]
        del stack[open_idx:]
        group = narrow_to_arith(enclosure)
        result = evaluate(group)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Group (%s) resolved to %s", untokenize(enclosure), result)
        stack.append(Number(result))

    invalid = [i for i, t in enumerate(stack) if not is_arith(t)]
    if invalid:
        raise InvalidTokenInGroup("Unclosed left paren", tokens=stack, error_token_idx=invalid[0])
    return evaluate(narrow_to_arith(stack))


def evaluate_full(tokens: list[InputToken]) -> float:
    """Evaluates tokens with all variables already resolved and no assignment marker"""
    return reduce_groups(narrow_to_group(tokens))
