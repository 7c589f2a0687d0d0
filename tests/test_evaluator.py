import pytest

from calculator.errors import (
    DanglingOperator,
    EmptyExpression,
    InvalidOperand,
    InvalidTokenInGroup,
    UnmatchedRightParen,
    UnresolvedExpression,
)
from calculator.evaluator import evaluate, evaluate_full, reduce_groups
from calculator.ops import Op
from calculator.tokenizer import tokenize
from calculator.tokens import LeftParen, Number, Operator, RightParen, VariableRef


def test_evaluate_collapses_tokens_in_place() -> None:
    tokens = [Number(1.0), Operator(Op.ADD), Number(2.0), Operator(Op.MUL), Number(3.0)]
    assert evaluate(tokens) == 7.0
    assert tokens == [Number(7.0)]


def test_evaluate_empty() -> None:
    with pytest.raises(EmptyExpression):
        evaluate([])


def test_empty_group() -> None:
    with pytest.raises(EmptyExpression):
        evaluate_full(tokenize("()"))


@pytest.mark.parametrize(
    "code, error_token_idx",
    [
        pytest.param("+5", 0),
        pytest.param("5*", 1),
        pytest.param("1 + 2 ^", 3),
    ],
)
def test_dangling_operator(code: str, error_token_idx: int) -> None:
    with pytest.raises(DanglingOperator) as exc_info:
        evaluate_full(tokenize(code))
    assert exc_info.value.error_token_idx == error_token_idx


def test_invalid_operand_after_operator() -> None:
    tokens = [Number(1.0), Operator(Op.MUL), Operator(Op.ADD), Number(2.0)]
    with pytest.raises(InvalidOperand) as exc_info:
        evaluate(tokens)
    assert exc_info.value.error_token_idx == 2
    assert exc_info.value.tokens == [Number(1.0), Operator(Op.MUL), Operator(Op.ADD), Number(2.0)]


def test_invalid_operand_before_operator() -> None:
    tokens = [Number(1.0), Operator(Op.ADD), Operator(Op.POW), Number(2.0)]
    with pytest.raises(InvalidOperand) as exc_info:
        evaluate(tokens)
    assert exc_info.value.error_token_idx == 1


def test_double_minus_with_space_is_invalid_operand() -> None:
    with pytest.raises(InvalidOperand):
        evaluate_full(tokenize("5 - - 3"))


def test_unresolved_expression_marks_every_token() -> None:
    tokens = [Number(1.0), Number(2.0), Operator(Op.ADD), Number(3.0)]
    with pytest.raises(UnresolvedExpression) as exc_info:
        evaluate(tokens)
    assert list(exc_info.value.error_token_idx) == [0, 1]
    assert str(exc_info.value) == "No corresponding operators\n1 5\n^ ^"


def test_unmatched_right_paren() -> None:
    with pytest.raises(UnmatchedRightParen) as exc_info:
        evaluate_full(tokenize("1+2)"))
    assert exc_info.value.position == 3
    assert str(exc_info.value) == "No matching left paren\n1 + 2 )\n      ^"


def test_unmatched_right_paren_after_resolved_group() -> None:
    with pytest.raises(UnmatchedRightParen) as exc_info:
        evaluate_full(tokenize("(1+2))"))
    assert exc_info.value.position == 5
    assert exc_info.value.tokens == [Number(3.0), RightParen()]


@pytest.mark.parametrize("code", ["(1+2", "((1+2)", "(", "2*(3"])
def test_unclosed_left_paren(code: str) -> None:
    with pytest.raises(InvalidTokenInGroup):
        evaluate_full(tokenize(code))


def test_nested_groups_resolve_innermost_first() -> None:
    tokens = tokenize("2*(3+(4-1)*2)^2")
    assert reduce_groups(tokens) == 162.0  # type: ignore


def test_deep_nesting_does_not_recurse() -> None:
    depth = 5000
    assert evaluate_full(tokenize("(" * depth + "1+1" + ")" * depth)) == 2.0


def test_unresolved_variable_is_rejected() -> None:
    with pytest.raises(InvalidTokenInGroup) as exc_info:
        evaluate_full([VariableRef("x"), Operator(Op.ADD), Number(1.0)])
    assert exc_info.value.error_token_idx == [0]


def test_stray_left_paren_is_reported_at_its_index() -> None:
    with pytest.raises(InvalidTokenInGroup) as exc_info:
        reduce_groups([LeftParen(), Number(1.0)])
    assert exc_info.value.error_token_idx == 0


@pytest.mark.parametrize("code", ["(1+2)-3", "(4)-1"])
def test_minus_after_paren_leaves_negative_literal(code: str) -> None:
    with pytest.raises(UnresolvedExpression):
        evaluate_full(tokenize(code))
