from typing import Callable, Optional

from calculator.errors import UnknownVariable
from calculator.tokens import InputToken, Number, VariableRef

Lookup = Callable[[str], Optional[float]]


def resolve(tokens: list[InputToken], lookup: Lookup) -> list[InputToken]:
    """Replaces variable references with their values in place, stopping at the first unknown name"""
    for i, token in enumerate(tokens):
        if not isinstance(token, VariableRef):
            continue
        value = lookup(token.name)
        if value is None:
            raise UnknownVariable(
                f"Variable {token.name} not found", tokens=list(tokens), error_token_idx=i, name=token.name
            )
        tokens[i] = Number(value)
    return tokens
