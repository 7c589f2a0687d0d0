import logging
from dataclasses import dataclass, field
from typing import Optional

from calculator.config import ANS_VARIABLE
from calculator.errors import InvalidAssignmentTarget
from calculator.evaluator import evaluate_full
from calculator.resolver import resolve
from calculator.tokenizer import tokenize
from calculator.tokens import AssignmentMarker, InputToken, VariableRef

logger = logging.getLogger(__name__)


@dataclass
class Calculator:
    """State of an interactive session: variables assigned so far and the last result"""

    variables: dict[str, float] = field(default_factory=dict)

    def lookup(self, name: str) -> Optional[float]:
        return self.variables.get(name)

    def last_result(self) -> Optional[float]:
        return self.variables.get(ANS_VARIABLE)

    def set_var(self, name: str, value: float) -> None:
        self.variables[name] = value

    def execute(self, code: str) -> float:
        """Evaluates an expression or an assignment ``name = expr``.

        The value of an assignment is stored under its target name, the value
        of a plain expression under ``ans``. Either way it is returned.
        """
        tokens = tokenize(code)
        markers = [i for i, t in enumerate(tokens) if isinstance(t, AssignmentMarker)]
        if not markers:
            result = self._calculate(tokens)
            self.set_var(ANS_VARIABLE, result)
            return result

        if len(markers) > 1:
            raise InvalidAssignmentTarget(
                "Only a single assignment is supported", tokens=tokens, error_token_idx=markers[1]
            )
        pos = markers[0]
        name = _assignment_target(tokens, pos)
        result = self._calculate(tokens[pos + 1 :])
        self.set_var(name, result)
        logger.info("Assigned %s = %s", name, result)
        return result

    def _calculate(self, tokens: list[InputToken]) -> float:
        return evaluate_full(resolve(tokens, self.lookup))


def _assignment_target(tokens: list[InputToken], pos: int) -> str:
    target = tokens[:pos]
    if len(target) == 1 and isinstance(target[0], VariableRef):
        return target[0].name
    if not target:
        raise InvalidAssignmentTarget("Assignment needs a variable name", tokens=tokens, error_token_idx=pos)
    invalid = [i for i, t in enumerate(target) if not isinstance(t, VariableRef)] or list(range(1, len(target)))
    raise InvalidAssignmentTarget("Only a single variable can be assigned", tokens=tokens, error_token_idx=invalid)
