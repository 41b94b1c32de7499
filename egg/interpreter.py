from __future__ import annotations

import logging
from typing import Literal

from egg import EggValue
from egg.config import get_prelude_path
from egg.evaluation.evaluator import evaluate
from egg.reader.parser import parse
from egg.runtime_context import new_program_scope
from egg.types.scope import Scope

logger = logging.getLogger(__name__)


def run(source: str) -> EggValue:
    """Parse `source` as one program and evaluate it in a fresh scope.

    The first syntax or evaluation error propagates; there is no partial
    result.
    """
    return evaluate(parse(source), new_program_scope())


class Interpreter:
    """
    Evaluates Egg programs in a program scope that persists across calls,
    so definitions made by one `eval` are visible to the next.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.scope: Scope = new_program_scope()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = get_prelude_path()
            if path is not None:
                self.eval_prelude(path.read_text(encoding='utf-8'))
                logger.debug("Loaded prelude from %s", path)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        self.eval(code)

    def eval(self, code: str) -> EggValue:
        return evaluate(parse(code), self.scope)

    def reset(self) -> None:
        """Drop every definition made so far (prelude included)."""
        self.scope = new_program_scope()
