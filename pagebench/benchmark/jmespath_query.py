"""JMESPath query engine, loaded by name through load_query_engine."""
from typing import Any, Dict

import jmespath
from jmespath.exceptions import JMESPathError

from .exceptions import QueryEvaluationError


class JmesPathQuery:
    """DocumentQuery backed by the jmespath library."""

    def __init__(self):
        self._compiled: Dict[str, Any] = {}

    def _compile(self, expression: str):
        compiled = self._compiled.get(expression)
        if compiled is None:
            compiled = jmespath.compile(expression)
            self._compiled[expression] = compiled
        return compiled

    def validate(self, expression: str) -> None:
        try:
            self._compile(expression)
        except JMESPathError as e:
            raise ValueError(f"Invalid JMESPath expression {expression!r}: {e}") from e

    def search(self, expression: str, document: Any) -> Any:
        try:
            return self._compile(expression).search(document)
        except JMESPathError as e:
            raise QueryEvaluationError(f"Evaluating {expression!r} failed: {e}") from e
