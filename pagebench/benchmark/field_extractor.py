"""Extracts pagination fields from JSON response documents."""
import importlib
import json
import logging
from typing import Any, Dict, Optional, Protocol, Type

from .exceptions import ConfigurationError, DependencyMissingError, QueryEvaluationError


logger = logging.getLogger(__name__)


class DocumentQuery(Protocol):
    """Evaluates query expressions against decoded JSON documents."""

    def validate(self, expression: str) -> None:
        """Raise ValueError if the expression cannot be compiled."""
        ...

    def search(self, expression: str, document: Any) -> Any:
        """Return the expression's value, None when it selects nothing."""
        ...


QUERY_ENGINES: Dict[str, str] = {
    "jmespath": "pagebench.benchmark.jmespath_query:JmesPathQuery",
}


def load_query_engine(name: str) -> DocumentQuery:
    """
    Instantiate a query engine by registered name or "module:Class" path.

    Raises:
        DependencyMissingError: If the engine's module or class cannot be loaded.
    """
    target = QUERY_ENGINES.get(name, name)
    module_name, _, class_name = target.partition(":")
    if not class_name:
        raise DependencyMissingError(
            f"Unknown query engine '{name}'; use one of {', '.join(QUERY_ENGINES)} or 'module:Class'"
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise DependencyMissingError(f"Query engine '{name}' is not installed: {e}") from e

    engine_class: Optional[Type] = getattr(module, class_name, None)
    if engine_class is None:
        raise DependencyMissingError(f"Query engine class '{class_name}' not found in '{module_name}'")
    logger.debug(f"Loaded query engine {target}")
    return engine_class()


class FieldExtractor:
    """Pulls item counts, next-page markers and cursors out of page documents."""

    def __init__(self, query: DocumentQuery):
        self.query = query

    def validate_expression(self, expression: str, config_key: str) -> None:
        """
        Check that an expression compiles for the configured engine.

        Raises:
            ConfigurationError: If the engine rejects the expression.
        """
        try:
            self.query.validate(expression)
        except ValueError as e:
            raise ConfigurationError(str(e), config_key=config_key, cause=e) from e

    @staticmethod
    def parse_document(body: bytes) -> Any:
        """Decode a response body; an unparseable body yields an empty document."""
        if not body:
            return None
        try:
            return json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Response body is not valid JSON, treating it as empty: {e}")
            return None

    def _evaluate(self, expression: str, document: Any) -> Any:
        try:
            return self.query.search(expression, document)
        except QueryEvaluationError as e:
            logger.warning(str(e))
            return None

    def extract_count(self, expression: str, document: Any) -> int:
        """
        Evaluate an item-count expression.

        Absent and non-numeric values count as zero; the two cases are logged
        at different levels so a misconfigured expression stands out.
        """
        value = self._evaluate(expression, document)
        if value is None:
            logger.debug(f"Count field {expression!r} is absent, using 0")
            return 0
        if isinstance(value, bool):
            logger.warning(f"Count field {expression!r} is a boolean ({value}), using 0")
            return 0
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                pass
        logger.warning(f"Count field {expression!r} is not numeric ({value!r}), using 0")
        return 0

    def extract_has_next(self, expression: str, document: Any) -> bool:
        """Evaluate a next-link marker; null, false and empty string mean no next page."""
        value = self._evaluate(expression, document)
        if value is None or value is False or value == "":
            return False
        return True

    def extract_cursor(self, expression: str, document: Any) -> Optional[str]:
        """Evaluate a next-cursor expression, returning the token as text."""
        value = self._evaluate(expression, document)
        if value is None or value == "" or isinstance(value, bool):
            return None
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, (dict, list)):
            return json.dumps(value, separators=(",", ":"))
        return str(value)
