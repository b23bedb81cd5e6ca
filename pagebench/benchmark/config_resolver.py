"""Turns raw settings into a validated benchmark configuration."""
import logging
from typing import Any, List, Optional

from pydantic import ValidationError

from pagebench.const import ENV_PREFIX, USAGE_EXAMPLE
from pagebench.shared.config import Config

from .constants import BenchmarkConstants
from .exceptions import ConfigurationError
from .field_extractor import FieldExtractor, load_query_engine
from .models import BenchmarkConfig, EndpointSpec, PaginationStyle


logger = logging.getLogger(__name__)


class ConfigResolver:
    """Applies defaults, checks required endpoints and validates query expressions."""

    ENDPOINT_KEYS = ("a", "b", "c")
    REQUIRED_KEYS = ("a", "b")

    @staticmethod
    def load_settings(**overrides: Any) -> Config:
        """
        Read settings from the environment and pagebench.json.

        Raises:
            ConfigurationError: If a value fails validation.
        """
        try:
            return Config(**overrides)
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(part) for part in first.get("loc", ()))
            raise ConfigurationError(
                f"Invalid configuration value for '{key}': {first.get('msg')}",
                config_key=key or None,
                cause=e,
            ) from e

    def resolve(self, settings: Config, field_extractor: Optional[FieldExtractor] = None) -> BenchmarkConfig:
        """
        Build the benchmark configuration.

        Args:
            settings: Raw settings.
            field_extractor: Extractor used to validate expressions; built from
                settings.query_engine when omitted.

        Raises:
            ConfigurationError: If required endpoints are missing or an expression is invalid.
            DependencyMissingError: If the query engine cannot be loaded.
        """
        missing = [key for key in self.REQUIRED_KEYS if not getattr(settings, f"endpoint_{key}")]
        if missing:
            names = " and ".join(f"{ENV_PREFIX}ENDPOINT_{key.upper()}" for key in self.REQUIRED_KEYS)
            raise ConfigurationError(
                f"{names} must be set",
                config_key=f"endpoint_{missing[0]}",
                suggestions=[USAGE_EXAMPLE],
            )

        extractor = field_extractor or FieldExtractor(load_query_engine(settings.query_engine))
        endpoints: List[EndpointSpec] = []
        for key in self.ENDPOINT_KEYS:
            path = getattr(settings, f"endpoint_{key}")
            if not path:
                continue
            endpoint = self._resolve_endpoint(settings, key, path)
            self._validate_expressions(endpoint, extractor)
            endpoints.append(endpoint)
            logger.debug(f"Resolved endpoint {key}: {endpoint}")

        return BenchmarkConfig(
            base_url=settings.base_url.rstrip("/"),
            endpoints=endpoints,
            page_size=settings.page_size,
            warmup_requests=settings.warmup_requests,
            benchmark_requests=settings.benchmark_requests,
            request_timeout=settings.request_timeout if settings.request_timeout > 0 else None,
            max_retries=settings.max_retries,
            strict_status=settings.strict_status,
            parallel_endpoints=settings.parallel_endpoints,
            query_engine=settings.query_engine,
        )

    @staticmethod
    def _resolve_endpoint(settings: Config, key: str, path: str) -> EndpointSpec:
        style = PaginationStyle(getattr(settings, f"pagination_{key}"))
        if style is PaginationStyle.OFFSET:
            param = BenchmarkConstants.DEFAULT_PAGE_PARAM
            count_expr = BenchmarkConstants.OFFSET_COUNT_EXPR
        else:
            param = BenchmarkConstants.DEFAULT_CURSOR_PARAM
            count_expr = BenchmarkConstants.CURSOR_COUNT_EXPR

        has_next_expr = None
        cursor_expr = None
        if style is PaginationStyle.OFFSET:
            has_next_expr = getattr(settings, f"has_next_expr_{key}") or BenchmarkConstants.OFFSET_HAS_NEXT_EXPR
        else:
            cursor_expr = getattr(settings, f"cursor_expr_{key}") or BenchmarkConstants.CURSOR_NEXT_EXPR

        return EndpointSpec(
            key=key,
            path=path if path.startswith("/") else f"/{path}",
            display_name=getattr(settings, f"endpoint_{key}_name"),
            style=style,
            param_name=getattr(settings, f"param_{key}") or param,
            count_expr=getattr(settings, f"count_expr_{key}") or count_expr,
            has_next_expr=has_next_expr,
            cursor_expr=cursor_expr,
            initial_cursor=getattr(settings, f"initial_cursor_{key}"),
        )

    @staticmethod
    def _validate_expressions(endpoint: EndpointSpec, extractor: FieldExtractor) -> None:
        expressions = {
            f"count_expr_{endpoint.key}": endpoint.count_expr,
            f"has_next_expr_{endpoint.key}": endpoint.has_next_expr,
            f"cursor_expr_{endpoint.key}": endpoint.cursor_expr,
        }
        for config_key, expression in expressions.items():
            if expression is not None:
                extractor.validate_expression(expression, config_key)
