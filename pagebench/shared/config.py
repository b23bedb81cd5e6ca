import json
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pagebench.const import (
    CONFIG_FILE_NAME,
    DEFAULT_BASE_URL,
    DEFAULT_BENCHMARK_REQUESTS,
    DEFAULT_INITIAL_CURSOR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PAGE_SIZE,
    DEFAULT_QUERY_ENGINE,
    DEFAULT_WARMUP_REQUESTS,
    ENV_PREFIX,
    OUTPUT_FORMAT_TABLE,
    OUTPUT_FORMATS,
)

PAGINATION_STYLES = ("offset", "cursor")


class Config(BaseSettings):
    """Raw benchmark settings, read from the environment and pagebench.json."""

    base_url: str = DEFAULT_BASE_URL

    endpoint_a: Optional[str] = None
    endpoint_b: Optional[str] = None
    endpoint_c: Optional[str] = None

    endpoint_a_name: str = "Endpoint A"
    endpoint_b_name: str = "Endpoint B"
    endpoint_c_name: str = "Endpoint C"

    pagination_a: str = "offset"
    pagination_b: str = "cursor"
    pagination_c: str = "cursor"

    # Pagination parameter names; None picks the default for the style
    param_a: Optional[str] = None
    param_b: Optional[str] = None
    param_c: Optional[str] = None

    # Query expressions; None picks the default for the style
    count_expr_a: Optional[str] = None
    count_expr_b: Optional[str] = None
    count_expr_c: Optional[str] = None
    has_next_expr_a: Optional[str] = None
    has_next_expr_b: Optional[str] = None
    has_next_expr_c: Optional[str] = None
    cursor_expr_a: Optional[str] = None
    cursor_expr_b: Optional[str] = None
    cursor_expr_c: Optional[str] = None

    initial_cursor_a: str = DEFAULT_INITIAL_CURSOR
    initial_cursor_b: str = DEFAULT_INITIAL_CURSOR
    initial_cursor_c: str = DEFAULT_INITIAL_CURSOR

    page_size: int = DEFAULT_PAGE_SIZE
    warmup_requests: int = DEFAULT_WARMUP_REQUESTS
    benchmark_requests: int = DEFAULT_BENCHMARK_REQUESTS

    request_timeout: float = 300.0
    max_retries: int = 0
    strict_status: bool = True
    parallel_endpoints: int = 1
    query_engine: str = DEFAULT_QUERY_ENGINE

    output_format: str = OUTPUT_FORMAT_TABLE
    export_dir: Optional[Path] = None
    plots: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
    )

    @field_validator("page_size", "benchmark_requests", "parallel_endpoints")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be at least 1")
        return value

    @field_validator("warmup_requests", "max_retries")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("must not be negative")
        return value

    @field_validator("pagination_a", "pagination_b", "pagination_c")
    @classmethod
    def _known_style(cls, value: str) -> str:
        value = value.lower()
        if value not in PAGINATION_STYLES:
            raise ValueError(f"must be one of {', '.join(PAGINATION_STYLES)}")
        return value

    @field_validator("output_format")
    @classmethod
    def _known_format(cls, value: str) -> str:
        value = value.lower()
        if value not in OUTPUT_FORMATS:
            raise ValueError(f"must be one of {', '.join(OUTPUT_FORMATS)}")
        return value

    @field_validator("endpoint_a", "endpoint_b", "endpoint_c")
    @classmethod
    def _blank_is_unset(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    @classmethod
    def load_config_from_json(cls) -> Dict[str, Any]:
        """Load configuration from pagebench.json file."""
        config_path = Path(CONFIG_FILE_NAME)
        if config_path.exists():
            with open(config_path, 'r') as f:
                config = json.load(f)
                if config.get("export_dir"):
                    config["export_dir"] = Path(config["export_dir"])
                return config
        return {}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Order of precedence (highest to lowest):
        1. Environment variables
        2. Init settings (kwargs passed to constructor)
        3. JSON config file
        4. Default values
        """
        def json_source():
            return cls.load_config_from_json()

        return (
            env_settings,
            init_settings,
            json_source,
        )
