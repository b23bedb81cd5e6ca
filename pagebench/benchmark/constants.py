"""Constants for the benchmarking system."""


class BenchmarkConstants:
    """Centralized constants for benchmark configuration."""
    DEFAULT_TIMEOUT = 300  # seconds
    DEFAULT_MAX_RETRIES = 0
    RETRY_STATUS_CODES = [429, 500, 502, 503, 504]
    PHASE_COUNT = 5

    DEFAULT_PAGE_PARAM = "page"
    DEFAULT_CURSOR_PARAM = "afterId"

    # JMESPath defaults. Offset endpoints are assumed HAL-shaped
    # ({"_embedded": {"items": [...]}, "_links": {"next": ...}}), cursor
    # endpoints a bare JSON array of objects carrying an "id".
    OFFSET_COUNT_EXPR = "length(values(_embedded || `{}`)[0] || `[]`)"
    OFFSET_HAS_NEXT_EXPR = "_links.next"
    CURSOR_COUNT_EXPR = "length(@ || `[]`)"
    CURSOR_NEXT_EXPR = "[-1].id"

    P50 = 0.50
    P95 = 0.95
