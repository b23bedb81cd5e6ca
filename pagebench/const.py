"""Constants for pagebench."""

# Default configuration values
DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_PAGE_SIZE = 100
DEFAULT_WARMUP_REQUESTS = 5
DEFAULT_BENCHMARK_REQUESTS = 20
DEFAULT_QUERY_ENGINE = "jmespath"
DEFAULT_INITIAL_CURSOR = "0"
ENV_PREFIX = "PAGEBENCH_"

# Logging configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library log levels
LIBRARY_LOG_LEVELS = {
    "urllib3": "WARNING",
    "matplotlib": "WARNING",
    "PIL": "WARNING",
}

# First HTTP status treated as an error answer
HTTP_BAD_REQUEST = 400

# File and directory names
CONFIG_FILE_NAME = "pagebench.json"
SUMMARY_CSV_NAME = "latency_summary.csv"
SAMPLES_CSV_NAME = "latency_samples.csv"
COMPARISON_CSV_NAME = "comparison.csv"
REPORT_JSON_NAME = "report.json"
PERCENTILE_GRAPH_NAME = "latency_percentiles.png"
DISTRIBUTION_GRAPH_NAME = "latency_distribution.png"

# Output formats
OUTPUT_FORMAT_TABLE = "table"
OUTPUT_FORMAT_JSON = "json"
OUTPUT_FORMATS = (OUTPUT_FORMAT_TABLE, OUTPUT_FORMAT_JSON)

# Exit codes
EXIT_OK = 0
EXIT_RUNTIME_FAILURE = 1
EXIT_CONFIGURATION_ERROR = 2
EXIT_DEPENDENCY_MISSING = 3
EXIT_LIVENESS_ERROR = 4

# Usage guidance printed on configuration errors
USAGE_EXAMPLE = (
    "Example usage:\n"
    "  PAGEBENCH_ENDPOINT_A='/api/items?size=100' \\\n"
    "  PAGEBENCH_ENDPOINT_B='/api/items/stream?size=100' \\\n"
    "  python benchmark.py"
)
