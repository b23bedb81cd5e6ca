"""Custom exceptions for the benchmarking system."""
from typing import List, Optional


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    def __init__(self, message: str, config_key: Optional[str] = None,
                 suggestions: Optional[List[str]] = None, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.config_key = config_key
        self.suggestions = suggestions or []
        self.cause = cause


class DependencyMissingError(Exception):
    """Exception raised when a required collaborator cannot be loaded."""
    pass


class LivenessError(Exception):
    """Exception raised when the server under test does not respond."""
    pass


class BenchmarkExecutionError(Exception):
    """Custom exception for benchmark execution failures."""

    def __init__(self, message: str, phase: Optional[str] = None, endpoint_key: Optional[str] = None):
        super().__init__(message)
        self.phase = phase
        self.endpoint_key = endpoint_key


class RequestError(BenchmarkExecutionError):
    """Exception raised when a request fails before a response arrives."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class HttpStatusError(RequestError):
    """Exception raised when the server answers with an error status."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message, url=url)
        self.status_code = status_code


class PaginationError(BenchmarkExecutionError):
    """Exception raised when an endpoint's pagination cannot advance."""
    pass


class EmptySampleSetError(BenchmarkExecutionError):
    """Exception raised when statistics are requested for no samples."""
    pass


class QueryEvaluationError(Exception):
    """Exception raised when a query expression fails against a document."""
    pass
