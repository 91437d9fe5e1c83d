"""
Custom exceptions for wildgrep.

This module defines a hierarchy of exceptions for better error handling
and debugging throughout the application.
"""

from typing import List, Optional


class WildgrepError(Exception):
    """
    Base exception for all wildgrep errors.

    All custom exceptions in this package inherit from this class,
    allowing for easy catching of all package-specific errors.

    Args:
        message: The error message
        details: Additional error details (optional)

    Example:
        >>> try:
        ...     raise WildgrepError("Something went wrong")
        ... except WildgrepError as e:
        ...     logger.error(f"Error: {e}")
    """

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\nDetails: {self.details}"
        return self.message


class PatternError(WildgrepError):
    """
    Base class for errors raised while turning a pattern value into a matcher.

    Matching itself never fails, so every pattern error surfaces before
    the first candidate is tested.
    """

    pass


class InvalidGlobSequence(PatternError):
    """
    Raised when a wildcard directly follows a ``*`` wildcard.

    A ``*`` already covers whatever a following ``*`` or ``?`` could consume,
    so sequences like ``a**b`` and ``a*?b`` are rejected.

    Example:
        >>> raise InvalidGlobSequence(
        ...     "* or ? may not follow *",
        ...     "pattern 'a**b', offset 2"
        ... )
    """

    pass


class PatternCompilationFailed(PatternError):
    """
    Raised when the compiler produced no usable steps.

    This never happens for well-formed input; it guards the invariant that
    a compiled pattern always ends with an end-of-input step.
    """

    pass


class InvalidPatternType(PatternError, TypeError):
    """
    Raised when a value that is not a pattern is passed where one is expected.

    Accepted values are ``str``, ``RawPattern``, ``CompiledPattern`` and
    ``Literal``.

    Example:
        >>> raise InvalidPatternType(
        ...     "invalid pattern type",
        ...     "expected str, RawPattern, CompiledPattern or Literal, got int"
        ... )
    """

    pass


class ConfigurationError(WildgrepError):
    """
    Raised when there's an error in configuration.

    This includes:
    - Invalid YAML syntax
    - Missing required configuration fields
    - Invalid configuration values (including an invalid file pattern)

    Example:
        >>> raise ConfigurationError(
        ...     "Invalid configuration",
        ...     "timeout_ms must be greater than 0"
        ... )
    """

    pass


class FileProcessingError(WildgrepError):
    """
    Raised when file processing fails.

    This includes:
    - File read errors
    - Permission errors
    - File not found errors

    Example:
        >>> raise FileProcessingError(
        ...     "Cannot read file",
        ...     "Permission denied: /path/to/file"
        ... )
    """

    pass


class SearchTimeoutError(WildgrepError):
    """
    Raised when a search does not finish before its deadline.

    Attributes:
        hits: Files that were confirmed as hits before the deadline passed
    """

    def __init__(
        self, message: str, details: Optional[str] = None, hits: Optional[List[str]] = None
    ):
        super().__init__(message, details)
        self.hits = list(hits or [])
