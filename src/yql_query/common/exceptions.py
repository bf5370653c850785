from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standard error codes for yql-query.

    Error codes categorize failures without a dedicated exception class per
    failure. Each category has its own prefix for easy identification.

    Attributes:
        CONFIG_*: Configuration-related errors
        VALIDATION_*: Input validation errors
        STATEMENT_*: Statement assembly errors
    """
    # Configuration errors
    CONFIG_ERROR = "CONFIG_001"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_001"

    # Statement errors
    INVALID_CONDITION_SHAPE = "STATEMENT_001"


class YqlQueryError(Exception):
    """Base exception for all yql-query errors.

    A single exception class carrying an error code rather than a hierarchy
    of specific exception classes.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

        # Lazy import to avoid a circular dependency with the logging package
        from yql_query.logging import get_logger
        logger = get_logger(__name__)
        logger.error(
            message,
            extra={"error_code": error_code.value, "details": self.details},
            exc_info=cause is not None,
        )

    def __str__(self) -> str:
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {str(self.cause)})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }

    @classmethod
    def from_error_code(
        cls,
        error_code: ErrorCode,
        message: str,
        **kwargs
    ) -> "YqlQueryError":
        """Create exception from error code.

        Args:
            error_code: Error code
            message: Error message
            **kwargs: Additional arguments for YqlQueryError

        Returns:
            YqlQueryError instance
        """
        return cls(message=message, error_code=error_code, **kwargs)


def configuration_error(
    message: str,
    config_key: Optional[str] = None,
    **kwargs
) -> YqlQueryError:
    """Create a configuration error.

    Args:
        message: Error message
        config_key: Configuration key that caused the error
        **kwargs: Additional error details

    Returns:
        YqlQueryError with CONFIG_ERROR code
    """
    details = kwargs.get('details', {})
    if config_key:
        details["config_key"] = config_key

    return YqlQueryError(
        message=message,
        error_code=ErrorCode.CONFIG_ERROR,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def validation_error(
    message: str,
    field: Optional[str] = None,
    value: Any = None,
    **kwargs
) -> YqlQueryError:
    """Create a validation error.

    Args:
        message: Error message
        field: Field that failed validation
        value: Invalid value
        **kwargs: Additional error details

    Returns:
        YqlQueryError with VALIDATION_ERROR code
    """
    details = kwargs.get('details', {})
    if field:
        details["field"] = field
    if value is not None:
        details["value"] = str(value)

    return YqlQueryError(
        message=message,
        error_code=ErrorCode.VALIDATION_ERROR,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def invalid_condition_shape_error(value: Any, **kwargs) -> YqlQueryError:
    """Create an error for condition input that is not a string, sequence or mapping.

    Args:
        value: The rejected condition input
        **kwargs: Additional error details

    Returns:
        YqlQueryError with INVALID_CONDITION_SHAPE code
    """
    details = kwargs.get('details', {})
    details["value_type"] = type(value).__name__
    details["value"] = repr(value)[:200]

    return YqlQueryError(
        message=(
            f"Unsupported condition input of type {type(value).__name__}; "
            "expected a string, a sequence of strings or a mapping"
        ),
        error_code=ErrorCode.INVALID_CONDITION_SHAPE,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )
