"""Common exceptions for yql-query.

The exception system uses error codes for categorization rather than
numerous specific exception classes. All errors are ``YqlQueryError``
instances carrying an ``ErrorCode`` and structured details.
"""

from yql_query.common.exceptions import (
    YqlQueryError,
    ErrorCode,
    # Helper functions
    configuration_error,
    validation_error,
    invalid_condition_shape_error,
)

__all__ = [
    # Base Exception and Error Codes
    "YqlQueryError",
    "ErrorCode",
    # Helper functions
    "configuration_error",
    "validation_error",
    "invalid_condition_shape_error",
]
