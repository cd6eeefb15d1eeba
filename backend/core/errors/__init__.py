"""Monadic Error Handling System

Result[T, E] containers, a typed AppError with an ErrorCode taxonomy, and
builder functions for ergonomic construction.

Usage:
    from core.errors import Ok, Result, AppError, invalid_format

    def parse(text: str) -> Result[Tag, AppError]:
        if not text:
            return invalid_format("tag", "category[:segment...]", text)
        return Ok(...)

    match parse("noun:m:v_naz"):
        case Ok(tag):
            ...
        case Err(error):
            log.debug("tag_unparseable", code=error.code.name)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
)

from .builders import (
    validation_error,
    invalid_format,
    resource_error,
    file_not_found,
    file_read_failed,
    file_write_failed,
    internal_error,
)

from .handlers import (
    AppErrorException,
    register_error_handlers,
    result_to_response,
    raise_error,
    raise_result,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "validation_error",
    "invalid_format",
    "resource_error",
    "file_not_found",
    "file_read_failed",
    "file_write_failed",
    "internal_error",
    "AppErrorException",
    "register_error_handlers",
    "result_to_response",
    "raise_error",
    "raise_result",
]
