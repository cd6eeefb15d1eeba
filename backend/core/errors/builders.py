"""Domain-Specific Error Builders

Ergonomic constructors for typed errors. Each builder creates an AppError
with the appropriate code and context, wrapped in Err.
"""
from pathlib import Path

from .types import AppError, ErrorCode, ErrorContext, Err


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    value: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, "value": value, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def invalid_format(
    field: str, expected: str, got: str | None = None, origin: str = ""
) -> Err[AppError]:
    msg = f"Invalid format for '{field}': expected {expected}"
    if got:
        msg += f", got '{got}'"
    return validation_error(
        msg,
        code=ErrorCode.E2002_INVALID_FORMAT,
        field=field,
        value=got,
        expected=expected,
        origin=origin,
    )


# =============================================================================
# Resource Errors (E6xxx)
# =============================================================================

def resource_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E6000_RESOURCE_GENERIC,
    path: str | Path | None = None,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create resource (file/lexicon) error."""
    meta = {"path": str(path) if path is not None else None, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
        cause=cause,
    ))


def file_not_found(path: str | Path, origin: str = "") -> Err[AppError]:
    return resource_error(
        f"Resource not found: {path}",
        code=ErrorCode.E6001_FILE_NOT_FOUND,
        path=path,
        origin=origin,
    )


def file_read_failed(path: str | Path, cause: Exception, origin: str = "") -> Err[AppError]:
    return resource_error(
        f"Failed to read resource {path}: {cause}",
        code=ErrorCode.E6002_FILE_READ_ERROR,
        path=path,
        origin=origin,
        cause=cause,
    )


def file_write_failed(path: str | Path, cause: Exception, origin: str = "") -> Err[AppError]:
    return resource_error(
        f"Failed to write {path}: {cause}",
        code=ErrorCode.E6003_FILE_WRITE_ERROR,
        path=path,
        origin=origin,
        cause=cause,
    )


# =============================================================================
# Internal Errors (E9xxx)
# =============================================================================

def internal_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E9001_UNEXPECTED_ERROR,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create internal/unexpected error."""
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata=metadata,
        cause=cause,
    ))
