#!/usr/bin/env python3
"""
Custom Exception Classes for Sleep Tracker Application
Provides structured error handling with specific exception types.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class SleepTrackerError(Exception):
    """Base exception for all sleep tracker application errors."""

    def __init__(self, message: str, error_code: str | None = None, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class ValidationError(SleepTrackerError):
    """Raised when input validation fails."""


class DatabaseError(SleepTrackerError):
    """Raised when database operations fail."""


class DataIntegrityError(SleepTrackerError):
    """Raised when data integrity is compromised."""


class ConfigurationError(SleepTrackerError):
    """Raised when configuration is invalid."""


class ErrorCodes(StrEnum):
    """Standardized error codes."""

    # Validation errors
    INVALID_INPUT = "INVALID_INPUT"
    OUT_OF_RANGE = "OUT_OF_RANGE"

    # Database errors
    DB_CONNECTION_FAILED = "DB_CONNECTION_FAILED"
    DB_QUERY_FAILED = "DB_QUERY_FAILED"
    DB_INTEGRITY_VIOLATION = "DB_INTEGRITY_VIOLATION"
    DB_INSERT_FAILED = "DB_INSERT_FAILED"

    # Configuration errors
    CONFIG_INVALID = "CONFIG_INVALID"
