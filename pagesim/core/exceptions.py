# Copyright 2025 Ilya Makarov
#
# Licensed under the Business Source License 1.1
# Change Date: 2028-11-05
# Change License: Apache License 2.0

"""
PageSim Exception Hierarchy

Exception Hierarchy:
    PageSimError (base)
    ├── ConfigError
    │   ├── ConfigValidationError
    │   └── ConfigFileError
    ├── ListError
    │   ├── CapacityExceededError
    │   └── InvalidHandleError
    └── JobSourceError
        ├── MalformedRecordError
        └── JobFileNotFoundError

A lookup of an absent page is not an error (it yields None/False), and an
aborted job is a counted outcome rather than an exception.
"""

from typing import Any, Dict, Optional

# ============================================================================
# Base Exceptions
# ============================================================================


class PageSimError(Exception):
    """Base exception for all PageSim errors"""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization"""
        result = {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }

        if self.cause:
            result["cause"] = {
                "type": self.cause.__class__.__name__,
                "message": str(self.cause),
            }

        return result

    def __str__(self):
        base = self.message
        if self.details:
            base += f" | Details: {self.details}"
        if self.cause:
            base += f" | Caused by: {self.cause}"
        return base


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigError(PageSimError):
    """Configuration-related errors"""


class ConfigValidationError(ConfigError):
    """Configuration validation failed"""


class ConfigFileError(ConfigError):
    """Configuration file could not be read or parsed"""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["path"] = self.path
        return result


# ============================================================================
# Bounded List Errors
# ============================================================================


class ListError(PageSimError):
    """Bounded list errors"""


class CapacityExceededError(ListError):
    """Insert attempted on a list that is already at capacity"""

    def __init__(self, message: str, capacity: int, **kwargs):
        super().__init__(message, **kwargs)
        self.capacity = capacity

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["capacity"] = self.capacity
        return result


class InvalidHandleError(ListError):
    """Node handle does not refer to a live node of the list"""

    def __init__(self, message: str, handle: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.handle = handle

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["handle"] = self.handle
        return result


# ============================================================================
# Job Source Errors
# ============================================================================


class JobSourceError(PageSimError):
    """Errors raised while reading job records"""


class MalformedRecordError(JobSourceError):
    """A record could not be parsed into a job"""

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
        source: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.line_number = line_number
        self.line = line
        self.source = source

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result.update(
            {
                "line_number": self.line_number,
                "line": self.line,
                "source": self.source,
            }
        )
        return result


class JobFileNotFoundError(JobSourceError):
    """Job file does not exist"""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["path"] = self.path
        return result
