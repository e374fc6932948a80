# SPDX-License-Identifier: Apache-2.0
"""File: src/inventory_bridge/exceptions.py

Project: inventory-bridge

Description:
    Exception taxonomy for the inventory bridge. Every error raised while a
    tool is validated or executed derives from InventoryBridgeError, so the
    dispatcher can turn it into the "Error: <message>" text an agent expects.

"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional


class InventoryBridgeError(Exception):
    """Base exception for all inventory bridge errors."""

    def __init__(self, message: str, error_code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__

    def __str__(self) -> str:
        return self.message


class ConfigurationError(InventoryBridgeError):
    """Raised when settings are missing or invalid at start-up."""


# --- Tool invocation errors ---

class ValidationError(InventoryBridgeError):
    """Raised when a tool argument is missing or cannot be coerced."""

    def __init__(self, message: str, fields: Iterable[str] = ()) -> None:
        super().__init__(message, error_code="ValidationError")
        self.fields = list(fields)

    @classmethod
    def missing(cls, fields: Iterable[str]) -> "ValidationError":
        names = list(fields)
        return cls(f"Missing required arguments: {', '.join(names)}", fields=names)


class UnknownToolError(InventoryBridgeError):
    """Raised when an invocation names a tool that is not in the catalog."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}", error_code="UnknownToolError")
        self.tool_name = tool_name


# --- Backend errors ---

class BackendError(InventoryBridgeError):
    """Raised when the inventory API answers non-2xx or cannot be reached."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, error_code="BackendError")
        self.status_code = status_code
        self.details = details or {}

    def with_context(self, context: str) -> "BackendError":
        """Returns a copy of this error with ``context`` prefixed to the message."""
        return BackendError(f"{context}: {self.message}", self.status_code, self.details)


class ResolutionError(BackendError):
    """Raised when a stock location cannot be searched for or created."""

    def __init__(self, description: str, cause: BackendError) -> None:
        super().__init__(
            f"Failed to resolve stock location '{description}': {cause.message}",
            status_code=cause.status_code,
            details=cause.details,
        )
        self.error_code = "ResolutionError"
        self.description = description


__all__ = [
    "BackendError",
    "ConfigurationError",
    "InventoryBridgeError",
    "ResolutionError",
    "UnknownToolError",
    "ValidationError",
]
