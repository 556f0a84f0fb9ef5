"""Base exceptions for neo-auth-broker.

All broker exceptions inherit from AuthBrokerError and carry an error code
and a details mapping so hosts can turn them into structured responses.
"""

from typing import Any, Dict, Optional


class AuthBrokerError(Exception):
    """Base exception for all neo-auth-broker errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: AuthBrokerError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The broker exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
