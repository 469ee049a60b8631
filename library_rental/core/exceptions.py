"""
Application exception.

WHAT: The single error kind raised by every service operation.

WHY: Callers of the rental service only need to know that an operation
failed and why, so there is no hierarchy to branch on. The message is
meant for humans; keyword context is kept separately for logs.
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Raised when a rental operation cannot be completed.

    Covers missing users, books and reservations, books with no copies
    left, duplicate registrations and returns of reservations that are no
    longer active.
    """

    default_message: str = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None, **context: Any):
        """
        Initialize exception with message and context.

        Args:
            message: Human-readable error message
            **context: Identifiers involved in the failure (user_id, book_external_id, ...)
        """
        self.message = message or self.default_message
        self.context = context
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize exception to a dictionary.

        Returns:
            Dictionary with error details (sensitive fields filtered out)
        """
        sensitive_fields = {"password", "token", "secret", "key", "api_key"}
        filtered_context = {
            k: v for k, v in self.context.items() if k.lower() not in sensitive_fields
        }

        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": filtered_context if filtered_context else None,
        }
