"""
Custom exception types for the Startup Idea Generator.

Each error carries a stable error_code and maps onto one HTTP status in the
web layer.
"""


class IdeaGenError(Exception):
    """Base exception for all application errors."""

    status_code = 500

    def __init__(self, message: str, error_code: str = "IDEAGEN_ERROR"):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class ValidationError(IdeaGenError):
    """Raised when a request payload is malformed or missing fields."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message, error_code="VALIDATION_ERROR")


class NotFoundError(IdeaGenError):
    """Raised when an idea id does not exist in the store."""

    status_code = 404

    def __init__(self, idea_id: int):
        super().__init__("Idea not found", error_code="IDEA_NOT_FOUND")
        self.idea_id = idea_id


class GenerationError(IdeaGenError):
    """Raised when the completion provider fails or returns unusable content."""

    PREFIX = "Failed to generate startup idea"

    def __init__(self, message: str, original_error: Exception = None):
        super().__init__(message, error_code="GENERATION_ERROR")
        self.original_error = original_error


class InternalError(IdeaGenError):
    """Raised for unexpected failures; details stay in the server log."""

    def __init__(self, message: str = "Internal server error", original_error: Exception = None):
        super().__init__(message, error_code="INTERNAL_ERROR")
        self.original_error = original_error
