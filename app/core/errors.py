from typing import List, Optional


class RecipeSourceError(Exception):
    """Base error for recipe source failures. Also used for malformed payloads."""
    status_code = 500
    error_code = "SEARCH_ERROR"
    default_message = "Failed to search recipes. Please try again."

    def __init__(self, message: Optional[str] = None, sources: Optional[List[str]] = None,
                 errors: Optional[List[str]] = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.sources = sources or []
        self.errors = errors or []


class RecipeConfigurationError(RecipeSourceError):
    status_code = 500
    error_code = "CONFIGURATION_ERROR"
    default_message = "Recipe service configuration error."


class RecipeRateLimitError(RecipeSourceError):
    status_code = 429
    error_code = "RATE_LIMIT_EXCEEDED"
    default_message = "Recipe service rate limit exceeded. Please try again later."


class RecipeServiceUnavailableError(RecipeSourceError):
    status_code = 503
    error_code = "SERVICE_UNAVAILABLE"
    default_message = "Recipe service temporarily unavailable."


class RecipeNetworkError(RecipeSourceError):
    status_code = 503
    error_code = "NETWORK_ERROR"
    default_message = "Network error. Please check your internet connection."


class RecognitionError(Exception):
    status_code = 502
    error_code = "RECOGNITION_FAILED"
    default_message = "Ingredient recognition failed. Please try again."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class RecognitionUnavailableError(RecognitionError):
    status_code = 503
    error_code = "RECOGNITION_UNAVAILABLE"
    default_message = "Ingredient recognition is not configured."
