"""Services for aigcw."""

from .ai_service import AIService, LLMEmptyResponseError, LLMError, LLMRequestError

__all__ = ["AIService", "LLMError", "LLMRequestError", "LLMEmptyResponseError"]
