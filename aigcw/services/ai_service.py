"""AI service for drafting commit messages from the staged diff."""

import logging

import requests

from ..config.settings import LLMSettings
from .providers import build_adapter

logger = logging.getLogger(__name__)


class LLMError(Exception):
    """LLM request error."""

    pass


class LLMRequestError(LLMError):
    """The provider could not be reached or answered with an error."""

    pass


class LLMEmptyResponseError(LLMError):
    """The provider answered without any text."""

    pass


class AIService:
    """Service for generating commit messages with the configured provider."""

    def __init__(self, settings: LLMSettings):
        self.settings = settings

    @staticmethod
    def generate_prompt(commit_type: str, diff: str) -> str:
        """Generate the prompt for the AI model."""
        return (
            "Generate a concise git commit message based on the selected commit type "
            "and diff. Requirements:\n\n"
            f"1. Commit type [{commit_type}] defines the message's intent, but should "
            "NOT appear in output\n"
            "2. Start with a strong action verb aligned with the type's purpose "
            "(add/fix/improve/etc)\n"
            "3. Focus on user-facing value specific to the commit type\n"
            "4. Maximum 12 words, no technical details/paths/code\n\n"
            "Type-verb mapping guidance:\n"
            "• feat: add, introduce, implement, enable\n"
            "• fix: resolve, prevent, avoid, repair\n"
            "• perf: optimize, reduce, accelerate, speed up\n"
            "• docs: document, describe, clarify\n"
            "• test: verify, validate, check\n\n"
            "Examples (type in brackets for reference only):\n"
            "[feat] → Add quick filters to report dashboard\n"
            "[fix] → Retain form data after network errors\n"
            "[perf] → Reduce PDF generation memory usage\n"
            "[docs] → Clarify multi-factor auth setup steps\n\n"
            "Diff to analyze:\n"
            f"{diff}"
        )

    def generate_commit_message(self, commit_type: str, diff: str) -> str:
        """Ask the provider for a message, or return ``""`` when disabled."""
        if not self.settings.enabled:
            logger.debug("LLM integration disabled")
            return ""

        self.settings.validate()
        adapter = build_adapter(self.settings)
        messages = [{"role": "user", "content": self.generate_prompt(commit_type, diff)}]

        try:
            text = adapter.chat(messages)
        except requests.exceptions.RequestException as e:
            if getattr(e, "response", None) is not None and e.response.text:
                error_message = e.response.text
            else:
                error_message = str(e)
            raise LLMRequestError(f"API Request failed: {error_message}") from e
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise LLMRequestError(f"Unexpected response from {self.settings.provider.value}") from e

        if not text or not text.strip():
            raise LLMEmptyResponseError(
                f"{self.settings.provider.value} returned an empty commit message"
            )
        return text.strip()
