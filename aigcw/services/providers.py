"""HTTP adapters for the supported LLM providers.

Every adapter exposes ``chat(messages) -> str | None`` where ``messages`` is a
list of ``{"role": ..., "content": ...}`` dicts. ``None`` means the provider
answered successfully but returned no text. HTTP and network failures are left
to propagate as ``requests`` exceptions.
"""

import logging

import requests

from ..config.settings import ConfigParseError, LLMProvider, LLMSettings

logger = logging.getLogger(__name__)

ANTHROPIC_VERSION = "2023-06-01"
CUSTOM_DEFAULT_MODEL = "deepseek-chat"
CUSTOM_DEFAULT_TIMEOUT = 60
MAX_TOKENS = 1000


class ChatAdapter:
    """Base class holding the connection settings shared by all adapters."""

    def __init__(
        self,
        url: str,
        api_key: str | None,
        model: str,
        timeout: float | None = None,
        system: str | None = None,
    ):
        self.url = url
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.system = system

    def headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def with_system(self, messages: list[dict[str, str]]) -> list[dict[str, str]]:
        """Prepend the configured system prompt, if any."""
        if self.system:
            return [{"role": "system", "content": self.system}, *messages]
        return list(messages)

    def payload(self, messages: list[dict[str, str]]) -> dict:
        raise NotImplementedError

    def extract_text(self, data: dict) -> str | None:
        raise NotImplementedError

    def chat(self, messages: list[dict[str, str]]) -> str | None:
        """Send one non-streaming chat request and return the reply text."""
        logger.debug("POST %s (model %s)", self.url, self.model)
        response = requests.post(
            self.url,
            headers=self.headers(),
            json=self.payload(messages),
            timeout=self.timeout,
        )
        response.raise_for_status()
        return self.extract_text(response.json()) or None


class OpenAICompatibleAdapter(ChatAdapter):
    """``/chat/completions`` endpoints (OpenAI, DeepSeek, xAI, Groq, Phind)."""

    def payload(self, messages):
        return {
            "model": self.model,
            "messages": self.with_system(messages),
            "max_tokens": MAX_TOKENS,
            "stream": False,
        }

    def extract_text(self, data):
        choices = data["choices"]
        if not choices:
            return None
        return choices[0]["message"]["content"]


class CustomAdapter(OpenAICompatibleAdapter):
    """Self-hosted endpoint taking a bare ``{model, messages}`` body."""

    def payload(self, messages):
        return {"model": self.model, "messages": self.with_system(messages)}


class AnthropicAdapter(ChatAdapter):
    """Anthropic Messages API."""

    def headers(self):
        return {
            "Content-Type": "application/json",
            "x-api-key": self.api_key or "",
            "anthropic-version": ANTHROPIC_VERSION,
        }

    def payload(self, messages):
        payload = {"model": self.model, "max_tokens": MAX_TOKENS, "messages": list(messages)}
        if self.system:
            payload["system"] = self.system
        return payload

    def extract_text(self, data):
        parts = [block.get("text", "") for block in data["content"] if block.get("type") == "text"]
        return "".join(parts)


class OllamaAdapter(ChatAdapter):
    """Ollama ``/api/chat``."""

    def payload(self, messages):
        return {"model": self.model, "messages": self.with_system(messages), "stream": False}

    def extract_text(self, data):
        return data["message"]["content"]


class GoogleAdapter(ChatAdapter):
    """Gemini ``generateContent``."""

    def headers(self):
        return {"Content-Type": "application/json", "x-goog-api-key": self.api_key or ""}

    def payload(self, messages):
        contents = [
            {
                "role": "model" if message["role"] == "assistant" else "user",
                "parts": [{"text": message["content"]}],
            }
            for message in messages
        ]
        payload = {"contents": contents}
        if self.system:
            payload["systemInstruction"] = {"parts": [{"text": self.system}]}
        return payload

    def extract_text(self, data):
        candidates = data.get("candidates") or []
        if not candidates:
            return None
        parts = candidates[0].get("content", {}).get("parts", [])
        return "".join(part.get("text", "") for part in parts)


def _join(base: str, path: str) -> str:
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


def _openai_compatible(default_base: str | None):
    def build(settings: LLMSettings) -> ChatAdapter:
        base = settings.url or default_base
        if not base:
            raise ConfigParseError(
                f"llm_config.url is required for provider {settings.provider.value}"
            )
        return OpenAICompatibleAdapter(
            url=_join(base, "chat/completions"),
            api_key=settings.api_key,
            model=settings.model,
            timeout=settings.timeout,
            system=settings.system,
        )

    return build


def _anthropic(settings: LLMSettings) -> ChatAdapter:
    return AnthropicAdapter(
        url=_join(settings.url or "https://api.anthropic.com/v1", "messages"),
        api_key=settings.api_key,
        model=settings.model,
        timeout=settings.timeout,
        system=settings.system,
    )


def _ollama(settings: LLMSettings) -> ChatAdapter:
    return OllamaAdapter(
        url=_join(settings.url or "http://localhost:11434", "api/chat"),
        api_key=settings.api_key,
        model=settings.model,
        timeout=settings.timeout,
        system=settings.system,
    )


def _google(settings: LLMSettings) -> ChatAdapter:
    base = settings.url or "https://generativelanguage.googleapis.com/v1beta"
    return GoogleAdapter(
        url=_join(base, f"models/{settings.model}:generateContent"),
        api_key=settings.api_key,
        model=settings.model,
        timeout=settings.timeout,
        system=settings.system,
    )


def _custom(settings: LLMSettings) -> ChatAdapter:
    return CustomAdapter(
        url=settings.url,
        api_key=settings.api_key,
        model=settings.model or CUSTOM_DEFAULT_MODEL,
        timeout=settings.timeout if settings.timeout is not None else CUSTOM_DEFAULT_TIMEOUT,
        system=settings.system,
    )


PROVIDER_ADAPTERS = {
    LLMProvider.OPENAI: _openai_compatible("https://api.openai.com/v1"),
    LLMProvider.DEEPSEEK: _openai_compatible("https://api.deepseek.com"),
    LLMProvider.XAI: _openai_compatible("https://api.x.ai/v1"),
    LLMProvider.GROQ: _openai_compatible("https://api.groq.com/openai/v1"),
    LLMProvider.PHIND: _openai_compatible(None),
    LLMProvider.ANTHROPIC: _anthropic,
    LLMProvider.OLLAMA: _ollama,
    LLMProvider.GOOGLE: _google,
    LLMProvider.CUSTOM: _custom,
}


def build_adapter(settings: LLMSettings) -> ChatAdapter:
    """Create the adapter for ``settings.provider``."""
    adapter = PROVIDER_ADAPTERS[settings.provider](settings)
    logger.debug("Using %s adapter at %s", settings.provider.value, adapter.url)
    return adapter
