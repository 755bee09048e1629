"""Tests for AI service module."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from aigcw.config.settings import ConfigParseError, LLMProvider, LLMSettings
from aigcw.services.ai_service import AIService, LLMEmptyResponseError, LLMRequestError


def _completion(content):
    return MagicMock(status_code=200, json=lambda: {"choices": [{"message": {"content": content}}]})


def test_generate_prompt():
    """The prompt embeds the type label and the diff."""
    prompt = AIService.generate_prompt("fix: 🐛", "+ new line")

    assert "Commit type [fix: 🐛]" in prompt
    assert prompt.endswith("Diff to analyze:\n+ new line")


def test_disabled_returns_empty():
    """Nothing is requested when the integration is off."""
    with patch("requests.post") as mock_post:
        assert AIService(LLMSettings()).generate_commit_message("feat: ✨", "diff") == ""

    mock_post.assert_not_called()


@patch("requests.post")
def test_generate_commit_message_success(mock_post, llm_settings):
    """Test successful commit message generation."""
    mock_post.return_value = _completion("  Add dark mode toggle\n")

    message = AIService(llm_settings()).generate_commit_message("feat: ✨", "diff")

    assert message == "Add dark mode toggle"
    sent = mock_post.call_args.kwargs["json"]["messages"]
    assert sent[-1]["role"] == "user"
    assert "feat: ✨" in sent[-1]["content"]


@patch("requests.post")
def test_generate_commit_message_empty(mock_post, llm_settings):
    """An empty completion is its own error."""
    mock_post.return_value = _completion("")

    with pytest.raises(LLMEmptyResponseError):
        AIService(llm_settings()).generate_commit_message("feat: ✨", "diff")


@patch("requests.post")
def test_generate_commit_message_http_error(mock_post, llm_settings):
    """Test handling of API errors."""
    error_response = MagicMock(status_code=401, text='{"error": "invalid key"}')
    response = MagicMock(status_code=401)
    response.raise_for_status.side_effect = requests.exceptions.HTTPError(
        "401 Unauthorized", response=error_response
    )
    mock_post.return_value = response

    with pytest.raises(LLMRequestError) as exc_info:
        AIService(llm_settings()).generate_commit_message("feat: ✨", "diff")

    assert "invalid key" in str(exc_info.value)


@patch("requests.post")
def test_generate_commit_message_network_error(mock_post, llm_settings):
    """Test handling of network errors."""
    mock_post.side_effect = requests.exceptions.ConnectionError("Network error")

    with pytest.raises(LLMRequestError) as exc_info:
        AIService(llm_settings()).generate_commit_message("feat: ✨", "diff")

    assert "Network error" in str(exc_info.value)


@patch("requests.post")
def test_generate_commit_message_malformed(mock_post, llm_settings):
    """A response of the wrong shape is a request error."""
    mock_post.return_value = MagicMock(status_code=200, json=lambda: {"unexpected": True})

    with pytest.raises(LLMRequestError):
        AIService(llm_settings()).generate_commit_message("feat: ✨", "diff")


def test_missing_settings_fail_before_request(llm_settings):
    """Incomplete settings are reported without any HTTP call."""
    settings = llm_settings(LLMProvider.CUSTOM, url=None)

    with patch("requests.post") as mock_post:
        with pytest.raises(ConfigParseError):
            AIService(settings).generate_commit_message("feat: ✨", "diff")

    mock_post.assert_not_called()
