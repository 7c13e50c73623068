"""
Unit tests for the LLM client: provider cascade, structured output and data URIs.
"""
from dataclasses import replace
from unittest.mock import MagicMock, patch

import pytest

from src.core.config import get_settings
from src.core.exceptions import LLMError, ValidationError
from src.llm.client import LLMClient, extract_json, parse_data_uri
from src.models.ai import Coordinates


def _groq_returning(*contents):
    groq = MagicMock()
    groq.chat.completions.create.side_effect = [
        MagicMock(choices=[MagicMock(message=MagicMock(content=content))]) for content in contents
    ]
    return groq


@pytest.fixture
def no_keys():
    return replace(get_settings(), google_api_key="", groq_api_key="")


@pytest.fixture
def google_key():
    return replace(get_settings(), google_api_key="test-key", groq_api_key="")


class TestParseDataUri:
    """Test parse_data_uri."""

    def test_valid_uri(self):
        image = parse_data_uri("data:image/png;base64,aGVsbG8=")
        assert image == {"mime_type": "image/png", "data": b"hello"}

    def test_not_a_data_uri(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_data_uri("https://example.com/receipt.png")
        assert exc_info.value.field == "photoDataUri"

    def test_bad_base64(self):
        with pytest.raises(ValidationError):
            parse_data_uri("data:image/png;base64,@@@")

    def test_empty(self):
        with pytest.raises(ValidationError):
            parse_data_uri("")


class TestExtractJson:
    """Test extract_json."""

    def test_plain_json(self):
        assert extract_json('{"a": 1}') == {"a": 1}

    def test_fenced_json(self):
        assert extract_json('```json\n{"a": 1}\n```') == {"a": 1}

    def test_invalid(self):
        with pytest.raises(ValueError):
            extract_json("not json")


class TestLLMClientCascade:
    """Test provider selection and fallback."""

    def test_no_provider_configured(self, no_keys):
        client = LLMClient(settings=no_keys)
        with pytest.raises(LLMError) as exc_info:
            client.generate("hello")
        assert exc_info.value.message == "No LLM provider configured"

    def test_groq_only(self, no_keys):
        groq = _groq_returning("Namaste")
        client = LLMClient(settings=no_keys, groq_client=groq)

        assert client.generate("hello", system_prompt="Be brief") == "Namaste"

        kwargs = groq.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == no_keys.llm_model_fallback
        assert kwargs["messages"][0] == {"role": "system", "content": "Be brief"}
        assert "response_format" not in kwargs

    def test_json_mode_requests_json_object(self, no_keys):
        groq = _groq_returning("{}")
        client = LLMClient(settings=no_keys, groq_client=groq)

        client.generate("hello", json_mode=True)

        kwargs = groq.chat.completions.create.call_args.kwargs
        assert kwargs["response_format"] == {"type": "json_object"}

    def test_images_skip_groq(self, no_keys):
        groq = _groq_returning("text")
        client = LLMClient(settings=no_keys, groq_client=groq)

        with pytest.raises(LLMError):
            client.generate("read this", images=[{"mime_type": "image/png", "data": b"x"}])
        groq.chat.completions.create.assert_not_called()

    def test_empty_answer_counts_as_failure(self, no_keys):
        client = LLMClient(settings=no_keys, groq_client=_groq_returning(""))

        with pytest.raises(LLMError) as exc_info:
            client.generate("hello")
        assert exc_info.value.message == "LLM service unavailable"
        assert "Empty response" in exc_info.value.details

    @patch("src.llm.client.genai")
    def test_gemini_first(self, mock_genai, google_key):
        chat = mock_genai.GenerativeModel.return_value.start_chat.return_value
        chat.send_message.return_value.text = "from gemini"
        client = LLMClient(settings=google_key)

        assert client.generate("hello") == "from gemini"
        mock_genai.configure.assert_called_once_with(api_key="test-key")
        assert mock_genai.GenerativeModel.call_args.kwargs["model_name"] == google_key.llm_model

    @patch("src.llm.client.genai")
    def test_gemini_receives_images(self, mock_genai, google_key):
        chat = mock_genai.GenerativeModel.return_value.start_chat.return_value
        chat.send_message.return_value.text = "ok"
        client = LLMClient(settings=google_key)
        image = {"mime_type": "image/png", "data": b"x"}

        client.generate("read this", images=[image])

        parts = chat.send_message.call_args.args[0]
        assert parts == ["read this", image]

    @patch("src.llm.client.genai")
    def test_falls_back_to_groq(self, mock_genai, google_key):
        chat = mock_genai.GenerativeModel.return_value.start_chat.return_value
        chat.send_message.side_effect = RuntimeError("429 quota exceeded")
        groq = _groq_returning("from groq")
        client = LLMClient(settings=google_key, groq_client=groq, backoff_seconds=0)

        assert client.generate("hello") == "from groq"

    @patch("src.llm.client.genai")
    def test_all_providers_fail(self, mock_genai, google_key):
        chat = mock_genai.GenerativeModel.return_value.start_chat.return_value
        chat.send_message.side_effect = RuntimeError("boom")
        groq = MagicMock()
        groq.chat.completions.create.side_effect = RuntimeError("also boom")
        client = LLMClient(settings=google_key, groq_client=groq, backoff_seconds=0)

        with pytest.raises(LLMError) as exc_info:
            client.generate("hello")
        assert exc_info.value.details == "also boom"


class TestGenerateStructured:
    """Test schema-validated answers."""

    def test_valid_answer(self, no_keys):
        groq = _groq_returning('```json\n{"latitude": 19.07, "longitude": 72.87}\n```')
        client = LLMClient(settings=no_keys, groq_client=groq)

        coords = client.generate_structured("Where is Mumbai?", Coordinates)

        assert coords == Coordinates(latitude=19.07, longitude=72.87)
        prompt = groq.chat.completions.create.call_args.kwargs["messages"][1]["content"]
        assert prompt.startswith("Where is Mumbai?")
        assert '"latitude"' in prompt

    def test_schema_mismatch(self, no_keys):
        client = LLMClient(settings=no_keys, groq_client=_groq_returning('{"latitude": 500}'))

        with pytest.raises(LLMError) as exc_info:
            client.generate_structured("Where?", Coordinates)
        assert exc_info.value.message == "LLM returned an invalid response"

    def test_not_json(self, no_keys):
        client = LLMClient(settings=no_keys, groq_client=_groq_returning("Mumbai is in India"))

        with pytest.raises(LLMError):
            client.generate_structured("Where?", Coordinates)
