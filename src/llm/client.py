"""
LLM Client for Google Gemini with Groq fallback.

This module provides a clean interface to the hosted language models.
It handles:
- API client initialization
- A provider cascade (Gemini first, Groq second)
- JSON extraction and schema validation of structured answers
- Image prompts given as data URIs

Groq only accepts text, so prompts carrying images go to Gemini alone.
"""
import base64
import binascii
import json
import re
import time
from typing import Dict, List, Optional, Type, TypeVar

import google.generativeai as genai
from groq import Groq
from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from src.core.config import Settings, get_settings
from src.core.exceptions import LLMError, ValidationError
from src.core.logging_config import get_logger

logger = get_logger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

DATA_URI_PATTERN = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<data>.+)$", re.DOTALL)
CODE_FENCE_PATTERN = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)

DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant for a fleet and tour management company."


def parse_data_uri(uri: str) -> Dict[str, object]:
    """
    Decode a ``data:<mimetype>;base64,<data>`` URI.

    Returns:
        {"mime_type": str, "data": bytes}, the inline-part shape Gemini accepts

    Raises:
        ValidationError: If the URI is malformed or the payload is not base64
    """
    match = DATA_URI_PATTERN.match((uri or "").strip())
    if not match:
        raise ValidationError(
            "Expected a data URI of the form data:<mimetype>;base64,<encoded_data>",
            field="photoDataUri",
        )
    try:
        payload = base64.b64decode(match.group("data"), validate=True)
    except (binascii.Error, ValueError):
        raise ValidationError("Image data is not valid base64", field="photoDataUri")
    return {"mime_type": match.group("mime"), "data": payload}


def extract_json(text: str) -> object:
    """Parse a JSON answer, tolerating markdown code fences around it."""
    cleaned = CODE_FENCE_PATTERN.sub("", (text or "").strip()).strip()
    return json.loads(cleaned)


class LLMClient:
    """
    Hybrid client for Google Gemini and Groq.

    Features:
    - Provider cascade with linear backoff (Gemini -> Groq)
    - Providers without an API key are skipped
    - Structured output validated against pydantic schemas
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        groq_client: Optional[Groq] = None,
        backoff_seconds: float = 1.0,
    ):
        self.settings = settings or get_settings()
        self.temperature = self.settings.llm_temperature
        self.max_tokens = self.settings.llm_max_tokens
        self.backoff_seconds = backoff_seconds

        if self.settings.google_api_key:
            genai.configure(api_key=self.settings.google_api_key)

        self.groq_client = groq_client
        if self.groq_client is None and self.settings.groq_api_key:
            self.groq_client = Groq(api_key=self.settings.groq_api_key)

        logger.info(
            f"LLM client initialized (gemini={'on' if self.settings.google_api_key else 'off'}, "
            f"groq={'on' if self.groq_client else 'off'})"
        )

    def _cascade(self, has_images: bool) -> List[Dict[str, str]]:
        cascade = []
        if self.settings.google_api_key:
            cascade.append({"provider": "google", "model": self.settings.llm_model})
        if self.groq_client is not None and not has_images:
            cascade.append({"provider": "groq", "model": self.settings.llm_model_fallback})
        return cascade

    def generate(
        self,
        user_message: str,
        system_prompt: Optional[str] = None,
        images: Optional[List[Dict[str, object]]] = None,
        json_mode: bool = False,
    ) -> str:
        """
        Generate a completion, falling back across providers.

        Args:
            user_message: Prompt text
            system_prompt: Optional system instruction
            images: Inline image parts as returned by parse_data_uri()
            json_mode: Ask the provider for a JSON-only answer

        Returns:
            The model's text answer

        Raises:
            LLMError: If no provider is configured or all of them fail
        """
        if system_prompt is None:
            system_prompt = DEFAULT_SYSTEM_PROMPT

        cascade = self._cascade(has_images=bool(images))
        if not cascade:
            raise LLMError("No LLM provider configured", details="Set GOOGLE_API_KEY or GROQ_API_KEY")

        last_error = None
        for i, attempt in enumerate(cascade):
            provider = attempt["provider"]
            target_model = attempt["model"]

            try:
                if i > 0:
                    logger.info(f"Attempt {i + 1}: Falling back to {provider.title()} ({target_model})...")
                    time.sleep(self.backoff_seconds * i)

                if provider == "google":
                    text = self._generate_google(user_message, system_prompt, images, target_model, json_mode)
                else:
                    text = self._generate_groq(user_message, system_prompt, target_model, json_mode)

                if not text:
                    raise ValueError("Empty response")
                return text

            except Exception as e:
                error_msg = str(e).lower()
                is_rate_limit = "429" in error_msg or "quota" in error_msg or "rate limit" in error_msg

                log_level = logger.warning if is_rate_limit else logger.error
                log_level(f"Provider failed ({provider}/{target_model}): {e}")
                last_error = e

        logger.critical("All LLM providers failed")
        raise LLMError("LLM service unavailable", details=str(last_error))

    def generate_structured(
        self,
        prompt: str,
        schema: Type[SchemaT],
        system_prompt: Optional[str] = None,
        images: Optional[List[Dict[str, object]]] = None,
    ) -> SchemaT:
        """
        Ask for a JSON answer and validate it against ``schema``.

        The JSON schema of the model is appended to the prompt so both
        providers see the same output contract.

        Raises:
            LLMError: If generation fails or the answer does not match the schema
        """
        contract = json.dumps(schema.model_json_schema(by_alias=True), indent=2)
        full_prompt = (
            f"{prompt.strip()}\n\n"
            f"Respond with a single JSON object matching this JSON schema, and nothing else:\n"
            f"{contract}"
        )

        text = self.generate(full_prompt, system_prompt=system_prompt, images=images, json_mode=True)

        try:
            payload = extract_json(text)
            return schema.model_validate(payload)
        except (json.JSONDecodeError, SchemaValidationError) as e:
            logger.warning(f"Structured answer rejected for {schema.__name__}: {e}")
            raise LLMError("LLM returned an invalid response", details=str(e))

    def _generate_groq(self, user_message, system_prompt, model, json_mode=False):
        """Execute request using Groq."""
        kwargs = {}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        response = self.groq_client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            **kwargs
        )
        return response.choices[0].message.content

    def _generate_google(self, user_message, system_prompt, images, model, json_mode=False):
        """Execute request using Google Gemini."""
        model_instance = genai.GenerativeModel(
            model_name=model,
            system_instruction=system_prompt
        )

        generation_config = genai.types.GenerationConfig(
            temperature=self.temperature,
            max_output_tokens=self.max_tokens,
            response_mime_type="application/json" if json_mode else None,
        )

        parts = [user_message]
        if images:
            parts.extend(images)

        chat = model_instance.start_chat(history=[])
        response = chat.send_message(parts, generation_config=generation_config)
        return response.text


# Singleton instance
_llm_client: Optional[LLMClient] = None


def get_llm_client() -> LLMClient:
    """Get the process-wide LLM client (FastAPI dependency)."""
    global _llm_client
    if _llm_client is None:
        _llm_client = LLMClient()
    return _llm_client


def reset_llm_client() -> None:
    """Drop the cached client so the next call re-reads settings."""
    global _llm_client
    _llm_client = None
