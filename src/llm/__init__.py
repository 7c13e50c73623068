"""
LLM module - Language model integration.

This module handles all LLM interactions:
- Prompt construction
- API calls to Gemini, with Groq as fallback
- JSON parsing and schema validation
- Error handling for LLM failures
"""
from src.llm.client import LLMClient, get_llm_client, parse_data_uri, reset_llm_client

__all__ = [
    "LLMClient",
    "get_llm_client",
    "parse_data_uri",
    "reset_llm_client",
]
