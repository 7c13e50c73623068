"""
Prompts module - LLM prompt templates.

Prompts are stored as separate Python files for:
- Version control of prompt changes
- Clear documentation of prompt purpose
"""
from src.llm.prompts.assistant_prompts import (
    MAX_QUERY_LENGTH,
    get_canned_reply,
    get_chat_system_prompt,
    get_chat_user_prompt,
)
from src.llm.prompts.document_prompts import (
    EXPENSE_TYPES,
    get_expense_parser_prompt,
    get_transliteration_prompt,
)
from src.llm.prompts.geo_prompts import (
    get_attractions_prompt,
    get_geocoder_prompt,
    get_place_search_prompt,
    get_road_snapper_prompt,
)
from src.llm.prompts.trip_prompts import (
    NORMAL_OPERATIONS,
    TRIP_DISCLAIMER,
    get_trip_planner_prompt,
    get_vehicle_insights_prompt,
)

__all__ = [
    "MAX_QUERY_LENGTH",
    "get_canned_reply",
    "get_chat_system_prompt",
    "get_chat_user_prompt",
    "EXPENSE_TYPES",
    "get_expense_parser_prompt",
    "get_transliteration_prompt",
    "get_attractions_prompt",
    "get_geocoder_prompt",
    "get_place_search_prompt",
    "get_road_snapper_prompt",
    "NORMAL_OPERATIONS",
    "TRIP_DISCLAIMER",
    "get_trip_planner_prompt",
    "get_vehicle_insights_prompt",
]
