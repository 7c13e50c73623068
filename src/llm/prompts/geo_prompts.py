"""
Location prompts - geocoding, road snapping and destination research.
"""
from typing import Iterable, Optional


def get_geocoder_prompt(location: str) -> str:
    return f"""You are a geocoding expert. Your task is to find the precise latitude and longitude for the given location.

Location: {location}

Return only the coordinates in the requested JSON format."""


def get_road_snapper_prompt(path: Iterable) -> str:
    """
    Get the road snapping prompt.

    Args:
        path: Points with ``lat`` and ``lng`` attributes

    Returns:
        Prompt text listing one "lat,lng" pair per line
    """
    points = "\n".join(f"  {point.lat},{point.lng}" for point in path)

    return f"""You are a map routing expert. Your task is to take a rough series of GPS coordinates and snap them to the most likely roads to form a realistic route.
The path provided is a simple polyline. Refine it by adding more points and adjusting the existing ones to make it follow the actual road network (highways, main roads).

Path:
{points}

Return a detailed, road-snapped polyline with sufficient points to be drawn smoothly on a map."""


def get_attractions_prompt(destination: str, country: Optional[str] = None) -> str:
    place = f"{destination}, {country}" if country else destination

    return f"""You are a travel expert specializing in tourist destinations in India and worldwide.

Your task is to provide a comprehensive list of must-visit tourist attractions for {place}.

Instructions:
1. List 8-12 top tourist attractions in {destination}
2. Include popular landmarks, monuments, natural wonders, temples, museums, and viewpoints
3. For each attraction, provide:
   - Exact name of the place
   - Type (Lake, Fort, Temple, Beach, Museum, etc.)
   - Brief compelling description (1-2 lines)
   - Realistic rating (3.5-5.0 based on popularity)
   - Mark truly iconic places as mustVisit: true
4. Provide the best time to visit this destination
5. Give one practical travel tip

Focus on accuracy and include only real, well-known attractions.
Order attractions by importance and popularity."""


def get_place_search_prompt(query: str) -> str:
    return f"""You are a travel search assistant that provides detailed information about places worldwide.

The user searched for: "{query}"

Your task:
1. Identify the most likely place(s) matching this query
2. If the query is ambiguous (e.g., "Paris" could be France or Texas), return top 2-3 matches
3. For each place, provide comprehensive travel information
4. Focus on accuracy and usefulness for travelers
5. Include practical information like budget and travel tips

Instructions:
- Be specific about location (e.g., "Goa, India" not just "Goa")
- Mention what the place is best known for
- Provide realistic budget estimates
- Give actionable travel tips
- List actual nearby destinations

If the query doesn't match any known place, still try to provide the best possible information."""
