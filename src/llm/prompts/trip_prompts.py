"""
Trip and fleet prompts.

These prompts instruct the LLM to:
1. Estimate distance, duration and costs of a road trip
2. Turn monthly fleet figures into short operational insights
"""
from typing import Optional

TRIP_DISCLAIMER = (
    "All values are estimates. Real-world costs and times may vary based on "
    "traffic, weather, and other conditions."
)

NORMAL_OPERATIONS = "Operations look normal."


def get_trip_planner_prompt(source: str, destination: str, vehicle_type: Optional[str] = None) -> str:
    """
    Get the trip planner prompt.

    Args:
        source: Starting point of the trip
        destination: Final destination
        vehicle_type: Optional vehicle class, e.g. "Truck"

    Returns:
        Prompt text
    """
    vehicle_line = f"Vehicle Type: {vehicle_type}\n" if vehicle_type else ""

    return f"""You are an expert trip planner for a logistics company.
Based on the following request, provide a detailed trip plan from the source to the destination.

Source: {source}
Destination: {destination}
{vehicle_line}
Calculate and provide the following details:
- Total distance in kilometers.
- Estimated duration of the trip.
- Estimated fuel cost (assume an average fuel efficiency and a standard fuel price).
- Estimated toll costs along the most common route.
- A brief summary of the suggested route.

Provide a clear, easy-to-understand, and well-structured response in the requested format.
Finally, you MUST include the following disclaimer text exactly as it is written here in the 'disclaimer' field: "{TRIP_DISCLAIMER}"
"""


def get_vehicle_insights_prompt(
    total_vehicles: int,
    ongoing_trips: int,
    total_expenses: float,
    fuel_consumption: float,
) -> str:
    """Get the fleet analyst prompt for the current month's figures."""
    return f"""You are a fleet management analyst AI. Based on the following summary data for the current month, provide actionable insights.

- Total Vehicles: {total_vehicles}
- Ongoing Trips: {ongoing_trips}
- Total Expenses: $ {total_expenses}
- Fuel Consumption: {fuel_consumption} Liters

Analyze this data and generate:
1.  A concise insight about the fleet's current operational efficiency.
2.  One specific, actionable cost-saving suggestion.
3.  One anomaly detection note. If no anomalies are apparent, state that "{NORMAL_OPERATIONS}"

Be brief and to the point.
"""
