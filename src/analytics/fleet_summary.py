"""
Fleet Summary - Monthly fleet figures computed with pandas.

The summary feeds the dashboard and the vehicle-insights prompt:
- Vehicle counts by status and average fuel level
- Trip counts by status
- Expense totals by type, from expenses embedded in trip documents and
  from employee expense claims (rejected claims are left out)
- Estimated fuel consumption in liters from fuel spend
"""
from typing import Any, Dict, List, Optional

import pandas as pd

from src.core.logging_config import get_logger

logger = get_logger(__name__)

# Used to turn fuel spend into liters when no pump data is recorded.
DEFAULT_FUEL_PRICE_PER_LITER = 100.0


def _frame(records: List[Dict[str, Any]], columns: List[str]) -> pd.DataFrame:
    """Build a DataFrame that always has ``columns``, even for no records."""
    df = pd.DataFrame(records)
    for col in columns:
        if col not in df.columns:
            df[col] = None
    return df


def _expense_frame(trips: List[Dict[str, Any]], claims: List[Dict[str, Any]]) -> pd.DataFrame:
    """One row per trip expense and per non-rejected expense claim."""
    rows = []
    for trip in trips:
        for expense in trip.get("expenses") or []:
            rows.append({
                "tripId": trip.get("id"),
                "type": expense.get("type") or "Other",
                "amount": expense.get("amount"),
            })
    for claim in claims:
        if claim.get("status") == "rejected":
            continue
        rows.append({
            "tripId": claim.get("tripId"),
            "type": claim.get("type") or "Other",
            "amount": claim.get("amount"),
        })
    df = _frame(rows, ["tripId", "type", "amount"])
    df["amount"] = pd.to_numeric(df["amount"], errors="coerce").fillna(0.0)
    return df


def summarize_fleet(
    vehicles: List[Dict[str, Any]],
    trips: List[Dict[str, Any]],
    expenses: Optional[List[Dict[str, Any]]] = None,
    fuel_price_per_liter: float = DEFAULT_FUEL_PRICE_PER_LITER,
) -> Dict[str, Any]:
    """
    Compute fleet totals.

    Args:
        vehicles: Vehicle documents
        trips: Trip documents (with embedded ``expenses``)
        expenses: Employee expense claims
        fuel_price_per_liter: Price used to estimate liters from fuel spend

    Returns:
        Summary dict in camelCase; ``insightsInput`` matches the
        vehicle-insights request body.
    """
    vehicle_df = _frame(vehicles, ["status", "fuelLevel"])
    trip_df = _frame(trips, ["status"])
    expense_df = _expense_frame(trips, expenses or [])

    fuel_levels = pd.to_numeric(vehicle_df["fuelLevel"], errors="coerce").dropna()
    average_fuel = round(float(fuel_levels.mean()), 1) if not fuel_levels.empty else None

    vehicles_by_status = {str(k): int(v) for k, v in vehicle_df["status"].dropna().value_counts().items()}
    trips_by_status = {str(k): int(v) for k, v in trip_df["status"].dropna().value_counts().items()}
    expenses_by_type = {
        str(k): round(float(v), 2) for k, v in expense_df.groupby("type")["amount"].sum().items()
    }

    total_expenses = round(float(expense_df["amount"].sum()), 2)
    fuel_spend = expenses_by_type.get("Fuel", 0.0)
    fuel_liters = round(fuel_spend / fuel_price_per_liter, 1) if fuel_price_per_liter > 0 else 0.0
    ongoing = trips_by_status.get("Ongoing", 0)

    logger.debug(
        f"Fleet summary: {len(vehicle_df)} vehicles, {len(trip_df)} trips, "
        f"{len(expense_df)} expenses"
    )

    return {
        "totalVehicles": len(vehicles),
        "vehiclesByStatus": vehicles_by_status,
        "averageFuelLevel": average_fuel,
        "totalTrips": len(trips),
        "tripsByStatus": trips_by_status,
        "expensesByType": expenses_by_type,
        "totalExpenses": total_expenses,
        "insightsInput": {
            "totalVehicles": len(vehicles),
            "ongoingTrips": ongoing,
            "totalExpenses": total_expenses,
            "fuelConsumption": fuel_liters,
        },
    }
