# Itinerary Service — templated day-by-day plan
# Cycles through the requested places (or the default circuit),
# looks up activities and stay details per place, and prices
# every day at the flat rate for the budget tier.

from typing import List, Sequence
from models.schemas import PlanContext, DayPlan, Itinerary
from data.destinations import (
    DEFAULT_PLACES, ACTIVITIES, FALLBACK_ACTIVITIES, STAYS, DEFAULT_STAY
)
from config import BUDGET_TIERS


def budget_band(budget: float) -> str:
    """Collapse the 1–5 budget scale to value / mid / premium."""
    if budget <= BUDGET_TIERS["value"]["max_budget"]:
        return "value"
    if budget >= BUDGET_TIERS["premium"]["min_budget"]:
        return "premium"
    return "mid"


def per_day_cost(budget: float) -> int:
    return BUDGET_TIERS[budget_band(budget)]["per_day"]


def format_currency(amount: int) -> str:
    return f"${amount}"


def activities_for(place: str) -> List[str]:
    return list(ACTIVITIES.get(place, FALLBACK_ACTIVITIES))


def plan_day(place: str, cost: int) -> DayPlan:
    stay = STAYS.get(place, DEFAULT_STAY)
    return DayPlan(
        title=place,
        description=f"Experience {place} with guided activities and comfortable lodging.",
        lodging=stay["lodging"],
        distance=stay["distance"],
        activities=activities_for(place),
        estimated_cost=format_currency(cost)
    )


def resolve_places(items: Sequence[str]) -> List[str]:
    return list(items) if items else list(DEFAULT_PLACES)


def generate(context: PlanContext) -> Itinerary:
    """
    Build the itinerary:
      1. Substitute the default circuit when no places were picked
      2. Day i visits places[i % len(places)]
      3. Every day costs the tier's flat rate; total = rate * days
    """
    places = resolve_places(context.itinerary_items)
    cost   = per_day_cost(context.budget)

    days = [plan_day(places[i % len(places)], cost) for i in range(context.days)]

    return Itinerary(
        days=days,
        total_estimated_cost=format_currency(cost * context.days)
    )
