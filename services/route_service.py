# Route Service — fixed reordering heuristics for the chip list
#   1. Ngorongoro goes right after Serengeti when both are picked
#   2. Zanzibar goes last for a beach finish

from typing import List, Sequence
from config import BUDGET_TIERS
from services.itinerary_service import budget_band, resolve_places


def optimize_route(items: Sequence[str]) -> List[str]:
    """Return a reordered copy; the input is left untouched."""
    route = list(items)

    if "Serengeti" in route and "Ngorongoro" in route:
        route.remove("Ngorongoro")
        route.insert(route.index("Serengeti") + 1, "Ngorongoro")

    if "Zanzibar" in route:
        route.remove("Zanzibar")
        route.append("Zanzibar")

    return route


def budget_tier(budget: float) -> str:
    return BUDGET_TIERS[budget_band(budget)]["label"]


def summarize_route(items: Sequence[str], budget: float) -> str:
    route = resolve_places(items)
    return f"Suggested route: {' → '.join(route)}, with {budget_tier(budget)}."
