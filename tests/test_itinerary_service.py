import pytest
from models.schemas import PlanContext
from services.itinerary_service import generate, per_day_cost


def ctx(**kw):
    return PlanContext(**kw)


@pytest.mark.parametrize("days", [0, 1, 5, 12])
def test_day_count_matches(days):
    assert len(generate(ctx(days=days)).days) == days


@pytest.mark.parametrize("budget,rate", [(1, 180), (2, 180), (2.5, 300), (3, 300), (4, 450), (5, 450)])
def test_tier_pricing(budget, rate):
    plan = generate(ctx(days=3, budget=budget))
    assert per_day_cost(budget) == rate
    assert all(d.estimated_cost == f"${rate}" for d in plan.days)
    assert plan.total_estimated_cost == f"${rate * 3}"


def test_cycles_through_places():
    plan = generate(ctx(itineraryItems=["A", "B"], days=3))
    assert [d.title for d in plan.days] == ["A", "B", "A"]


def test_default_circuit_when_empty():
    plan = generate(ctx(itineraryItems=[], days=6))
    assert [d.title for d in plan.days] == [
        "Arusha", "Tarangire", "Serengeti", "Ngorongoro", "Zanzibar", "Arusha"
    ]


def test_zanzibar_stay():
    plan = generate(ctx(itineraryItems=["Zanzibar", "Serengeti", "Nowhere"], days=3))
    for day in plan.days:
        if day.title == "Zanzibar":
            assert (day.lodging, day.distance) == ("Beach lodge", "Flight 1h")
        else:
            assert (day.lodging, day.distance) == ("Safari camp", "Drive 2–4h")


def test_activities_lookup_and_fallback():
    plan = generate(ctx(itineraryItems=["Lake Manyara", "Mikumi"], days=2))
    assert plan.days[0].activities == ["Tree-climbing lions", "Hot springs", "Birdwatching"]
    assert plan.days[1].activities == ["Scenic drive", "Local cuisine", "Relax"]
    assert plan.days[1].description == "Experience Mikumi with guided activities and comfortable lodging."


def test_zero_days():
    plan = generate(ctx(days=0, budget=5))
    assert plan.days == []
    assert plan.total_estimated_cost == "$0"


def test_duplicates_kept():
    plan = generate(ctx(itineraryItems=["Serengeti", "Serengeti"], days=2))
    assert [d.title for d in plan.days] == ["Serengeti", "Serengeti"]
