from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional, Any
from config import DEFAULT_DAYS, DEFAULT_BUDGET


def _coerce_days(value: Any) -> int:
    """Non-negative whole days; missing or non-numeric input falls back to the default."""
    if value is None or isinstance(value, bool):
        return DEFAULT_DAYS
    try:
        days = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_DAYS
    return max(days, 0)


def _coerce_budget(value: Any) -> float:
    """Budget tier as a number; anything unreadable lands on the mid tier default."""
    if value is None or isinstance(value, bool):
        return float(DEFAULT_BUDGET)
    try:
        budget = float(value)
    except (TypeError, ValueError):
        return float(DEFAULT_BUDGET)
    if budget != budget:  # NaN
        return float(DEFAULT_BUDGET)
    return budget


def _coerce_items(value: Any) -> List[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [str(v) for v in value if v is not None]


class PlanContext(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    itinerary_items: List[str] = Field(default_factory=list, alias="itineraryItems")
    days:            int       = DEFAULT_DAYS
    budget:          float     = DEFAULT_BUDGET

    @field_validator("itinerary_items", mode="before")
    @classmethod
    def _items(cls, v):
        return _coerce_items(v)

    @field_validator("days", mode="before")
    @classmethod
    def _days(cls, v):
        return _coerce_days(v)

    @field_validator("budget", mode="before")
    @classmethod
    def _budget(cls, v):
        return _coerce_budget(v)


class ChatRequest(BaseModel):
    message: str         = ""
    context: PlanContext = Field(default_factory=PlanContext)

    @field_validator("message", mode="before")
    @classmethod
    def _message(cls, v):
        return "" if v is None else str(v)

    @field_validator("context", mode="before")
    @classmethod
    def _context(cls, v):
        return v if isinstance(v, (dict, PlanContext)) else {}


class DayPlan(BaseModel):
    title:          str
    description:    str
    lodging:        str
    distance:       str
    activities:     List[str]
    estimated_cost: str


class Itinerary(BaseModel):
    days:                 List[DayPlan]
    total_estimated_cost: str


class ChatResponse(BaseModel):
    reply:     str
    itinerary: Optional[Itinerary] = None


class RouteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    itinerary_items: List[str] = Field(default_factory=list, alias="itineraryItems")
    budget:          float     = DEFAULT_BUDGET

    @field_validator("itinerary_items", mode="before")
    @classmethod
    def _items(cls, v):
        return _coerce_items(v)

    @field_validator("budget", mode="before")
    @classmethod
    def _budget(cls, v):
        return _coerce_budget(v)


class RouteResponse(BaseModel):
    order:   List[str]
    tier:    str
    summary: str
