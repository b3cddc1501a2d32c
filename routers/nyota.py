from typing import Optional
from fastapi import APIRouter
from models.schemas import ChatRequest, ChatResponse, RouteRequest, RouteResponse
from services.nyota import respond, suggest_route

router = APIRouter(prefix="/api", tags=["nyota"])


@router.get("/health")
def health():
    return {"ok": True}


@router.post("/nyota", response_model=ChatResponse)
def chat(req: Optional[ChatRequest] = None):
    """
    Canned reply for the message plus a templated itinerary for the context.
    Missing fields fall back to defaults (7 days, mid budget, default circuit).
    """
    return respond(req or ChatRequest())


@router.post("/nyota/route", response_model=RouteResponse)
def route(req: Optional[RouteRequest] = None):
    """Reorder the picked places (Ngorongoro after Serengeti, Zanzibar last)."""
    return suggest_route(req or RouteRequest())
