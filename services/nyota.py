# Nyota — request orchestrator
# Runs the intent classifier on the message and the itinerary
# generator on the context. The two results do not interact.

import logging
from models.schemas import ChatRequest, ChatResponse, RouteRequest, RouteResponse
from services.intent_service import classify, detect_intent
from services.itinerary_service import generate
from services.route_service import optimize_route, budget_tier, summarize_route

log = logging.getLogger("nyota.service")


def respond(req: ChatRequest) -> ChatResponse:
    reply     = classify(req.message)
    itinerary = generate(req.context)

    log.info(
        "chat intent=%s days=%d places=%d budget=%s",
        detect_intent(req.message) or "default",
        req.context.days,
        len(req.context.itinerary_items),
        req.context.budget
    )
    return ChatResponse(reply=reply, itinerary=itinerary)


def suggest_route(req: RouteRequest) -> RouteResponse:
    order = optimize_route(req.itinerary_items)
    log.info("route in=%s out=%s", req.itinerary_items, order)
    return RouteResponse(
        order=order,
        tier=budget_tier(req.budget),
        summary=summarize_route(order, req.budget)
    )
