import os
import logging
from dotenv import load_dotenv

load_dotenv()

PORT     = int(os.getenv("PORT", "8080"))
HOST     = os.getenv("HOST", "0.0.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# ── CORS allow-list (comma-separated) ────────────────────────────
ALLOWED_ORIGINS = [
    o.strip()
    for o in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")
    if o.strip()
]

# ── Logging (runs once) ──────────────────────────────────────────
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logger = logging.getLogger("nyota")
logger.setLevel(LOG_LEVEL)

# Prevent duplicate handlers when uvicorn reloads the app
if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)

# ── Request defaults ─────────────────────────────────────────────
DEFAULT_DAYS   = 7
DEFAULT_BUDGET = 3

# ── Budget tiers (USD/day) ───────────────────────────────────────
# budget <= 2 → value, budget >= 4 → premium, anything else → mid
BUDGET_TIERS = {
    "value":   {"max_budget": 2, "per_day": 180, "label": "value-friendly lodges"},
    "mid":     {"per_day": 300, "label": "mid-range comfort"},
    "premium": {"min_budget": 4, "per_day": 450, "label": "premium camps"},
}
