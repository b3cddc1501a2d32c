# Fixed Tanzania destination data
# Activities per destination, the fallback used for unknown places,
# and the lodging/transfer special cases.
# Read-only: loaded once at import, never mutated per request.

from types import MappingProxyType

DEFAULT_PLACES = ("Arusha", "Tarangire", "Serengeti", "Ngorongoro", "Zanzibar")

ACTIVITIES = MappingProxyType({
    "Serengeti":    ("Game drive", "Migration viewing", "Sunset lookout"),
    "Ngorongoro":   ("Crater descent", "Picnic", "Hippo pool"),
    "Tarangire":    ("Elephant herds", "Baobab tour", "Birding"),
    "Lake Manyara": ("Tree-climbing lions", "Hot springs", "Birdwatching"),
    "Zanzibar":     ("Stone Town tour", "Spice farm", "Snorkeling"),
    "Kilimanjaro":  ("Acclimatization hike", "Campfire", "Summit attempt"),
    "Arusha":       ("Coffee tour", "Local market", "Museum"),
})

FALLBACK_ACTIVITIES = ("Scenic drive", "Local cuisine", "Relax")

# Places reached by air and slept at on the coast
STAYS = MappingProxyType({
    "Zanzibar": {"lodging": "Beach lodge", "distance": "Flight 1h"},
})

DEFAULT_STAY = MappingProxyType({"lodging": "Safari camp", "distance": "Drive 2–4h"})
