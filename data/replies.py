# Canned Nyota replies keyed by intent keyword.
# Order matters: the first keyword found in the message wins.

INTENT_REPLIES = (
    ("best time",   "June–October is ideal for safaris; Jan–Feb for calving in Serengeti; "
                    "Zanzibar is great year-round."),
    ("kilimanjaro", "Plan 6–8 days; Machame or Lemosho routes are excellent. "
                    "I’ve included acclimatization where possible."),
    ("budget",      "I’ll balance mid-range camps with one splurge night and suggest "
                    "shoulder-season travel for value."),
    ("optimize",    "I optimized your route and placed Zanzibar at the end for a relaxing finish."),
)

DEFAULT_REPLY = "Here’s a personalized, day-by-day plan based on your preferences."
