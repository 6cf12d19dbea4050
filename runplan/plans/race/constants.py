"""Race and taper constants - single source of truth.

All race distance, duration and taper logic must import from here.
"""

from typing import Literal

RaceDistance = Literal["5k", "10k", "half-marathon", "marathon", "ultra"]

# Distance used to derive goal pace from a target finish time.
# Ultra is simplified to 50 km.
RACE_DISTANCE_KM: dict[str, float] = {
    "5k": 5.0,
    "10k": 10.0,
    "half-marathon": 21.1,
    "marathon": 42.2,
    "ultra": 50.0,
}

RACE_DISTANCE_LABELS: dict[str, str] = {
    "5k": "5K",
    "10k": "10K",
    "half-marathon": "Half Marathon",
    "marathon": "Marathon",
    "ultra": "Ultra Marathon",
}

LONG_DISTANCE_RACES: frozenset[str] = frozenset({"marathon", "ultra"})
SHORT_DISTANCE_RACES: frozenset[str] = frozenset({"5k", "10k"})

PLAN_WEEKS_DEFAULT = 12
PLAN_WEEKS_BY_DISTANCE: dict[str, int] = {
    "marathon": 16,
    "ultra": 20,
}
# A 5K runner already above this weekly volume gets the short block
SHORT_PLAN_VOLUME_THRESHOLD_KM = 30
SHORT_PLAN_WEEKS = 8

TAPER_WEEKS_DEFAULT = 3
TAPER_BASE_FACTOR = 0.6
TAPER_STEP = 0.1

RECOVERY_WEEK_INTERVAL = 4
RECOVERY_WEEK_FACTOR = 0.8

RIEGEL_EXPONENT = 1.06
