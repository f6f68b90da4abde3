from typing import Final

ROLES: Final[tuple[str, ...]] = ("main", "side", "drink")
DAY_NAMES: Final[tuple[str, ...]] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
)

MAX_ATTEMPTS_PER_COMBO: Final[int] = 5000
POPULARITY_TOLERANCE: Final[float] = 0.15
# A combo signature may not come back until this many days have passed
REPEAT_WINDOW_DAYS: Final[int] = 3

# First match wins when a combo mixes taste profiles
TASTE_PRIORITY: Final[tuple[str, ...]] = ("spicy", "sweet", "savory", "fresh")

REASONING_TEMPLATE: Final[str] = (
    "This combo features {taste}, consists of popular choices "
    "(average popularity: {popularity:.2f}), and meets the calorie target ({calories} kcal)."
)
