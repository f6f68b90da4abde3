"""Combo metrics and constraint checks."""
from typing import Tuple

from menu.domain.MenuItem import MenuItem
from menu.utilities.constants import POPULARITY_TOLERANCE

__all__ = ["compute_metrics", "popularity_spread", "is_valid"]


def compute_metrics(main: MenuItem, side: MenuItem, drink: MenuItem) -> Tuple[int, float]:
    """Return (total calories, average popularity). The average is not rounded."""
    total_calories = main.calories + side.calories + drink.calories
    average_popularity = (main.popularity_score + side.popularity_score + drink.popularity_score) / 3.0
    return total_calories, average_popularity


def popularity_spread(main: MenuItem, side: MenuItem, drink: MenuItem) -> float:
    scores = (main.popularity_score, side.popularity_score, drink.popularity_score)
    return max(scores) - min(scores)


def is_valid(main: MenuItem, side: MenuItem, drink: MenuItem,
             min_calories: int, max_calories: int,
             popularity_tolerance: float = POPULARITY_TOLERANCE) -> bool:
    """True if the combo is inside the calorie band (inclusive) and its popularity spread is within tolerance."""
    total_calories, _ = compute_metrics(main, side, drink)
    if not (min_calories <= total_calories <= max_calories):
        return False
    return popularity_spread(main, side, drink) <= popularity_tolerance
