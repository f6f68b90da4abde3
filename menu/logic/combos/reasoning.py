"""Human readable explanation attached to every accepted combo."""
from menu.domain.MenuItem import MenuItem
from menu.utilities.constants import REASONING_TEMPLATE, TASTE_PRIORITY

__all__ = ["describe_taste", "describe"]


def describe_taste(main: MenuItem, side: MenuItem, drink: MenuItem) -> str:
    profiles = {main.taste_profile, side.taste_profile, drink.taste_profile}
    if len(profiles) == 1:
        return f"a {next(iter(profiles))} profile"
    # TODO: let the catalog owner configure TASTE_PRIORITY instead of the fixed order
    for profile in TASTE_PRIORITY:
        if profile in profiles:
            return f"a {profile} and mixed taste profile"
    return "a mixed taste profile"


def describe(main: MenuItem, side: MenuItem, drink: MenuItem,
             total_calories: int, avg_popularity: float) -> str:
    """Presentation text only; never parse it back into numbers."""
    return REASONING_TEMPLATE.format(
        taste=describe_taste(main, side, drink),
        popularity=avg_popularity,
        calories=total_calories,
    )
