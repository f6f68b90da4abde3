"""Daily combo sampler: rejection sampling of (main, side, drink) triples."""
import logging
import random
from typing import Dict, Iterator, List

from menu.domain.Combo import Combo
from menu.domain.MenuItem import MenuItem
from menu.events.event_helpers import publish_role_pool_empty, publish_slot_exhausted
from menu.logic.combos.metrics import compute_metrics, is_valid
from menu.logic.combos.reasoning import describe
from menu.logic.combos.tracker import UniquenessTracker
from menu.utilities.constants import MAX_ATTEMPTS_PER_COMBO, POPULARITY_TOLERANCE, ROLES

logger = logging.getLogger(__name__)

__all__ = ["generate_day"]


def generate_day(categorized_menu: Dict[str, List[MenuItem]],
                 slots_wanted: int,
                 min_calories: int,
                 max_calories: int,
                 tracker: UniquenessTracker,
                 day_index: int,
                 combo_ids: Iterator[int],
                 rng: random.Random,
                 max_attempts: int = MAX_ATTEMPTS_PER_COMBO) -> List[Combo]:
    """Generate up to `slots_wanted` combos for one day.

    Each slot draws one random item per role until the tracker allows the
    triple and it passes the calorie/popularity checks. A slot that is still
    empty after `max_attempts` draws ends the day early; combos accepted so
    far are kept. `combo_ids` is shared across the whole run and is only
    advanced when a combo is accepted.
    """
    missing = [role for role in ROLES if not categorized_menu.get(role)]
    if missing:
        logger.error("Not enough items to form combos on day %d: no %s items",
                     day_index + 1, ", ".join(missing))
        publish_role_pool_empty(day_index, missing)
        return []

    mains = categorized_menu["main"]
    sides = categorized_menu["side"]
    drinks = categorized_menu["drink"]
    daily_combos: List[Combo] = []

    for slot in range(slots_wanted):
        accepted = None
        for _ in range(max_attempts):
            main = rng.choice(mains)
            side = rng.choice(sides)
            drink = rng.choice(drinks)
            if (tracker.is_available(main, side, drink, day_index)
                    and is_valid(main, side, drink, min_calories, max_calories, POPULARITY_TOLERANCE)):
                accepted = (main, side, drink)
                break

        if accepted is None:
            logger.warning("Could not find a unique and valid combo for slot %d on day %d after %d attempts. "
                           "This might indicate insufficient unique items or very strict constraints.",
                           slot + 1, day_index + 1, max_attempts)
            publish_slot_exhausted(day_index, slot + 1, max_attempts)
            break

        main, side, drink = accepted
        total_calories, avg_popularity = compute_metrics(main, side, drink)
        daily_combos.append(Combo(
            combo_id=f"combo_{next(combo_ids)}",
            main=main.item_name,
            side=side.item_name,
            drink=drink.item_name,
            calorie_count=total_calories,
            popularity_score=round(avg_popularity, 2),
            reasoning=describe(main, side, drink, total_calories, avg_popularity),
        ))
        tracker.reserve(main, side, drink, day_index)

    return daily_combos
