"""Multi-day plan orchestration on top of the daily sampler."""
import itertools
import logging
import random
from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from menu.domain.MenuItem import MenuItem
from menu.domain.Plan import DailyMenu, WeeklyPlan
from menu.events.event_helpers import publish_day_shortfall
from menu.logic.combos.sampler import generate_day
from menu.logic.combos.tracker import UniquenessTracker
from menu.utilities.constants import DAY_NAMES
from menu.utilities.config import (
    DEFAULT_NUM_DAYS, DEFAULT_COMBOS_PER_DAY, DEFAULT_MIN_CALORIES, DEFAULT_MAX_CALORIES
)

logger = logging.getLogger(__name__)

__all__ = ["categorize_menu", "generate_week"]


def categorize_menu(items: Iterable[MenuItem]) -> Dict[str, List[MenuItem]]:
    """Group menu items by category, keeping catalog order inside each group."""
    categorized: Dict[str, List[MenuItem]] = defaultdict(list)
    for item in items:
        categorized[item.category].append(item)
    return dict(categorized)


def generate_week(catalog: Iterable[MenuItem],
                  num_days: int = DEFAULT_NUM_DAYS,
                  combos_per_day: int = DEFAULT_COMBOS_PER_DAY,
                  min_calories: int = DEFAULT_MIN_CALORIES,
                  max_calories: int = DEFAULT_MAX_CALORIES,
                  rng: Optional[random.Random] = None) -> WeeklyPlan:
    """Build a plan of `num_days` days, each with up to `combos_per_day` combos.

    All run state (tracker, id counter, random source) is created here, so
    concurrent calls never share anything mutable. Pass a seeded
    `random.Random` to get a reproducible plan.

    Days that come back short are logged and reported on the event bus but
    never abort the run.
    """
    if not 0 <= num_days <= len(DAY_NAMES):
        raise ValueError(f"num_days must be between 0 and {len(DAY_NAMES)}, got {num_days}")
    if combos_per_day < 0:
        raise ValueError(f"combos_per_day cannot be negative: {combos_per_day}")
    if min_calories > max_calories:
        raise ValueError(f"min_calories ({min_calories}) is greater than max_calories ({max_calories})")

    categorized_menu = categorize_menu(catalog)
    rng = rng or random.Random()
    tracker = UniquenessTracker()
    combo_ids = itertools.count(1)
    plan = WeeklyPlan()

    for day_index in range(num_days):
        day_name = DAY_NAMES[day_index]
        logger.info("Generating menu for %s (Day %d)...", day_name, day_index + 1)
        tracker.start_day()
        daily_combos = generate_day(
            categorized_menu,
            combos_per_day,
            min_calories, max_calories,
            tracker,
            day_index,
            combo_ids,
            rng,
        )
        if len(daily_combos) < combos_per_day:
            logger.info("Generated only %d out of %d combos for %s. "
                        "This might happen if constraints are too strict for the available menu items.",
                        len(daily_combos), combos_per_day, day_name)
            publish_day_shortfall(day_name, len(daily_combos), combos_per_day)
        plan.add_day(DailyMenu(day_name, daily_combos))

    return plan
