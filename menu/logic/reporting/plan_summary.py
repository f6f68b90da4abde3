"""Plan reporting: per-day and whole-plan calorie and popularity aggregates."""
from typing import Any, Dict, Optional

from menu.domain.Plan import WeeklyPlan

__all__ = ["compute_plan_summary"]


def _avg(total: float, count: int) -> float:
    return round(total / count, 2) if count else 0


def compute_plan_summary(plan: WeeklyPlan, combos_per_day: Optional[int] = None) -> Dict[str, Any]:
    """Aggregate calories and popularity for the given plan.

    Returns structure:
    {
      'days': {
         'Monday': {'combos': int, 'calories': int, 'avg_calories': float,
                    'avg_popularity': float, 'shortfall': int},
         ...
      },
      'week_totals': {'combos': int, 'calories': int, 'avg_popularity': float,
                      'distinct_items': int, 'shortfall': int}
    }

    shortfall is only computed when combos_per_day (the number requested) is given.
    """
    days_result = {}
    week_calories = 0
    week_popularity = 0.0
    week_combos = 0
    week_shortfall = 0
    distinct_items = set()

    for daily in plan.days:
        count = len(daily.combos)
        day_cal = sum(c.calorie_count for c in daily.combos)
        day_pop = sum(c.popularity_score for c in daily.combos)
        shortfall = max(combos_per_day - count, 0) if combos_per_day is not None else 0
        for combo in daily.combos:
            distinct_items.update(combo.item_names)
        days_result[daily.day] = {
            'combos': count,
            'calories': day_cal,
            'avg_calories': _avg(day_cal, count),
            'avg_popularity': _avg(day_pop, count),
            'shortfall': shortfall,
        }
        week_calories += day_cal
        week_popularity += day_pop
        week_combos += count
        week_shortfall += shortfall

    return {
        'days': days_result,
        'week_totals': {
            'combos': week_combos,
            'calories': week_calories,
            'avg_popularity': _avg(week_popularity, week_combos),
            'distinct_items': len(distinct_items),
            'shortfall': week_shortfall,
        }
    }
