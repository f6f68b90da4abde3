"""Plan domain entities: the combos of one day and the multi-day plan built from them."""
from typing import List, Optional

from menu.domain.Combo import Combo


class DailyMenu:
    def __init__(self, day: str, combos: Optional[List[Combo]] = None):
        self.day = day
        self.combos = combos[:] if combos else []

    def __repr__(self) -> str:
        return f"DailyMenu({self.day!r}, {len(self.combos)} combos)"

    def to_dict(self):
        return {"day": self.day, "combos": [c.to_dict() for c in self.combos]}


class WeeklyPlan:
    def __init__(self, days: Optional[List[DailyMenu]] = None):
        self.days = days[:] if days else []

    def add_day(self, daily_menu: DailyMenu):
        self.days.append(daily_menu)

    def all_combos(self) -> List[Combo]:
        '''Every combo of the plan in acceptance order.'''
        return [combo for daily in self.days for combo in daily.combos]

    def __len__(self) -> int:
        return len(self.days)

    def to_dict(self):
        return {"menu_plan": [daily.to_dict() for daily in self.days]}
