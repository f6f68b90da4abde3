"""Uniqueness bookkeeping for one plan-generation run.

Three rules are tracked:
  - on the first day (index 0) an item may be used by at most one combo;
  - on any day an item may be used by at most one combo of that day;
  - an exact (main, side, drink) triple may not come back within
    REPEAT_WINDOW_DAYS days of the day it was last accepted.

A tracker holds state for exactly one run. Never share an instance between
concurrent requests.
"""
from typing import Dict, Set

from menu.domain.Combo import combo_signature
from menu.domain.MenuItem import MenuItem
from menu.utilities.constants import REPEAT_WINDOW_DAYS


class UniquenessTracker:
    def __init__(self, repeat_window_days: int = REPEAT_WINDOW_DAYS):
        self.repeat_window_days = repeat_window_days
        self.day1_used_items: Set[str] = set()
        self.current_day_used_items: Set[str] = set()
        self.signature_last_day: Dict[str, int] = {}

    def start_day(self):
        '''Forget the items used by the previous day. Cross-day signatures are kept.'''
        self.current_day_used_items = set()

    def is_available(self, main: MenuItem, side: MenuItem, drink: MenuItem, day_index: int) -> bool:
        names = (main.item_name, side.item_name, drink.item_name)
        if any(name in self.current_day_used_items for name in names):
            return False
        if day_index == 0 and any(name in self.day1_used_items for name in names):
            return False
        last_day = self.signature_last_day.get(combo_signature(*names))
        if last_day is not None and day_index - last_day < self.repeat_window_days:
            return False
        return True

    def reserve(self, main: MenuItem, side: MenuItem, drink: MenuItem, day_index: int):
        names = (main.item_name, side.item_name, drink.item_name)
        self.current_day_used_items.update(names)
        if day_index == 0:
            self.day1_used_items.update(names)
        self.signature_last_day[combo_signature(*names)] = day_index

    def __repr__(self) -> str:
        return (f"UniquenessTracker(day1={len(self.day1_used_items)}, "
                f"today={len(self.current_day_used_items)}, signatures={len(self.signature_last_day)})")
