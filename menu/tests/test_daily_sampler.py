import itertools
import random
import unittest
from menu.domain.MenuItem import MenuItem
from menu.events.Event_Bus import GLOBAL_EVENT_BUS, PLANNER_ROLE_POOL_EMPTY, PLANNER_SLOT_EXHAUSTED
from menu.logic.combos.sampler import generate_day
from menu.logic.combos.tracker import UniquenessTracker


class TestDailySampler(unittest.TestCase):

    def setUp(self):
        self.burger = MenuItem("Veggie Burger", "main", 500, "savory", 8.0)
        self.fries = MenuItem("Fries", "side", 150, "savory", 7.95)
        self.soda = MenuItem("Soda", "drink", 100, "sweet", 6.0)
        self.water = MenuItem("Water", "drink", 0, "fresh", 7.9)
        self.tracker = UniquenessTracker()
        self.ids = itertools.count(1)
        self.rng = random.Random(7)
        self.events = []
        GLOBAL_EVENT_BUS.subscribe(PLANNER_ROLE_POOL_EMPTY, self._collect)
        GLOBAL_EVENT_BUS.subscribe(PLANNER_SLOT_EXHAUSTED, self._collect)

    def tearDown(self):
        GLOBAL_EVENT_BUS.unsubscribe(PLANNER_ROLE_POOL_EMPTY, self._collect)
        GLOBAL_EVENT_BUS.unsubscribe(PLANNER_SLOT_EXHAUSTED, self._collect)

    def _collect(self, event_name, payload):
        self.events.append((event_name, payload))

    def _run(self, menu, slots=3, day_index=0, **kwargs):
        self.tracker.start_day()
        return generate_day(menu, slots, 550, 800, self.tracker, day_index, self.ids, self.rng, **kwargs)

    def test_wide_popularity_spread_yields_no_combo(self):
        menu = {"main": [self.burger], "side": [self.fries], "drink": [self.soda]}
        combos = self._run(menu)
        self.assertEqual(combos, [])
        self.assertEqual(next(self.ids), 1, "no identifier should be consumed")
        self.assertEqual(self.events, [(PLANNER_SLOT_EXHAUSTED, {"day_index": 0, "slot": 1, "attempts": 5000})])

    def test_accepted_combo(self):
        menu = {"main": [self.burger], "side": [self.fries], "drink": [self.water]}
        combos = self._run(menu)
        # the only triple uses every item, so the second slot runs dry and ends the day
        self.assertEqual(len(combos), 1)
        combo = combos[0]
        self.assertEqual(combo.combo_id, "combo_1")
        self.assertEqual((combo.main, combo.side, combo.drink), ("Veggie Burger", "Fries", "Water"))
        self.assertEqual(combo.calorie_count, 650)
        self.assertAlmostEqual(combo.popularity_score, 7.95, places=2)
        self.assertIn("a savory and mixed taste profile", combo.reasoning)
        self.assertIn("(650 kcal)", combo.reasoning)
        self.assertEqual(len(self.events), 1)
        self.assertEqual(self.events[0][1]["slot"], 2)

    def test_empty_role_pool(self):
        menu = {"main": [self.burger], "side": [self.fries], "drink": []}
        combos = self._run(menu)
        self.assertEqual(combos, [])
        self.assertEqual(next(self.ids), 1)
        self.assertEqual(self.events, [(PLANNER_ROLE_POOL_EMPTY, {"day_index": 0, "missing_roles": ["drink"]})])

    def test_missing_role_key(self):
        combos = self._run({"main": [self.burger], "side": [self.fries]}, day_index=3)
        self.assertEqual(combos, [])
        self.assertEqual(self.events[0][1], {"day_index": 3, "missing_roles": ["drink"]})

    def test_fills_all_slots_without_item_reuse(self):
        mains = [MenuItem(f"Main {i}", "main", 450, "savory", 8.0) for i in range(5)]
        sides = [MenuItem(f"Side {i}", "side", 150, "fresh", 8.05) for i in range(5)]
        drinks = [MenuItem(f"Drink {i}", "drink", 100, "sweet", 7.95) for i in range(5)]
        combos = self._run({"main": mains, "side": sides, "drink": drinks})
        self.assertEqual([c.combo_id for c in combos], ["combo_1", "combo_2", "combo_3"])
        names = [name for c in combos for name in c.item_names]
        self.assertEqual(len(names), len(set(names)))
        self.assertEqual(self.events, [])

    def test_attempt_cap_is_configurable(self):
        menu = {"main": [self.burger], "side": [self.fries], "drink": [self.soda]}
        self._run(menu, max_attempts=10)
        self.assertEqual(self.events[0][1]["attempts"], 10)

    def test_ids_continue_across_days(self):
        mains = [MenuItem(f"Main {i}", "main", 450, "savory", 8.0) for i in range(4)]
        sides = [MenuItem(f"Side {i}", "side", 150, "fresh", 8.0) for i in range(4)]
        drinks = [MenuItem(f"Drink {i}", "drink", 100, "sweet", 8.0) for i in range(4)]
        menu = {"main": mains, "side": sides, "drink": drinks}
        first = self._run(menu, slots=2, day_index=0)
        second = self._run(menu, slots=2, day_index=1)
        self.assertEqual([c.combo_id for c in first + second], ["combo_1", "combo_2", "combo_3", "combo_4"])

if __name__ == '__main__':
    unittest.main()
