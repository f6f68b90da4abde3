import json
import os
import tempfile
import unittest
from unittest import mock
from fastapi.testclient import TestClient
from menu.api.api_run import app
from menu.events import web_observers
from menu.utilities import config


class TestGenerateMenuAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp.cleanup()

    def _menu_file(self, items):
        path = os.path.join(self.tmp.name, "master_menu.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump(items, f)
        return path

    def test_generate_menu_defaults(self):
        resp = self.client.get('/generate-menu', params={'seed': 11})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertIn('menu_plan', data)
        self.assertNotIn('summary', data)
        self.assertEqual(len(data['menu_plan']), 7)
        self.assertEqual(data['menu_plan'][0]['day'], 'Monday')
        monday = data['menu_plan'][0]['combos']
        self.assertTrue(monday)
        for combo in monday:
            for key in ('combo_id', 'main', 'side', 'drink', 'calorie_count', 'popularity_score', 'reasoning'):
                self.assertIn(key, combo)
            self.assertTrue(550 <= combo['calorie_count'] <= 800)

    def test_seed_makes_plan_reproducible(self):
        first = self.client.get('/generate-menu', params={'seed': 5}).json()
        second = self.client.get('/generate-menu', params={'seed': 5}).json()
        self.assertEqual(first, second)

    def test_custom_days_and_summary(self):
        resp = self.client.get('/generate-menu', params={'days': 2, 'combos_per_day': 2,
                                                         'seed': 1, 'include_summary': True})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual([d['day'] for d in data['menu_plan']], ['Monday', 'Tuesday'])
        self.assertEqual(set(data['summary']['days']), {'Monday', 'Tuesday'})
        total = sum(len(d['combos']) for d in data['menu_plan'])
        self.assertEqual(data['summary']['week_totals']['combos'], total)

    def test_missing_menu_file_is_server_error(self):
        with mock.patch.object(config, 'MENU_FILE', os.path.join(self.tmp.name, 'missing.json')):
            resp = self.client.get('/generate-menu')
        self.assertEqual(resp.status_code, 500)
        self.assertIn('Unable to load menu file', resp.json()['detail'])

    def test_empty_menu_is_server_error(self):
        with mock.patch.object(config, 'MENU_FILE', self._menu_file([])):
            resp = self.client.get('/generate-menu')
        self.assertEqual(resp.status_code, 500)
        self.assertIn('empty', resp.json()['detail'])

    def test_inverted_calorie_band(self):
        resp = self.client.get('/generate-menu', params={'min_calories': 900, 'max_calories': 500})
        self.assertEqual(resp.status_code, 400)

    def test_too_many_days(self):
        resp = self.client.get('/generate-menu', params={'days': 8})
        self.assertEqual(resp.status_code, 422)

    def test_shortfall_is_not_an_error(self):
        items = [
            {"item_name": "Veggie Burger", "category": "main", "calories": 500, "taste_profile": "savory", "popularity_score": 8.0},
            {"item_name": "Fries", "category": "side", "calories": 150, "taste_profile": "savory", "popularity_score": 7.5},
            {"item_name": "Soda", "category": "drink", "calories": 100, "taste_profile": "sweet", "popularity_score": 6.0},
        ]
        web_observers.start()
        cursor = web_observers.get_events()['next_cursor']
        with mock.patch.object(config, 'MENU_FILE', self._menu_file(items)):
            resp = self.client.get('/generate-menu', params={'days': 1})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {'menu_plan': [{'day': 'Monday', 'combos': []}]})
        alerts = self.client.get('/api/planner/alerts', params={'since': cursor}).json()
        types = [e['type'] for e in alerts['events']]
        self.assertIn('planner.slot_exhausted', types)
        self.assertIn('planner.day_shortfall', types)

    def test_menu_listing(self):
        resp = self.client.get('/api/menu')
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['total'], sum(data['counts'].values()))
        self.assertEqual(set(data['categories']), {'main', 'side', 'drink'})

    def test_menu_listing_error(self):
        with mock.patch.object(config, 'MENU_FILE', os.path.join(self.tmp.name, 'missing.json')):
            resp = self.client.get('/api/menu')
        self.assertEqual(resp.status_code, 500)

    def test_export_pdf(self):
        resp = self.client.get('/export_pdf', params={'seed': 2})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers['content-type'], 'application/pdf')
        self.assertTrue(resp.content.startswith(b'%PDF'))

    def test_static_page_and_health(self):
        self.assertEqual(self.client.get('/health').json(), {'status': 'ok'})
        page = self.client.get('/')
        self.assertEqual(page.status_code, 200)
        self.assertIn('Combo Menu Planner', page.text)

if __name__ == '__main__':
    unittest.main()
