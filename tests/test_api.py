"""
API endpoint tests.

Tests for:
- Flask routes
- Transliterate and detect endpoints
- Request validation and error responses
"""
import sys
from pathlib import Path
import unittest
from unittest import mock
import json

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


class TestAPIImports(unittest.TestCase):
    """Test API imports."""

    def test_import_flask_app(self):
        """Test Flask app import."""
        from app import app
        self.assertIsNotNone(app)

    def test_import_config(self):
        """Test config import."""
        import config
        self.assertTrue(hasattr(config, 'HOST'))
        self.assertTrue(hasattr(config, 'PORT'))
        self.assertTrue(hasattr(config, 'MAX_TEXT_LENGTH'))


class TestInfoRoutes(unittest.TestCase):
    """Test the read-only routes."""

    def setUp(self):
        from app import app
        self.app = app
        self.client = app.test_client()

    def test_status(self):
        """Test status route."""
        response = self.client.get('/status')
        self.assertEqual(response.status_code, 200)
        data = json.loads(response.data)
        self.assertEqual(data['status'], 'ok')
        self.assertEqual(data['engines'], 15)

    def test_engines(self):
        """Test engine listing."""
        response = self.client.get('/engines')
        self.assertEqual(response.status_code, 200)
        engines = json.loads(response.data)['engines']
        self.assertEqual(len(engines), 15)
        codes = {engine['code'] for engine in engines}
        self.assertIn('rd', codes)
        self.assertIn('md', codes)

    def test_scripts(self):
        """Test script listing with letter charts."""
        response = self.client.get('/scripts')
        self.assertEqual(response.status_code, 200)
        data = json.loads(response.data)
        names = [script['name'] for script in data['scripts']]
        self.assertEqual(len(names), 6)
        self.assertNotIn('unknown', names)
        thai = next(s for s in data['scripts'] if s['name'] == 'thai')
        self.assertEqual(thai['iso_code'], 'thai')
        self.assertEqual(len(thai['vowels']), 8)
        self.assertEqual(len(thai['consonants']), 33)
        self.assertIn('iast', data['roman_styles'])

    def test_unknown_route(self):
        """Test 404 handler."""
        response = self.client.get('/no-such-route')
        self.assertEqual(response.status_code, 404)
        self.assertIn('error', json.loads(response.data))


class TestTransliterateRoute(unittest.TestCase):
    """Test POST /transliterate."""

    def setUp(self):
        from app import app
        self.client = app.test_client()

    def post(self, payload):
        return self.client.post('/transliterate', json=payload)

    def test_detects_source(self):
        response = self.post({"text": "dhamma", "target": "devanagari"})
        self.assertEqual(response.status_code, 200)
        data = json.loads(response.data)
        self.assertEqual(data['text'], "धम्म")
        self.assertEqual(data['source_script'], "roman")
        self.assertEqual(data['engines'], ["rd"])

    def test_explicit_source_and_style(self):
        response = self.post({"text": "एवं", "source": "deva", "target": "roman", "style": "iso"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(json.loads(response.data)['text'], "ēvaṁ")

    def test_two_hops(self):
        response = self.post({"text": "ธมฺโม", "target": "khmer"})
        data = json.loads(response.data)
        self.assertEqual(data['text'], "ធម្មោ")
        self.assertEqual(data['engines'], ["td", "dk"])

    def test_options(self):
        response = self.post({
            "text": "kai 12", "source": "roman", "target": "devanagari",
            "include_numerals": False, "sanskrit_mode": True, "quick": True
        })
        self.assertEqual(response.status_code, 200)
        self.assertEqual(json.loads(response.data)['text'], "कै 12")

    def test_tags_preserved(self):
        response = self.post({"text": "<b>dhamma</b>", "source": "roman", "target": "thai"})
        self.assertEqual(json.loads(response.data)['text'], "<b>ธมฺม</b>")

    def test_missing_body(self):
        response = self.client.post('/transliterate', data="not json")
        self.assertEqual(response.status_code, 400)

    def test_missing_text(self):
        response = self.post({"target": "thai"})
        self.assertEqual(response.status_code, 400)

    def test_missing_target(self):
        response = self.post({"text": "dhamma"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("target", json.loads(response.data)['error'])

    def test_unknown_target(self):
        response = self.post({"text": "dhamma", "target": "klingon"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("Unknown script", json.loads(response.data)['error'])

    def test_unknown_style(self):
        response = self.post({"text": "धम्म", "target": "roman", "style": "fancy"})
        self.assertEqual(response.status_code, 400)

    def test_non_boolean_option(self):
        response = self.post({"text": "dhamma", "target": "thai", "include_numerals": "yes"})
        self.assertEqual(response.status_code, 400)

    def test_undetectable_source(self):
        response = self.post({"text": "ab ธม", "target": "thai"})
        self.assertEqual(response.status_code, 400)

    def test_text_too_long(self):
        import config
        with mock.patch.object(config, "MAX_TEXT_LENGTH", 5):
            response = self.post({"text": "dhammadhamma", "target": "thai"})
        self.assertEqual(response.status_code, 413)

    def test_conversion_failure(self):
        from core.errors import ScriptConversionError
        with mock.patch("app.convert", side_effect=ScriptConversionError("Roman", "Thai", "boom")):
            response = self.post({"text": "dhamma", "target": "thai"})
        self.assertEqual(response.status_code, 500)
        self.assertIn("boom", json.loads(response.data)['error'])


class TestDetectRoute(unittest.TestCase):
    """Test POST /detect."""

    def setUp(self):
        from app import app
        self.client = app.test_client()

    def test_detect(self):
        response = self.client.post('/detect', json={"text": "ධම්මො"})
        self.assertEqual(response.status_code, 200)
        data = json.loads(response.data)
        self.assertEqual(data['script'], "sinhala")
        self.assertEqual(data['display_name'], "Sinhala")

    def test_unknown(self):
        response = self.client.post('/detect', json={"text": "ab ธม"})
        self.assertEqual(json.loads(response.data)['script'], "unknown")

    def test_missing_text(self):
        response = self.client.post('/detect', json={})
        self.assertEqual(response.status_code, 400)


if __name__ == '__main__':
    unittest.main()
