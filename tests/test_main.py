import unittest

from fastapi.testclient import TestClient

from weather_lookup.main import app


class TestMain(unittest.TestCase):
    def test_app_metadata(self):
        self.assertEqual(app.title, "Weather Lookup")

    def test_index_points_at_api(self):
        resp = TestClient(app).get("/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["api"], "/v1")


if __name__ == "__main__":
    unittest.main()
