import os
import tempfile
import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from lateral_trend.main import app


class TestApi(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        env = patch.dict(
            os.environ,
            {
                "PROVIDER": "CSV",
                "PRICES_DIR": self.tmp.name,
                "STRATEGY": "divide-and-conquer",
                "MAX_PCT_CHANGE": "5.0",
            },
        )
        env.start()
        self.addCleanup(env.stop)
        self.client = TestClient(app)

    def test_health(self):
        resp = self.client.get("/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "ok")

    def test_post_prices(self):
        resp = self.client.post("/lateral-trend", json={"prices": [100, 101, 102, 100]})
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["window"]["start"], 0)
        self.assertEqual(body["window"]["end"], 3)
        self.assertEqual(body["window"]["length"], 4)
        self.assertEqual(body["max_pct_change"], 5.0)
        self.assertEqual(body["strategy"], "divide-and-conquer")

    def test_post_with_strategy_and_threshold(self):
        resp = self.client.post(
            "/lateral-trend",
            json={"prices": [100, 200, 100, 100], "max_pct_change": 1.0, "strategy": "exhaustive"},
        )
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual((body["window"]["start"], body["window"]["end"]), (2, 3))
        self.assertEqual(body["strategy"], "exhaustive")

    def test_post_rejects_bad_input(self):
        cases = [
            {"prices": []},
            {"prices": [100, 0]},
            {"prices": [100], "max_pct_change": -2},
            {"prices": [100], "strategy": "sliding-window"},
        ]
        for payload in cases:
            with self.subTest(payload=payload):
                resp = self.client.post("/lateral-trend", json=payload)
                self.assertEqual(resp.status_code, 422)

    def test_get_by_symbol(self):
        with open(os.path.join(self.tmp.name, "SPY.csv"), "w", encoding="utf-8") as f:
            f.write("Date,Close\nd1,1.00\nd2,2.00\nd3,2.01\nd4,2.02\n")

        resp = self.client.get("/lateral-trend", params={"symbol": "SPY"})
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["symbol"], "SPY")
        self.assertEqual(body["count"], 4)
        self.assertEqual((body["window"]["start"], body["window"]["end"]), (1, 3))

    def test_get_unknown_symbol(self):
        resp = self.client.get("/lateral-trend", params={"symbol": "NOPE"})
        self.assertEqual(resp.status_code, 404)

    def test_get_rejects_paths_outside_prices_dir(self):
        secret = os.path.join(self.tmp.name, "secret.txt")
        with open(secret, "w", encoding="utf-8") as f:
            f.write("top-secret-line\n")
        inner = os.path.join(self.tmp.name, "prices")
        os.mkdir(inner)

        with patch.dict(os.environ, {"PRICES_DIR": inner}):
            for symbol in ("../../etc/passwd", "../secret.txt", secret):
                with self.subTest(symbol=symbol):
                    resp = self.client.get("/lateral-trend", params={"symbol": symbol})
                    self.assertEqual(resp.status_code, 400)
                    self.assertNotIn("root:", resp.text)
                    self.assertNotIn("top-secret-line", resp.text)

    def test_get_rejects_negative_limit(self):
        with open(os.path.join(self.tmp.name, "SPY.csv"), "w", encoding="utf-8") as f:
            f.write("d1,1\nd2,2\nd3,3\nd4,4\nd5,5\n")
        resp = self.client.get("/lateral-trend", params={"symbol": "SPY", "limit": -2})
        self.assertEqual(resp.status_code, 422)

        resp = self.client.get("/lateral-trend", params={"symbol": "SPY", "limit": 2})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["count"], 2)


if __name__ == "__main__":
    unittest.main()
