"""HTTP adapter: readiness probe and turn endpoint."""

import copy
import unittest

from fastapi.testclient import TestClient

from api.app import READY_MESSAGE, create_app
from infra.settings import Settings

ME = "https://bot.example.run.app"

UPDATE = {
    "_links": {"self": {"href": ME}},
    "arena": {
        "dimensions": [5, 5],
        "state": {
            ME: {"x": 2, "y": 2, "direction": "N", "wasHit": False, "score": 0},
            "https://other.example": {"x": 2, "y": 0, "direction": "S", "wasHit": True, "score": 3},
        },
    },
}


class TestArenaApi(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(create_app(Settings(agent_seed=0)))

    def _post(self, payload: dict):
        return self.client.post("/", json=payload)

    def test_readiness(self) -> None:
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.text, READY_MESSAGE)

    def test_returns_action_code(self) -> None:
        response = self._post(UPDATE)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.text, "T")
        self.assertTrue(response.headers["content-type"].startswith("text/plain"))

    def test_self_comes_from_links(self) -> None:
        payload = copy.deepcopy(UPDATE)
        payload["_links"]["self"]["href"] = "https://other.example"
        response = self._post(payload)
        # The other player faces south toward us: throw as well.
        self.assertEqual(response.text, "T")

    def test_optional_fields_default(self) -> None:
        payload = copy.deepcopy(UPDATE)
        for state in payload["arena"]["state"].values():
            del state["wasHit"]
            del state["score"]
        self.assertEqual(self._post(payload).text, "T")

    def test_unknown_field_rejected(self) -> None:
        payload = copy.deepcopy(UPDATE)
        payload["arena"]["weather"] = "sunny"
        response = self._post(payload)
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.text, "")

    def test_bad_direction_rejected(self) -> None:
        payload = copy.deepcopy(UPDATE)
        payload["arena"]["state"][ME]["direction"] = "X"
        self.assertEqual(self._post(payload).status_code, 500)

    def test_missing_self_rejected(self) -> None:
        payload = copy.deepcopy(UPDATE)
        payload["_links"]["self"]["href"] = "https://nobody.example"
        with self.assertLogs("arena_bot.api.app", level="WARNING"):
            response = self._post(payload)
        self.assertEqual(response.status_code, 500)

    def test_player_outside_arena_rejected(self) -> None:
        payload = copy.deepcopy(UPDATE)
        payload["arena"]["state"]["https://other.example"]["x"] = 7
        self.assertEqual(self._post(payload).status_code, 500)

    def test_not_json(self) -> None:
        response = self.client.post("/", content=b"not json", headers={"content-type": "application/json"})
        self.assertEqual(response.status_code, 500)

    def test_string_coordinate_rejected(self) -> None:
        payload = copy.deepcopy(UPDATE)
        payload["arena"]["state"][ME]["x"] = "2"
        response = self._post(payload)
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.text, "")

    def test_string_was_hit_rejected(self) -> None:
        payload = copy.deepcopy(UPDATE)
        payload["arena"]["state"][ME]["wasHit"] = "false"
        response = self._post(payload)
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.text, "")

    def test_string_dimensions_rejected(self) -> None:
        payload = copy.deepcopy(UPDATE)
        payload["arena"]["dimensions"] = ["5", "5"]
        self.assertEqual(self._post(payload).status_code, 500)

    def test_dimensions_need_width_and_height(self) -> None:
        payload = copy.deepcopy(UPDATE)
        payload["arena"]["dimensions"] = [5]
        self.assertEqual(self._post(payload).status_code, 500)

    def test_rejection_message_has_no_level_prefix(self) -> None:
        payload = copy.deepcopy(UPDATE)
        payload["arena"]["weather"] = "sunny"
        with self.assertLogs("arena_bot.api.app", level="WARNING") as logs:
            self._post(payload)
        self.assertEqual(logs.records[0].levelname, "WARNING")
        self.assertFalse(logs.records[0].getMessage().startswith("WARN"))


if __name__ == "__main__":
    unittest.main()
