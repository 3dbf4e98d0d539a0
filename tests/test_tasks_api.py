"""API tests for task CRUD, status filtering and time range checks."""

import unittest

from api_support import ApiTestCase


class TestTasks(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.user, token = self.register_and_login()
        self.headers = self.bearer(token)

    def create(self, **fields: object) -> dict:
        body = {"title": "Write report", **fields}
        resp = self.client.post("/api/tasks", json=body, headers=self.headers)
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()["data"]

    def test_defaults(self) -> None:
        task = self.create()
        self.assertEqual(task["status"], "pending")
        self.assertIsNone(task["start_time"])
        self.assertIsNone(task["calendar_event_id"])
        self.assertEqual(task["user_id"], self.user["id"])

    def test_create_with_schedule(self) -> None:
        task = self.create(
            start_time="2025-01-01T09:00:00Z",
            end_time="2025-01-01T10:00:00Z",
            calendar_event_id="evt-1",
            status="in_progress",
        )
        self.assertEqual(task["status"], "in_progress")
        self.assertEqual(task["calendar_event_id"], "evt-1")
        self.assertTrue(task["start_time"].startswith("2025-01-01T09:00:00"))

    def test_end_before_start_rejected(self) -> None:
        resp = self.client.post(
            "/api/tasks",
            json={
                "title": "Backwards",
                "start_time": "2025-01-01T10:00:00Z",
                "end_time": "2025-01-01T09:00:00Z",
            },
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["type"], "VALIDATION_ERROR")

    def test_mixed_offset_and_naive_times(self) -> None:
        # Naive values are taken as UTC.
        task = self.create(start_time="2025-01-01T10:00:00Z", end_time="2025-01-01T12:00:00")
        self.assertTrue(task["end_time"].startswith("2025-01-01T12:00:00"))

        resp = self.client.post(
            "/api/tasks",
            json={
                "title": "Backwards",
                "start_time": "2025-01-01T12:00:00Z",
                "end_time": "2025-01-01T10:00:00",
            },
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["message"], "end_time must not be before start_time")

    def test_update_checks_merged_range(self) -> None:
        task = self.create(start_time="2025-01-01T09:00:00Z", end_time="2025-01-01T10:00:00Z")
        resp = self.client.patch(
            f"/api/tasks/{task['id']}",
            json={"end_time": "2025-01-01T08:00:00Z"},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["message"], "end_time must not be before start_time")

        resp = self.client.patch(
            f"/api/tasks/{task['id']}",
            json={"end_time": "2025-01-01T12:00:00Z"},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 200)

    def test_unknown_status_rejected(self) -> None:
        resp = self.client.post(
            "/api/tasks", json={"title": "x", "status": "done"}, headers=self.headers
        )
        self.assertEqual(resp.status_code, 400)

    def test_status_filter(self) -> None:
        self.create(title="a")
        b = self.create(title="b")
        resp = self.client.patch(
            f"/api/tasks/{b['id']}", json={"status": "completed"}, headers=self.headers
        )
        self.assertEqual(resp.status_code, 200)
        done = self.client.get("/api/tasks?status=completed", headers=self.headers).json()["data"]
        self.assertEqual([t["title"] for t in done], ["b"])
        self.assertEqual(len(self.client.get("/api/tasks", headers=self.headers).json()["data"]), 2)

    def test_null_status_rejected(self) -> None:
        task = self.create()
        resp = self.client.patch(f"/api/tasks/{task['id']}", json={"status": None}, headers=self.headers)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["message"], "status must not be null")

    def test_delete_and_missing(self) -> None:
        task = self.create()
        self.assertEqual(
            self.client.delete(f"/api/tasks/{task['id']}", headers=self.headers).status_code, 200
        )
        resp = self.client.delete(f"/api/tasks/{task['id']}", headers=self.headers)
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["message"], "Task not found")

    def test_other_users_tasks_are_invisible(self) -> None:
        task = self.create()
        _, other_token = self.register_and_login()
        resp = self.client.get(f"/api/tasks/{task['id']}", headers=self.bearer(other_token))
        self.assertEqual(resp.status_code, 404)


if __name__ == "__main__":
    unittest.main()
