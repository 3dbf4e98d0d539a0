"""API tests for todo CRUD and per-user isolation."""

import unittest

from api_support import ApiTestCase


class TestTodos(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.user, token = self.register_and_login()
        self.headers = self.bearer(token)

    def create(self, title: str = "Buy milk", **extra: object) -> dict:
        resp = self.client.post("/api/todos", json={"title": title, **extra}, headers=self.headers)
        self.assertEqual(resp.status_code, 201)
        return resp.json()["data"]

    def test_requires_auth(self) -> None:
        resp = self.client.get("/api/todos")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["type"], "AUTH_ERROR")

    def test_create_and_get(self) -> None:
        todo = self.create("Buy milk", description="2 litres")
        self.assertEqual(todo["user_id"], self.user["id"])
        self.assertFalse(todo["is_completed"])
        self.assertEqual(todo["description"], "2 litres")

        resp = self.client.get(f"/api/todos/{todo['id']}", headers=self.headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["data"]["title"], "Buy milk")

    def test_blank_title_rejected(self) -> None:
        resp = self.client.post("/api/todos", json={"title": "   "}, headers=self.headers)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["type"], "VALIDATION_ERROR")

    def test_list_and_filter(self) -> None:
        first = self.create("one")
        self.create("two")
        self.client.patch(
            f"/api/todos/{first['id']}", json={"is_completed": True}, headers=self.headers
        )

        all_titles = {t["title"] for t in self.client.get("/api/todos", headers=self.headers).json()["data"]}
        self.assertEqual(all_titles, {"one", "two"})

        done = self.client.get("/api/todos?completed=true", headers=self.headers).json()["data"]
        self.assertEqual([t["title"] for t in done], ["one"])
        open_ = self.client.get("/api/todos?completed=false", headers=self.headers).json()["data"]
        self.assertEqual([t["title"] for t in open_], ["two"])

    def test_partial_update(self) -> None:
        todo = self.create("draft", description="keep me")
        resp = self.client.patch(
            f"/api/todos/{todo['id']}", json={"title": "final"}, headers=self.headers
        )
        self.assertEqual(resp.status_code, 200)
        data = resp.json()["data"]
        self.assertEqual(data["title"], "final")
        self.assertEqual(data["description"], "keep me")

    def test_empty_update_is_bad_request(self) -> None:
        todo = self.create()
        resp = self.client.patch(f"/api/todos/{todo['id']}", json={}, headers=self.headers)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["type"], "BAD_REQUEST")
        self.assertEqual(resp.json()["message"], "No fields to update")

    def test_null_title_rejected(self) -> None:
        todo = self.create()
        resp = self.client.patch(f"/api/todos/{todo['id']}", json={"title": None}, headers=self.headers)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["type"], "VALIDATION_ERROR")

    def test_delete(self) -> None:
        todo = self.create()
        resp = self.client.delete(f"/api/todos/{todo['id']}", headers=self.headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["message"], "Todo deleted")
        resp = self.client.get(f"/api/todos/{todo['id']}", headers=self.headers)
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["message"], "Todo not found")

    def test_other_users_todos_are_invisible(self) -> None:
        todo = self.create("private")
        _, other_token = self.register_and_login()
        other = self.bearer(other_token)

        self.assertEqual(self.client.get("/api/todos", headers=other).json()["data"], [])
        for method in ("get", "delete"):
            resp = getattr(self.client, method)(f"/api/todos/{todo['id']}", headers=other)
            self.assertEqual(resp.status_code, 404)
        resp = self.client.patch(f"/api/todos/{todo['id']}", json={"title": "x"}, headers=other)
        self.assertEqual(resp.status_code, 404)
        # Still there for the owner.
        resp = self.client.get(f"/api/todos/{todo['id']}", headers=self.headers)
        self.assertEqual(resp.json()["data"]["title"], "private")


if __name__ == "__main__":
    unittest.main()
