# tests/test_todos.py
import unittest

from teamhub.models.todo import Todo
from tests.utils import API, ApiTestCase


class TodoTestCase(ApiTestCase):
    def setUp(self):
        super().setUp()
        _, self.alice_token, _ = self.signup("alice")
        _, self.bob_token, _ = self.signup("bob")

    def create_todo(self, token, title="Write docs", description="Document the API"):
        return self.client.post(
            f"{API}/todos",
            json={"title": title, "description": description},
            headers=self.auth(token),
        )

    def test_create_and_list(self):
        response = self.create_todo(self.alice_token)
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["data"]["title"], "Write docs")
        self.create_todo(self.alice_token, title="Review PR")
        self.create_todo(self.bob_token, title="Bob's todo")

        response = self.client.get(f"{API}/todos", headers=self.auth(self.alice_token))
        self.assertEqual(response.status_code, 200)
        titles = [todo["title"] for todo in response.json()["data"]]
        self.assertEqual(titles, ["Write docs", "Review PR"])

    def test_create_requires_fields(self):
        self.assertEqual(self.create_todo(self.alice_token, title="").status_code, 400)
        self.assertEqual(self.create_todo(self.alice_token, description=" ").status_code, 400)

    def test_get_todo(self):
        todo_id = self.create_todo(self.alice_token).json()["data"]["id"]
        response = self.client.get(f"{API}/todos/{todo_id}", headers=self.auth(self.alice_token))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["description"], "Document the API")

    def test_partial_update_keeps_other_fields(self):
        todo_id = self.create_todo(self.alice_token).json()["data"]["id"]

        response = self.client.put(
            f"{API}/todos/{todo_id}", json={"title": "Write more docs"}, headers=self.auth(self.alice_token)
        )
        self.assertEqual(response.status_code, 200)
        data = response.json()["data"]
        self.assertEqual(data["title"], "Write more docs")
        self.assertEqual(data["description"], "Document the API")

    def test_empty_update_fields_keep_stored_values(self):
        todo_id = self.create_todo(self.alice_token).json()["data"]["id"]

        response = self.client.put(
            f"{API}/todos/{todo_id}",
            json={"title": "", "description": "Document every endpoint"},
            headers=self.auth(self.alice_token),
        )
        self.assertEqual(response.status_code, 200)
        data = response.json()["data"]
        self.assertEqual(data["title"], "Write docs")
        self.assertEqual(data["description"], "Document every endpoint")

    def test_delete_todo(self):
        todo_id = self.create_todo(self.alice_token).json()["data"]["id"]

        response = self.client.delete(f"{API}/todos/{todo_id}", headers=self.auth(self.alice_token))
        self.assertEqual(response.status_code, 204)
        self.assertEqual(response.content, b"")

        response = self.client.get(f"{API}/todos/{todo_id}", headers=self.auth(self.alice_token))
        self.assertEqual(response.status_code, 404)

    def test_other_users_todos_look_missing(self):
        todo_id = self.create_todo(self.alice_token).json()["data"]["id"]
        bob = self.auth(self.bob_token)

        responses = [
            self.client.get(f"{API}/todos/{todo_id}", headers=bob),
            self.client.put(f"{API}/todos/{todo_id}", json={"title": "Mine now"}, headers=bob),
            self.client.delete(f"{API}/todos/{todo_id}", headers=bob),
        ]
        missing = self.client.get(f"{API}/todos/9999", headers=bob)
        for response in responses:
            self.assertEqual(response.status_code, 404)
            self.assertEqual(response.json(), missing.json())

        db = self.SessionLocal()
        try:
            todo = db.get(Todo, todo_id)
            self.assertEqual(todo.title, "Write docs")
        finally:
            db.close()


if __name__ == "__main__":
    unittest.main()
