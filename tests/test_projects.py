# tests/test_projects.py
import unittest

from teamhub.models.task import Task
from tests.utils import API, ApiTestCase

DEADLINE = "2026-12-01T17:00:00"


class ProjectTestCase(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.alice, self.alice_token, _ = self.signup("alice")
        self.bob, self.bob_token, _ = self.signup("bob")
        self.team = self.create_team(self.alice_token)
        self.project = self.create_project(self.alice_token, self.team["id"])

    def add_task(self, token, project_id=None, **overrides):
        payload = {
            "task_name": "Build tokenizer",
            "description": "Split documents into terms",
            "username": "alice",
            "status": "todo",
            "deadline": DEADLINE,
        }
        payload.update(overrides)
        return self.client.post(
            f"{API}/projects/{project_id or self.project['id']}/tasks",
            json=payload,
            headers=self.auth(token),
        )

    def link_repo(self, token, project_id=None, **body):
        return self.client.post(
            f"{API}/projects/{project_id or self.project['id']}/repo",
            json=body,
            headers=self.auth(token),
        )

    def test_created_project_is_linked_to_team(self):
        self.assertEqual(self.project["name"], "Indexer")
        self.assertEqual(self.project["team_id"], self.team["id"])
        self.assertTrue(self.project["repo_initialized"])
        self.assertEqual(self.project["task_ids"], [])
        self.assertEqual(self.project["announcements"], [])

        response = self.client.get(f"{API}/teams/mine", headers=self.auth(self.alice_token))
        self.assertEqual(response.json()["data"][0]["project_ids"], [self.project["id"]])

    def test_only_team_owner_creates_projects(self):
        self.client.post(
            f"{API}/teams/members",
            json={"team_id": self.team["id"], "username": "bob"},
            headers=self.auth(self.alice_token),
        )
        response = self.client.post(
            f"{API}/projects",
            json={"team_id": self.team["id"], "name": "Side project"},
            headers=self.auth(self.bob_token),
        )
        self.assertEqual(response.status_code, 403)

    def test_project_for_unknown_team_is_forbidden(self):
        response = self.client.post(
            f"{API}/projects",
            json={"team_id": 9999, "name": "Orphan"},
            headers=self.auth(self.alice_token),
        )
        self.assertEqual(response.status_code, 403)

    def test_get_project(self):
        response = self.client.get(f"{API}/projects/{self.project['id']}", headers=self.auth(self.bob_token))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["overview"], "Full-text indexing service")

        response = self.client.get(f"{API}/projects/9999", headers=self.auth(self.alice_token))
        self.assertEqual(response.status_code, 404)

    def test_link_repository_is_idempotent(self):
        first = self.link_repo(self.alice_token, repo_name="indexer", owner="alice-gh")
        second = self.link_repo(self.alice_token, repo_name="indexer", owner="alice-gh")
        self.assertEqual(first.status_code, 201)
        self.assertEqual(second.status_code, 201)

        once, twice = first.json()["data"], second.json()["data"]
        for field in ("repo_name", "repo_owner", "repo_initialized", "task_ids", "team_id"):
            self.assertEqual(once[field], twice[field])
        self.assertEqual(twice["repo_name"], "indexer")
        self.assertEqual(twice["repo_owner"], "alice-gh")

    def test_link_repository_errors(self):
        self.assertEqual(self.link_repo(self.alice_token, repo_name="indexer").status_code, 400)
        self.assertEqual(self.link_repo(self.alice_token, repo_name="", owner="x").status_code, 400)
        response = self.link_repo(self.alice_token, project_id=9999, repo_name="indexer", owner="x")
        self.assertEqual(response.status_code, 404)

    def test_add_task(self):
        response = self.add_task(self.alice_token)
        self.assertEqual(response.status_code, 201)

        data = response.json()["data"]
        task = data["task"]
        self.assertEqual(task["name"], "Build tokenizer")
        self.assertEqual(task["assignee_id"], self.alice["id"])
        self.assertEqual(task["project_id"], self.project["id"])
        self.assertEqual(data["project"]["task_ids"], [task["id"]])

        response = self.client.get(f"{API}/projects/{self.project['id']}", headers=self.auth(self.alice_token))
        self.assertEqual(response.json()["data"]["task_ids"], [task["id"]])

    def test_add_task_requires_every_field(self):
        for field in ("task_name", "description", "username", "status"):
            self.assertEqual(self.add_task(self.alice_token, **{field: ""}).status_code, 400)
        response = self.client.post(
            f"{API}/projects/{self.project['id']}/tasks",
            json={"task_name": "Build tokenizer"},
            headers=self.auth(self.alice_token),
        )
        self.assertEqual(response.status_code, 400)

    def test_add_task_lookup_failures(self):
        self.assertEqual(self.add_task(self.alice_token, username="carol").status_code, 404)
        self.assertEqual(self.add_task(self.alice_token, project_id=9999).status_code, 404)

    def test_add_task_by_non_owner_is_unauthorized(self):
        response = self.add_task(self.bob_token, username="bob")
        self.assertEqual(response.status_code, 401)

        db = self.SessionLocal()
        try:
            self.assertEqual(db.query(Task).count(), 0)
        finally:
            db.close()

    def test_add_task_after_team_deleted(self):
        self.client.delete(f"{API}/teams/{self.team['id']}", headers=self.auth(self.alice_token))
        self.assertEqual(self.add_task(self.alice_token).status_code, 403)


class ScenarioTestCase(ApiTestCase):
    def test_alice_builds_indexer(self):
        self.assertEqual(self.register("alice", password="pw1").status_code, 201)
        self.assertEqual(self.register("bob", password="pw2").status_code, 201)

        login = self.login("alice", "pw1")
        self.assertEqual(login.status_code, 200)
        alice_token = login.json()["data"]["access_token"]
        self.assertTrue(login.json()["data"]["refresh_token"])
        alice_id = login.json()["data"]["user"]["id"]

        team = self.create_team(alice_token, name="Core")
        self.assertEqual(team["owner_id"], alice_id)
        self.assertEqual(team["member_ids"], [alice_id])

        project = self.create_project(alice_token, team["id"], name="Indexer")
        self.assertTrue(project["repo_initialized"])

        bob_token = self.login("bob", "pw2").json()["data"]["access_token"]
        response = self.client.post(
            f"{API}/projects",
            json={"team_id": team["id"], "name": "Indexer"},
            headers=self.auth(bob_token),
        )
        self.assertEqual(response.status_code, 403)

        task = {
            "task_name": "Crawl",
            "description": "Fetch the seed URLs",
            "username": "carol",
            "status": "open",
            "deadline": DEADLINE,
        }
        url = f"{API}/projects/{project['id']}/tasks"
        response = self.client.post(url, json=task, headers=self.auth(alice_token))
        self.assertEqual(response.status_code, 404)

        task["username"] = "alice"
        response = self.client.post(url, json=task, headers=self.auth(alice_token))
        self.assertEqual(response.status_code, 201)
        created = response.json()["data"]
        self.assertIn(created["task"]["id"], created["project"]["task_ids"])


if __name__ == "__main__":
    unittest.main()
