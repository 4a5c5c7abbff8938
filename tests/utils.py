# tests/utils.py
import unittest

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from teamhub.core.config import settings
from teamhub.db.base import Base
from teamhub.db.session import get_db
from teamhub.main import app

API = settings.API_V1_STR


class ApiTestCase(unittest.TestCase):
    """
    Runs the app against a fresh in-memory SQLite database per test
    """

    def setUp(self):
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(bind=self.engine)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

        def override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        Base.metadata.drop_all(bind=self.engine)
        self.engine.dispose()

    # Helpers

    def register(self, username, password="pw1", **overrides):
        payload = {
            "fullname": f"{username.title()} Example",
            "email": f"{username}@teamhub.io",
            "skills": ["python"],
            "username": username,
            "password": password,
            "git_token": f"ghp_{username}",
        }
        payload.update(overrides)
        return self.client.post(f"{API}/users/register", json=payload)

    def login(self, username, password="pw1"):
        response = self.client.post(
            f"{API}/users/login", json={"username": username, "password": password}
        )
        # Send tokens explicitly; never let one user's cookies leak into the next request
        self.client.cookies.clear()
        return response

    def signup(self, username, password="pw1"):
        """Register and log in, returning (user, access_token, refresh_token)"""
        self.assertEqual(self.register(username, password).status_code, 201)
        data = self.login(username, password).json()["data"]
        return data["user"], data["access_token"], data["refresh_token"]

    def auth(self, token):
        return {"Authorization": f"Bearer {token}"}

    def create_team(self, token, name="Core", description="Core platform team"):
        response = self.client.post(
            f"{API}/teams", json={"name": name, "description": description}, headers=self.auth(token)
        )
        self.assertEqual(response.status_code, 201)
        return response.json()["data"]

    def create_project(self, token, team_id, name="Indexer"):
        response = self.client.post(
            f"{API}/projects",
            json={
                "team_id": team_id,
                "name": name,
                "overview": "Full-text indexing service",
                "objectives": "Index every document within a minute",
                "tech_stack": "Python, PostgreSQL",
            },
            headers=self.auth(token),
        )
        self.assertEqual(response.status_code, 200)
        return response.json()["data"]
