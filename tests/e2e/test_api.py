"""End-to-end tests for the HTTP API against in-memory persistence."""

import pytest
from fastapi.testclient import TestClient

from devsocial.application.usecase.user import CreateUserRequest, CreateUserUseCase
from devsocial.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app(build_test_container())
    with TestClient(app_instance) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Create users directly through the container, return their API key headers."""
    container = client.app.state.dishka_container

    def _register(username: str) -> dict[str, str]:
        async def _create():
            async with container() as request_container:
                use_case = await request_container.get(CreateUserUseCase)
                return await use_case.execute(
                    CreateUserRequest(username=username, credential_hash="hash")
                )

        created = client.portal.call(_create)
        return {"X-API-Key": created.api_key}

    return _register


class TestAuthentication:
    def test_missing_api_key(self, client):
        # Act
        response = client.get("/users/me")

        # Assert
        assert response.status_code == 401
        assert response.json()["detail"] == "Missing API key"

    def test_unknown_api_key(self, client):
        response = client.get("/activity/stats", headers={"X-API-Key": "nope"})

        assert response.status_code == 401

    def test_me(self, client, register):
        headers = register("alice")

        response = client.get("/users/me", headers=headers)

        assert response.status_code == 200
        assert response.json()["username"] == "alice"
        assert response.json()["settings"]["share_activity"] is True


class TestActivityEndpoints:
    def test_sync_and_stats(self, client, register):
        # Arrange
        headers = register("alice")

        # Act
        client.post(
            "/activity/sync",
            json={"seconds": 3600, "projects": {"app": 3600}, "languages": {"go": 3600}},
            headers=headers,
        )
        sync = client.post(
            "/activity/sync",
            json={"seconds": 1800, "projects": {"app": 1800}, "languages": {"rust": 1800}},
            headers=headers,
        )
        stats = client.get("/activity/stats", headers=headers)

        # Assert
        assert sync.status_code == 200
        assert sync.json()["today_total"] == 5400
        assert stats.json()["projects"] == {"app": 5400}
        assert stats.json()["languages"] == {"go": 3600, "rust": 1800}

    def test_negative_seconds_is_422(self, client, register):
        headers = register("alice")

        response = client.post(
            "/activity/sync", json={"seconds": -5}, headers=headers
        )

        assert response.status_code == 422
        assert response.json()["error"] == "ValidationError"

    def test_rollups(self, client, register):
        # Arrange
        headers = register("alice")
        client.post(
            "/activity/sync",
            json={"seconds": 600, "languages": {"go": 600}},
            headers=headers,
        )

        # Act
        hourly = client.get("/activity/hourly", params={"days": 7}, headers=headers)
        daily = client.get("/activity/daily", params={"days": 3}, headers=headers)
        languages = client.get("/activity/languages", headers=headers)
        bad = client.get("/activity/daily", params={"days": 0}, headers=headers)

        # Assert
        assert len(hourly.json()["hours"]) == 24
        assert len(daily.json()["days"]) == 3
        assert daily.json()["days"][-1]["total_seconds"] == 600
        assert languages.json()["languages"][0]["language"] == "go"
        assert bad.status_code == 422


class TestFriendsAndMessages:
    def test_friend_flow_and_messaging(self, client, register):
        # Arrange
        alice = register("alice")
        bob = register("bob")

        # Act
        sent = client.post("/friends/requests", json={"target": "bob"}, headers=alice)
        duplicate = client.post(
            "/friends/requests", json={"target": "alice"}, headers=bob
        )
        incoming = client.get("/friends/requests/incoming", headers=bob)
        request_id = sent.json()["request_id"]
        forbidden = client.post(f"/friends/requests/{request_id}/accept", headers=alice)
        accepted = client.post(f"/friends/requests/{request_id}/accept", headers=bob)
        again = client.post(f"/friends/requests/{request_id}/accept", headers=bob)
        friends = client.get("/friends", headers=alice)

        bob_id = friends.json()["friends"][0]["user_id"]
        message = client.post(
            f"/messages/{bob_id}", json={"content": "hello"}, headers=alice
        )
        unread = client.get("/messages/unread", headers=bob)

        # Assert
        assert sent.status_code == 201
        assert duplicate.status_code == 409
        assert len(incoming.json()["requests"]) == 1
        assert forbidden.status_code == 403
        assert accepted.status_code == 200
        assert accepted.json()["status"] == "accepted"
        assert again.status_code == 409
        assert [f["username"] for f in friends.json()["friends"]] == ["bob"]
        assert message.status_code == 201
        assert unread.json()["unread"] == 1

    def test_self_request_is_400(self, client, register):
        alice = register("alice")

        response = client.post(
            "/friends/requests", json={"target": "alice"}, headers=alice
        )

        assert response.status_code == 400

    def test_message_to_non_friend_is_403(self, client, register):
        alice = register("alice")
        register("bob")
        search = client.get("/users/search", params={"q": "bob"}, headers=alice)
        bob_id = search.json()["users"][0]["user_id"]

        response = client.post(
            f"/messages/{bob_id}", json={"content": "hi"}, headers=alice
        )

        assert response.status_code == 403


class TestAchievementEndpoints:
    def test_list_and_evaluate(self, client, register):
        # Arrange
        headers = register("alice")
        client.post("/activity/sync", json={"seconds": 3600}, headers=headers)

        # Act
        evaluated = client.post("/achievements/evaluate", headers=headers)
        listed = client.get("/achievements", headers=headers)

        # Assert
        assert evaluated.json()["unlocked"] == []  # sync already unlocked it
        assert listed.json()["unlocked_count"] == 1
        assert len(listed.json()["achievements"]) == 14


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
