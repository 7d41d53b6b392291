"""End-to-end tests for stamp card polling, admin grants and reset."""

from stampcard.domain.value import MAX_STAMPS
from tests.conftest import ADMIN_TOKEN, make_settings
from tests.harness import create_client_fixture

client = create_client_fixture(settings=make_settings())


def _grant(client, user_id, token=ADMIN_TOKEN):
    return client.post(
        "/api/admin/stamp",
        json={"userId": user_id},
        headers={"x-admin-token": token},
    )


def _signup(client, username="Olga", mail="olga@example.com"):
    response = client.post(
        "/auth/signup", json={"username": username, "mailAddress": mail}
    )
    assert response.status_code == 201
    return response.json()["id"]


class TestHealth:
    """Health check."""

    def test_health(self, client):
        """Should report healthy."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestStatusPolling:
    """Tests for GET /api/user/{user_id}."""

    def test_first_poll_creates_empty_card(self, client):
        """An unknown user gets a zero card in camelCase."""
        response = client.get("/api/user/alice")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "alice"
        assert data["stamps"] == 0
        assert data["isAdmin"] is False
        assert data["lastUpdatedAt"] is None
        assert data["recentEvents"] == []
        assert data["newMilestones"] == []

    def test_admin_user_is_seeded_at_startup(self, client):
        """The configured admin user exists with the admin marker."""
        response = client.get("/api/user/admin")

        assert response.status_code == 200
        assert response.json()["isAdmin"] is True

    def test_milestone_fires_once_while_polling(self, client):
        """Crossing 5 is reported on one poll only."""
        for _ in range(5):
            assert _grant(client, "bob").status_code == 200

        crossing = client.get("/api/user/bob", params={"previous": 4})
        assert crossing.json()["stamps"] == 5
        assert crossing.json()["newMilestones"] == [5]

        again = client.get("/api/user/bob", params={"previous": 5, "shown": [5]})
        assert again.json()["newMilestones"] == []

    def test_negative_previous_is_rejected(self, client):
        """Query validation rejects a negative previous count."""
        response = client.get("/api/user/bob", params={"previous": -1})

        assert response.status_code == 422

    def test_overlong_user_id_is_a_bad_request(self, client):
        """User IDs wider than 255 characters are refused."""
        response = client.get(f"/api/user/{'x' * 300}")

        assert response.status_code == 400
        assert response.json() == {"error": "userId must be at most 255 characters."}


class TestAdminGrant:
    """Tests for POST /api/admin/stamp."""

    def test_grant_with_valid_token(self, client):
        """A valid token adds one stamp."""
        response = _grant(client, "carol")

        assert response.status_code == 200
        assert response.json() == {"id": "carol", "stamps": 1}

        status = client.get("/api/user/carol").json()
        assert status["recentEvents"][0]["eventType"] == "ADD"
        assert status["recentEvents"][0]["reason"] == "admin_grant"

    def test_grant_saturates_at_max(self, client):
        """The counter stops at the maximum."""
        for _ in range(MAX_STAMPS + 1):
            response = _grant(client, "dave")

        assert response.json()["stamps"] == MAX_STAMPS

    def test_wrong_token_is_unauthorized(self, client):
        """A wrong token is refused and nothing is stored."""
        response = _grant(client, "erin", token="wrong")

        assert response.status_code == 401
        assert "error" in response.json()
        assert client.get("/api/user/erin").json()["stamps"] == 0

    def test_missing_user_id_is_bad_request(self, client):
        """The target user is required."""
        response = client.post(
            "/api/admin/stamp", json={}, headers={"x-admin-token": ADMIN_TOKEN}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "userId is required."}


class TestReset:
    """Tests for POST /api/reset."""

    def test_anonymous_reset_is_unauthorized(self, client):
        """Without a session the caller is unknown."""
        response = client.post("/api/reset", json={})

        assert response.status_code == 401
        assert response.json() == {"error": "User is not identified."}

    def test_reset_own_card(self, client):
        """A signed-in user can clear their own card."""
        user_id = _signup(client)
        _grant(client, user_id)
        _grant(client, user_id)

        response = client.post("/api/reset", json={"userId": user_id})

        assert response.status_code == 200
        assert response.json() == {"id": user_id, "stamps": 0}
        status = client.get(f"/api/user/{user_id}").json()
        assert status["recentEvents"][0]["eventType"] == "RESET"

    def test_reset_other_card_is_forbidden(self, client):
        """Naming another user in the body is refused."""
        _signup(client)

        response = client.post("/api/reset", json={"userId": "someone-else"})

        assert response.status_code == 403
        assert response.json() == {"error": "User mismatch."}

    def test_me_returns_own_card(self, client):
        """GET /api/me follows the session."""
        user_id = _signup(client)

        response = client.get("/api/me")

        assert response.status_code == 200
        assert response.json()["id"] == user_id
        assert response.json()["profile"]["username"] == "Olga"
