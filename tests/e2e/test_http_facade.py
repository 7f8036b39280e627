"""End-to-end tests for the HTTP facade."""

import pytest
from fastapi.testclient import TestClient

from onboard.domain.repository import InviteRegistry
from onboard.domain.service import ChatPlatform
from onboard.domain.value import InviteCode
from onboard.interface.api.app import create_app
from tests.conftest import REQUEST_CHANNEL_ID, make_settings
from tests.di import build_test_container

SECRET = "s3cret"


@pytest.fixture
def client():
    """Create test client with test container."""
    settings = make_settings(zapier_secret=SECRET, business_name="Nomads")
    test_container = build_test_container(settings)
    app_instance = create_app(settings, test_container)
    with TestClient(app_instance) as test_client:
        yield test_client


def resolve(client: TestClient, dependency):
    """Get an APP-scoped dependency on the client's event loop."""
    return client.portal.call(client.app.state.dishka_container.get, dependency)


class TestLiveness:
    """Tests for the liveness endpoints."""

    def test_root_plain_text(self, client):
        """GET / answers with the business name."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Nomads Discord Bot is running."

    def test_health(self, client):
        """GET /health reports the platform readiness."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["discord_ready"] is True


class TestInviteMap:
    """Tests for POST /invite-map."""

    def test_empty_body_rejected(self, client):
        """An empty JSON object is a 400."""
        response = client.post("/invite-map", json={})

        assert response.status_code == 400
        assert response.text == "inviteCode and firstname required"

    def test_missing_body_rejected(self, client):
        """No body at all is treated as an empty object."""
        response = client.post("/invite-map")

        assert response.status_code == 400
        assert response.text == "inviteCode and firstname required"

    @pytest.mark.parametrize(
        "body",
        [
            b'{"inviteCode": "x", "firstname": 5}',
            b'{"inviteCode": ["x"], "firstname": "Bob"}',
            b"not json",
            b"[]",
            b"null",
        ],
    )
    def test_malformed_body_rejected(self, client, body):
        """Malformed input is a 400, never FastAPI's 422."""
        response = client.post(
            "/invite-map", content=body, headers={"content-type": "application/json"}
        )

        assert response.status_code == 400
        assert response.text == "inviteCode and firstname required"

    def test_blank_firstname_rejected(self, client):
        """A whitespace-only firstname is a 400."""
        response = client.post("/invite-map", json={"inviteCode": "x", "firstname": "  "})

        assert response.status_code == 400

    def test_maps_trimmed_firstname(self, client):
        """A valid mapping is stored trimmed."""
        # Act
        response = client.post("/invite-map", json={"inviteCode": "x", "firstname": " Bob "})

        # Assert
        assert response.status_code == 200
        assert response.text == "ok"
        registry = resolve(client, InviteRegistry)
        entry = client.portal.call(registry.find_by_code, InviteCode("x"))
        assert entry.firstname.root == "Bob"


class TestPostInviteButton:
    """Tests for POST /post-invite-button."""

    def test_missing_secret(self, client):
        """No header is a 401 and nothing is posted."""
        response = client.post("/post-invite-button")

        assert response.status_code == 401
        assert resolve(client, ChatPlatform).prompts == []

    def test_wrong_secret(self, client):
        """A wrong header is a 401 and nothing is posted."""
        response = client.post(
            "/post-invite-button", headers={"x-zapier-secret": "nope"}
        )

        assert response.status_code == 401
        assert resolve(client, ChatPlatform).prompts == []

    def test_not_ready(self, client):
        """A correct header before the bot is ready is a 503."""
        resolve(client, ChatPlatform).ready = False

        response = client.post("/post-invite-button", headers={"x-zapier-secret": SECRET})

        assert response.status_code == 503

    def test_posts_prompt(self, client):
        """A correct header posts the button prompt."""
        response = client.post("/post-invite-button", headers={"x-zapier-secret": SECRET})

        assert response.status_code == 200
        assert response.text == "ok"
        prompts = resolve(client, ChatPlatform).prompts
        assert len(prompts) == 1
        assert prompts[0]["channel_id"] == REQUEST_CHANNEL_ID
