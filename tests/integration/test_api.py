"""Integration tests for the FastAPI application.

The Gemini clients on ``app.state`` are replaced by stubs, so no network
access occurs.
"""

from __future__ import annotations

import pytest

from naillogic.ui.models import ERROR_MESSAGE


class TestPages:
    def test_index_serves_html(self, test_client):
        resp = test_client.get("/")
        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        assert 'id="generate-btn"' in resp.text

    def test_static_script_served(self, test_client):
        resp = test_client.get("/static/js/app.js")
        assert resp.status_code == 200

    def test_health(self, test_client):
        resp = test_client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "healthy"}


class TestConfigEndpoint:
    def test_studio_profile(self, test_client):
        data = test_client.get("/api/config").json()
        assert data["studio"] == {
            "name": "Nail Logic",
            "owner": "Miral Mehta",
            "initials": "NL",
            "booking_url": "https://wa.me/917016531812",
        }
        assert "version" in data

    def test_links(self, test_client):
        links = test_client.get("/api/config").json()["links"]
        assert len(links) == 6
        assert links[0]["label"] == "Book Appointment"
        assert set(links[0]) == {"label", "url", "icon", "description"}


class TestGenerateEndpoint:
    """Test POST /api/generate."""

    def test_success(self, test_client, stub_image_client):
        resp = test_client.post("/api/generate", json={"prompt": "rose gold chrome"})

        assert resp.status_code == 200
        assert resp.json() == {
            "state": "success",
            "image": "data:image/png;base64,AAAA",
            "message": None,
        }
        assert stub_image_client.prompts == ["rose gold chrome"]

    @pytest.mark.parametrize("prompt", ["", "   "])
    def test_blank_prompt_is_idle(self, test_client, stub_image_client, prompt):
        resp = test_client.post("/api/generate", json={"prompt": prompt})

        assert resp.status_code == 200
        assert resp.json()["state"] == "idle"
        assert stub_image_client.prompts == []

    def test_no_image_is_error(self, test_client, make_client):
        test_client.app.state.image_client = make_client(None)

        resp = test_client.post("/api/generate", json={"prompt": "marble texture with gold foil"})

        assert resp.status_code == 200
        assert resp.json() == {"state": "error", "image": None, "message": ERROR_MESSAGE}

    def test_service_failure_is_error(self, test_client, make_client, service_failure):
        test_client.app.state.image_client = make_client(service_failure)

        resp = test_client.post("/api/generate", json={"prompt": "rose gold chrome"})

        assert resp.status_code == 200
        assert resp.json()["state"] == "error"
        assert resp.json()["message"] == ERROR_MESSAGE

    def test_requests_are_independent(self, test_client, make_client, service_failure):
        test_client.app.state.image_client = make_client(
            service_failure, "data:image/png;base64,AAAA"
        )

        first = test_client.post("/api/generate", json={"prompt": "rose gold chrome"})
        second = test_client.post("/api/generate", json={"prompt": "rose gold chrome"})

        assert first.json()["state"] == "error"
        assert second.json()["state"] == "success"

    def test_missing_prompt(self, test_client):
        resp = test_client.post("/api/generate", json={})
        assert resp.status_code == 422


class TestSuggestEndpoint:
    def test_suggestion(self, test_client, stub_suggestion_client):
        resp = test_client.post("/api/suggest", json={"mood": " autumn wedding "})

        assert resp.status_code == 200
        assert resp.json() == {"suggestion": stub_suggestion_client.suggestion}
        assert stub_suggestion_client.moods == ["autumn wedding"]

    def test_blank_mood(self, test_client, stub_suggestion_client):
        resp = test_client.post("/api/suggest", json={"mood": "  "})

        assert resp.status_code == 400
        assert stub_suggestion_client.moods == []
