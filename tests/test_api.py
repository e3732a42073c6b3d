"""Test suite for the HTTP API."""
from healthcare_translator.config import settings


class TestLanguagesApi:
    """Test cases for language endpoints."""

    def test_list_languages(self, client):
        """Test the registry is served in order."""
        response = client.get("/api/v1/languages")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 15
        assert data[0]["code"] == "en"
        assert data[0]["name"] == "English"
        assert data[0]["flag"]

    def test_get_language(self, client):
        """Test lookup of a single language."""
        response = client.get("/api/v1/languages/yo")

        assert response.status_code == 200
        assert response.json()["name"] == "Yoruba"

    def test_unknown_language_returns_404(self, client):
        """Test lookup of an unsupported code."""
        assert client.get("/api/v1/languages/zz").status_code == 404


class TestTranslateApi:
    """Test cases for the translate endpoint."""

    def test_backend_translation(self, client, stub_gateway):
        """Test a successful backend call and its cached repeat."""
        stub_gateway.answers = ["Me duele la cabeza"]
        payload = {"text": "My head hurts", "source_lang": "en", "target_lang": "es"}

        first = client.post("/api/v1/translate", json=payload)
        second = client.post("/api/v1/translate", json=payload)

        assert first.status_code == 200
        assert first.json()["translated_text"] == "Me duele la cabeza"
        assert first.json()["origin"] == "backend"
        assert second.json()["origin"] == "cache"
        assert len(stub_gateway.calls) == 1

    def test_failed_backend_serves_fallback(self, client, stub_gateway):
        """Test the endpoint never errors because the backend did."""
        stub_gateway.answers = [RuntimeError("boom")]

        response = client.post(
            "/api/v1/translate",
            json={"text": "fever", "source_lang": "en", "target_lang": "fr"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["translated_text"] == "fièvre"
        assert data["origin"] == "fallback"
        assert data["error"] == "RuntimeError"

    def test_blank_text_is_skipped(self, client, stub_gateway):
        """Test blank input answers with an empty translation."""
        response = client.post(
            "/api/v1/translate",
            json={"text": "  ", "source_lang": "en", "target_lang": "es"},
        )

        assert response.status_code == 200
        assert response.json()["translated_text"] == ""
        assert response.json()["origin"] == "skipped"
        assert stub_gateway.calls == []

    def test_unsupported_language_returns_400(self, client, stub_gateway):
        """Test codes outside the registry are rejected at the edge."""
        response = client.post(
            "/api/v1/translate",
            json={"text": "hello", "source_lang": "en", "target_lang": "zz"},
        )

        assert response.status_code == 400
        assert stub_gateway.calls == []

    def test_context_is_forwarded(self, client, stub_gateway):
        """Test a request context reaches the prompt."""
        stub_gateway.answers = ["translated"]

        client.post(
            "/api/v1/translate",
            json={"text": "consent", "source_lang": "en", "target_lang": "es", "context": "legal"},
        )

        assert "legal terminology" in stub_gateway.calls[0].system_prompt

    def test_missing_field_returns_422(self, client):
        """Test request validation."""
        response = client.post("/api/v1/translate", json={"text": "hello"})

        assert response.status_code == 422


class TestCacheApi:
    """Test cases for cache management endpoints."""

    def test_stats_and_clear(self, client, stub_gateway):
        """Test statistics reflect use and clearing empties the cache."""
        stub_gateway.answers = ["hola"]
        client.post("/api/v1/translate", json={"text": "hi", "source_lang": "en", "target_lang": "es"})

        stats = client.get("/api/v1/cache/stats").json()
        assert stats == {"entries": 1, "hits": 0, "misses": 1}

        cleared = client.post("/api/v1/cache/clear")
        assert cleared.status_code == 200
        assert cleared.json() == {"entries_deleted": 1, "action": "clear_all"}
        assert client.get("/api/v1/cache/stats").json()["entries"] == 0

    def test_clear_requires_token_when_configured(self, client, monkeypatch):
        """Test the auth guard on cache clearing."""
        monkeypatch.setattr(settings, "api_auth_token", "secret")

        assert client.post("/api/v1/cache/clear").status_code == 401
        assert client.post(
            "/api/v1/cache/clear", headers={"Authorization": "Bearer wrong"}
        ).status_code == 401
        assert client.post(
            "/api/v1/cache/clear", headers={"Authorization": "Bearer secret"}
        ).status_code == 200
        assert client.post(
            "/api/v1/cache/clear", headers={"X-API-Key": "secret"}
        ).status_code == 200


class TestHealthApi:
    """Test cases for service endpoints."""

    def test_health(self, client):
        """Test health reports the backend state."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "backend_configured": True}

    def test_root(self, client):
        """Test the root endpoint."""
        assert client.get("/").json()["message"] == "Healthcare Translator API"
