"""Unit tests for middleware/security_headers.py.

Tests security header injection on API responses.
"""

from unittest.mock import MagicMock, patch

from fastapi import FastAPI
from fastapi.testclient import TestClient

from fitforhire.middleware.security_headers import SecurityHeadersMiddleware


class TestSecurityHeaders:
    """Tests for SecurityHeadersMiddleware."""

    def _get_response(self, debug: bool):
        """Create a test app, make a request with mocked settings, return response."""
        mock_settings = MagicMock()
        mock_settings.debug = debug

        app = FastAPI()

        @app.get("/test")
        async def test_endpoint():
            return {"ok": True}

        app.add_middleware(SecurityHeadersMiddleware)

        # Patch must be active during the request (dispatch reads settings)
        with patch("fitforhire.middleware.security_headers.get_settings", return_value=mock_settings):
            client = TestClient(app)
            return client.get("/test")

    def test_x_frame_options_deny(self):
        response = self._get_response(debug=False)
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_x_content_type_options_nosniff(self):
        response = self._get_response(debug=False)
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    def test_referrer_policy(self):
        response = self._get_response(debug=False)
        assert response.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"

    def test_csp_denies_framing(self):
        response = self._get_response(debug=False)
        assert "frame-ancestors 'none'" in response.headers["Content-Security-Policy"]

    def test_hsts_present_in_production(self):
        response = self._get_response(debug=False)
        assert "max-age=31536000" in response.headers["Strict-Transport-Security"]

    def test_hsts_absent_in_debug(self):
        response = self._get_response(debug=True)
        assert "Strict-Transport-Security" not in response.headers

    def test_headers_on_waitlist_errors(self, client: TestClient):
        """Error responses carry the same headers as successful ones."""
        response = client.post("/api/waitlist", json={"email": "nope"})
        assert response.status_code == 400
        assert response.headers["X-Frame-Options"] == "DENY"
        assert "X-Request-ID" in response.headers
