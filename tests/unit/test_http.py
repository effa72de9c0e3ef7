"""
Unit tests for ApiTransport.

Requests go to an in-process FakeBackend through httpx.MockTransport, so
every assertion is about what actually crossed the wire.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import httpx
import pytest
from structlog.testing import capture_logs

from talent_client.core.exceptions import ApiError
from talent_client.core.http import ApiTransport


# ---------------------------------------------------------------------------
# Successful requests
# ---------------------------------------------------------------------------
class TestRequestSuccess:
    @pytest.mark.asyncio
    async def test_returns_envelope_unchanged(self, transport, backend):
        envelope = {"success": True, "data": [{"id": "job-1"}], "count": 1}
        backend.add("GET", "/jobs", json=envelope)

        result = await transport.request("/jobs")

        assert result == envelope

    @pytest.mark.asyncio
    async def test_sends_json_headers_and_body(self, transport, backend):
        backend.add("POST", "/jobs", json={"success": True, "data": {"id": "job-2"}})

        await transport.request("/jobs", method="POST", json={"title": "QA Engineer"})

        request = backend.last_request
        assert request.headers["content-type"] == "application/json"
        assert request.headers["accept"] == "application/json"
        assert backend.last_json() == {"title": "QA Engineer"}

    @pytest.mark.asyncio
    async def test_caller_headers_override_defaults(self, transport, backend):
        backend.add("GET", "/jobs", json={"success": True, "data": []})

        await transport.request("/jobs", headers={"Authorization": "Bearer t0k3n"})

        assert backend.last_request.headers["authorization"] == "Bearer t0k3n"

    @pytest.mark.asyncio
    async def test_query_params_are_encoded(self, transport, backend):
        backend.add("GET", "/applications", json={"success": True, "data": []})

        await transport.request("/applications", params={"job_id": "job 1"})

        assert backend.last_request.url.params["job_id"] == "job 1"

    def test_base_url_trailing_slash_is_ignored(self):
        transport = ApiTransport("http://testserver/api/", MagicMock(spec=httpx.AsyncClient))
        assert transport.url_for("/jobs") == "http://testserver/api/jobs"


# ---------------------------------------------------------------------------
# Error normalisation
# ---------------------------------------------------------------------------
class TestRequestErrors:
    @pytest.mark.asyncio
    async def test_server_error_message_is_used(self, transport, backend):
        backend.add(
            "POST",
            "/applications/app-1/reject",
            json={"error": "Rejection reason is required"},
            status_code=400,
        )

        with pytest.raises(ApiError) as exc_info:
            await transport.request("/applications/app-1/reject", method="POST", json={})

        err = exc_info.value
        assert str(err) == "Rejection reason is required"
        assert err.status_code == 400
        assert err.endpoint == "/applications/app-1/reject"
        assert err.payload == {"error": "Rejection reason is required"}

    @pytest.mark.asyncio
    async def test_fallback_message_without_error_field(self, transport, backend):
        backend.add("GET", "/jobs", json={"success": False}, status_code=500)

        with pytest.raises(ApiError) as exc_info:
            await transport.request("/jobs")

        assert exc_info.value.message == "API request failed"

    @pytest.mark.asyncio
    async def test_custom_fallback_message(self, transport, backend):
        backend.add("GET", "/jobs", json={}, status_code=503)

        with pytest.raises(ApiError, match="Failed to load jobs"):
            await transport.request("/jobs", fallback_error="Failed to load jobs")

    @pytest.mark.asyncio
    async def test_non_json_error_body_uses_fallback(self, transport, backend):
        backend.add("GET", "/jobs", content=b"<html>Bad Gateway</html>", status_code=502)

        with pytest.raises(ApiError) as exc_info:
            await transport.request("/jobs")

        assert exc_info.value.message == "API request failed"
        assert exc_info.value.status_code == 502
        assert exc_info.value.payload is None

    @pytest.mark.asyncio
    async def test_malformed_json_on_success_propagates_raw(self, transport, backend):
        backend.add("GET", "/jobs", content=b"{not json", status_code=200)

        with pytest.raises(ValueError) as exc_info:
            await transport.request("/jobs")

        assert not isinstance(exc_info.value, ApiError)

    @pytest.mark.asyncio
    async def test_network_error_is_rethrown_unchanged(self, transport, backend):
        error = httpx.ConnectError("Connection refused")
        backend.fail("GET", "/jobs", error)

        with pytest.raises(httpx.ConnectError) as exc_info:
            await transport.request("/jobs")

        assert exc_info.value is error


# ---------------------------------------------------------------------------
# Failure logging
# ---------------------------------------------------------------------------
class TestFailureLogging:
    @pytest.mark.asyncio
    async def test_api_error_logged_with_endpoint(self, transport, backend):
        backend.add("GET", "/applications/app-9", json={"error": "Application not found"}, status_code=404)

        with capture_logs() as logs:
            with pytest.raises(ApiError):
                await transport.request("/applications/app-9")

        assert len(logs) == 1
        assert logs[0]["event"] == "api_request_failed"
        assert logs[0]["log_level"] == "error"
        assert logs[0]["endpoint"] == "/applications/app-9"
        assert logs[0]["status_code"] == 404
        assert logs[0]["error"] == "Application not found"

    @pytest.mark.asyncio
    async def test_network_error_logged_with_endpoint(self, transport, backend):
        backend.fail("GET", "/candidates", httpx.ReadTimeout("timed out"))

        with capture_logs() as logs:
            with pytest.raises(httpx.ReadTimeout):
                await transport.request("/candidates")

        assert logs[0]["endpoint"] == "/candidates"
        assert logs[0]["error_type"] == "ReadTimeout"

    @pytest.mark.asyncio
    async def test_success_is_not_logged(self, transport, backend):
        backend.add("GET", "/jobs", json={"success": True, "data": []})

        with capture_logs() as logs:
            await transport.request("/jobs")

        assert logs == []


# ---------------------------------------------------------------------------
# Multipart uploads and raw reads
# ---------------------------------------------------------------------------
class TestUploadAndRaw:
    @pytest.mark.asyncio
    async def test_upload_lets_httpx_set_multipart_boundary(self, transport, backend):
        backend.add("POST", "/upload/file", json={"success": True, "url": "files/a.txt"})

        await transport.upload(
            "/upload/file",
            files={"file": ("a.txt", b"hello", "text/plain")},
            data={"companyId": "co-1"},
        )

        content_type = backend.last_request.headers["content-type"]
        assert content_type.startswith("multipart/form-data; boundary=")
        assert b'name="companyId"' in backend.last_request.content

    @pytest.mark.asyncio
    async def test_upload_failure_uses_fallback(self, transport, backend):
        backend.add("POST", "/upload/file", json={}, status_code=500)

        with pytest.raises(ApiError, match="Failed to upload file"):
            await transport.upload(
                "/upload/file",
                files={"file": ("a.txt", b"hello", "text/plain")},
                fallback_error="Failed to upload file",
            )

    @pytest.mark.asyncio
    async def test_get_raw_sends_no_json_content_type(self, transport, backend):
        backend.add("GET", "/upload/signed-url/a/b.pdf", json={"signedUrl": "https://s3/a/b.pdf"})

        result = await transport.get_raw("/upload/signed-url/a/b.pdf")

        assert result["signedUrl"] == "https://s3/a/b.pdf"
        assert "content-type" not in backend.last_request.headers
