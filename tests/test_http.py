import json

import httpx
import pytest

from jules_api import (
    AuthenticationError,
    BadRequestError,
    ClientConfig,
    ConnectionError,
    ForbiddenError,
    JulesError,
    NotFoundError,
    RateLimitError,
    ServerError,
)
from jules_api.transport.http import HttpClient, extract_error_message

API_KEY = "test-api-key"
BASE_URL = "https://jules.example.com/v1alpha"


@pytest.fixture
def http(api):
    client = HttpClient(ClientConfig(api_key=API_KEY, base_url=BASE_URL + "/"), transport=httpx.MockTransport(api.handler))
    yield client
    client.close()


class TestRequests:
    def test_get_builds_url_and_headers(self, http, api):
        api.add(json_body={"ok": True})
        assert http.get("sessions") == {"ok": True}

        req = api.last
        assert req.method == "GET"
        assert str(req.url) == f"{BASE_URL}/sessions"
        assert req.headers["X-Goog-Api-Key"] == API_KEY
        assert req.headers["Content-Type"] == "application/json"
        assert req.headers["Accept"] == "application/json"
        assert req.content == b""

    def test_get_drops_none_params(self, http, api):
        api.add(json_body={})
        http.get("/sources", {"pageToken": None, "pageSize": 5})
        assert api.last.url.params.get("pageSize") == "5"
        assert "pageToken" not in api.last.url.params

    def test_get_with_only_none_params_has_no_query(self, http, api):
        api.add(json_body={})
        http.get("/sources", {"pageToken": None})
        assert api.last.url.query == b""

    def test_post_serializes_body(self, http, api):
        api.add(json_body={"name": "sessions/1"})
        http.post("/sessions", {"prompt": "hi", "requirePlanApproval": False})
        assert api.last.method == "POST"
        assert api.last_json() == {"prompt": "hi", "requirePlanApproval": False}

    def test_post_without_body_sends_empty_object(self, http, api):
        api.add(json_body={})
        http.post("/sessions/1:approvePlan")
        assert api.last_json() == {}
        assert api.last.url.path.endswith("/sessions/1:approvePlan")

    def test_delete_sends_no_body(self, http, api):
        api.add(status=200)
        assert http.delete("/sessions/1") == {}
        assert api.last.method == "DELETE"
        assert api.last.content == b""

    def test_empty_success_body_is_empty_dict(self, http, api):
        api.add(status=204)
        assert http.get("/anything") == {}

    def test_unsupported_method_fails_before_sending(self, http, api):
        with pytest.raises(ValueError, match="Unsupported HTTP method"):
            http.request("PATCH", "/sessions/1")
        assert api.requests == []

    def test_invalid_json_success_body(self, http, api):
        api.add(status=200, text="<html>")
        with pytest.raises(JulesError, match="Invalid JSON"):
            http.get("/sources")

    @pytest.mark.parametrize("payload", [[], ["a"], "text", 3])
    def test_non_object_success_body(self, http, api, payload):
        api.add(status=200, json_body=payload)
        with pytest.raises(JulesError, match="expected an object") as exc_info:
            http.get("/sources")
        assert exc_info.value.status == 200


class TestErrorMapping:
    @pytest.mark.parametrize("status,error_cls,default", [
        (400, BadRequestError, "Bad request"),
        (401, AuthenticationError, "Invalid API key"),
        (403, ForbiddenError, "Access forbidden"),
        (404, NotFoundError, "Resource not found"),
        (429, RateLimitError, "Rate limit exceeded"),
        (500, ServerError, "Server error"),
        (503, ServerError, "Server error"),
    ])
    def test_status_defaults(self, http, api, status, error_cls, default):
        api.add(status=status, text="not json")
        with pytest.raises(error_cls) as exc_info:
            http.get("/x")
        assert exc_info.value.message == default
        assert exc_info.value.status == status
        assert exc_info.value.response == "not json"

    def test_not_found_with_message(self, http, api):
        api.add(status=404, json_body={"error": {"message": "Not found"}})
        with pytest.raises(NotFoundError) as exc_info:
            http.get("/sessions/missing")
        assert exc_info.value.message == "Not found"
        assert json.loads(exc_info.value.response) == {"error": {"message": "Not found"}}

    def test_unexpected_status(self, http, api):
        api.add(status=418, json_body={"message": "teapot"})
        with pytest.raises(JulesError) as exc_info:
            http.get("/x")
        assert type(exc_info.value) is JulesError
        assert exc_info.value.message == "Unexpected response: 418"
        assert exc_info.value.status == 418

    def test_connection_failure(self, api):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = HttpClient(ClientConfig(api_key=API_KEY, base_url=BASE_URL), transport=httpx.MockTransport(refuse))
        with pytest.raises(ConnectionError, match="connection refused"):
            client.get("/sources")

    def test_timeout(self, api):
        def slow(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client = HttpClient(ClientConfig(api_key=API_KEY, base_url=BASE_URL, timeout=2), transport=httpx.MockTransport(slow))
        with pytest.raises(ConnectionError, match="timed out after 2"):
            client.get("/sources")


class TestExtractErrorMessage:
    def test_nested_message(self):
        assert extract_error_message('{"error": {"message": "nested"}}', "d") == "nested"

    def test_error_string(self):
        assert extract_error_message('{"error": "flat"}', "d") == "flat"

    def test_top_level_message(self):
        assert extract_error_message('{"message": "top"}', "d") == "top"

    def test_error_hash_without_message_uses_default(self):
        assert extract_error_message('{"error": {"code": 7}, "message": "ignored"}', "d") == "d"

    @pytest.mark.parametrize("body", [None, "", "garbage", "[1, 2]", '{"other": 1}'])
    def test_fallback(self, body):
        assert extract_error_message(body, "default") == "default"
