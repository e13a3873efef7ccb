"""
Unit tests for tracelane.http.HttpClient, the transport shared by all resource clients.
"""

import httpx
import pytest

from tracelane import Tracelane
from tracelane.config import Config
from tracelane.exceptions import APIException, ValidationException
from tracelane.http import HttpClient


class TestFormatPath:
    def test_substitutes_every_placeholder(self):
        path = HttpClient.format_path(
            "/annotation-queues/{queueID}/items/{itemID}", {"queueID": "q-1", "itemID": "i-2"}
        )
        assert path == "/annotation-queues/q-1/items/i-2"

    def test_values_are_quoted_as_one_segment(self):
        path = HttpClient.format_path("/v2/datasets/{datasetName}", {"datasetName": "eval set/v2"})
        assert path == "/v2/datasets/eval%20set%2Fv2"

    def test_empty_value_is_rejected(self):
        with pytest.raises(ValidationException, match="'queueID' is required"):
            HttpClient.format_path("/annotation-queues/{queueID}", {"queueID": ""})


class TestRequestHeaders:
    def test_basic_auth(self, client, server):
        server.respond_with(200, {"status": "OK", "version": "3.0.0"})

        client.health.check()

        headers = server.last_request.headers
        assert headers["authorization"] == "Basic cGstdGVzdDpzay10ZXN0"

    def test_custom_headers_are_sent(self, server):
        server.respond_with(200, {"status": "OK"})
        http_client = httpx.Client(transport=httpx.MockTransport(server))

        with Tracelane(host="https://tracelane.test", headers="x-team=evals", http_client=http_client) as tracelane:
            tracelane.health.check()

        assert server.last_request.headers["x-team"] == "evals"
        assert "authorization" not in server.last_request.headers

    def test_user_agent_is_sent_by_injected_client(self, client, server):
        server.respond_with(200, {"status": "OK"})

        client.health.check()

        assert server.last_request.headers["user-agent"].startswith("tracelane-sdk/")

    def test_custom_user_agent_of_injected_client_is_kept(self, server):
        server.respond_with(200, {"status": "OK"})
        http_client = httpx.Client(headers={"User-Agent": "eval-runner/2.0"}, transport=httpx.MockTransport(server))

        Tracelane(host="https://tracelane.test", http_client=http_client).health.check()

        assert server.last_request.headers["user-agent"] == "eval-runner/2.0"

    def test_base_url_of_injected_client_is_kept(self, server):
        server.respond_with(200, {"status": "OK"})
        http_client = httpx.Client(base_url="https://proxy.test/api/public", transport=httpx.MockTransport(server))

        Tracelane(host="https://ignored.test", http_client=http_client).health.check()

        assert server.last_request.url.host == "proxy.test"


class TestStatusHandling:
    @pytest.mark.parametrize("status_code", [200, 201, 202, 204])
    def test_any_2xx_is_success(self, client, server, status_code):
        server.handle_with(lambda request: httpx.Response(status_code))

        client.dataset_items.delete("item-1")

        assert server.last_request.method == "DELETE"

    @pytest.mark.parametrize("status_code", [200, 202, 204])
    def test_empty_delete_responses_are_success(self, client, server, status_code):
        server.handle_with(lambda request: httpx.Response(status_code))

        item = client.annotation_items.delete("queue-1", "item-1")
        assignment = client.annotation_queues.delete_assignment("queue-1", "user-1")
        run = client.dataset_runs.delete("qa", "nightly")

        assert len(server.requests) == 3
        assert item.success is False
        assert assignment.success is False
        assert run.message is None

    def test_non_2xx_path_excludes_query_string(self, client, server):
        server.respond_with(500, text="boom")

        with pytest.raises(APIException) as exc_info:
            client.dataset_runs.list("qa", page=2)

        assert exc_info.value.path == "/datasets/qa/runs"

    @pytest.mark.parametrize("status_code", [301, 400, 401, 403, 404, 409, 429, 500, 503])
    def test_non_2xx_raises_api_exception(self, client, server, status_code):
        server.respond_with(status_code, text="nope")

        with pytest.raises(APIException) as exc_info:
            client.dataset_items.delete("item-1")

        error = exc_info.value
        assert error.status_code == status_code
        assert str(status_code) in str(error)
        assert error.body == "nope"
        assert error.method == "DELETE"
        assert error.path == "/dataset-items/item-1"

    def test_undecodable_success_body_raises_api_exception(self, client, server):
        server.respond_with(200, text="<html>maintenance</html>")

        with pytest.raises(APIException) as exc_info:
            client.health.check()

        assert exc_info.value.status_code == 200
        assert "undecodable" in str(exc_info.value)
        assert exc_info.value.path == "/health"

    def test_undecodable_list_body_reports_relative_path(self, client, server):
        server.respond_with(200, text="not json")

        with pytest.raises(APIException) as exc_info:
            client.dataset_runs.list("qa", page=2)

        assert exc_info.value.method == "GET"
        assert exc_info.value.path == "/datasets/qa/runs"


class TestTransportFailures:
    def test_connection_errors_propagate_unchanged(self, client, server):
        def _fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        server.handle_with(_fail)

        with pytest.raises(httpx.ConnectError):
            client.datasets.get("qa")

    def test_timeouts_propagate_unchanged(self, client, server):
        def _timeout(request):
            raise httpx.ReadTimeout("timed out", request=request)

        server.handle_with(_timeout)

        with pytest.raises(httpx.TimeoutException):
            client.datasets.get("qa", timeout=0.01)

    def test_per_call_timeout_is_forwarded(self, client, server):
        server.respond_with(200, {"status": "OK"})

        client.health.check(timeout=2.5)

        timeout = server.last_request.extensions["timeout"]
        assert timeout["read"] == 2.5
        assert timeout["connect"] == 2.5


class TestLifecycle:
    def test_owned_client_is_closed(self):
        http = HttpClient(Config(host="https://tracelane.test"))
        http.close()
        assert http._client.is_closed

    def test_injected_client_is_left_open(self, server):
        http_client = httpx.Client(transport=httpx.MockTransport(server))
        http = HttpClient(Config(host="https://tracelane.test"), http_client=http_client)

        http.close()

        assert not http_client.is_closed
        http_client.close()

    def test_owned_client_uses_configured_timeout(self):
        http = HttpClient(Config(host="https://tracelane.test", timeout=3))
        try:
            assert http._client.timeout.read == 3.0
            assert str(http._client.base_url) == "https://tracelane.test/api/public/"
            assert http._client.headers["user-agent"].startswith("tracelane-sdk/")
        finally:
            http.close()
