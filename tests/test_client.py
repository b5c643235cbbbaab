"""Tests for the GraphQL transport: envelope handling and error mapping."""

from __future__ import annotations

from collections.abc import Generator

import httpx
import pytest

from lin.api.client import LINEAR_API_URL, GraphQLClient, api_url_from_env, authorization_header
from lin.api.queries import issue as issue_ops
from lin.api.queries import user as user_ops
from lin.errors import ApiError, DecodeError, HttpStatusError, NetworkError, TransportError, VariablesError
from tests._fakes import TEST_TOKEN, FakeLinear, issue_node, nodes, user_node


@pytest.fixture
def client(fake_linear: FakeLinear) -> Generator[GraphQLClient, None, None]:
    c = GraphQLClient(TEST_TOKEN, "https://linear.test/graphql", transport=fake_linear.transport)
    yield c
    c.close()


class TestHeaders:
    def test_personal_key_sent_verbatim(self) -> None:
        assert authorization_header("lin_api_abc") == "lin_api_abc"

    def test_other_tokens_are_bearer(self) -> None:
        assert authorization_header("oauth-token") == "Bearer oauth-token"

    def test_request_shape(self, client: GraphQLClient, fake_linear: FakeLinear) -> None:
        fake_linear.queue({"viewer": user_node()})
        client.execute(user_ops.VIEWER)
        request = fake_linear.requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://linear.test/graphql"
        assert request.headers["Authorization"] == TEST_TOKEN
        assert request.headers["Content-Type"] == "application/json"
        assert fake_linear.graphql_requests[0] == {"query": user_ops.VIEWER.document, "variables": {}}


class TestEndpoint:
    def test_default(self) -> None:
        assert api_url_from_env({}) == LINEAR_API_URL

    def test_override(self) -> None:
        assert api_url_from_env({"LIN_API_URL": "http://localhost:9999/graphql"}) == "http://localhost:9999/graphql"


class TestExecute:
    def test_decodes_data(self, client: GraphQLClient, fake_linear: FakeLinear) -> None:
        fake_linear.queue({"issues": nodes(issue_node())})
        result = client.execute(issue_ops.ISSUES, {"first": 5})
        assert result.issues.nodes[0].identifier == "ENG-1"
        assert fake_linear.variables() == {"first": 5}

    def test_errors_with_valid_data_still_raise(self, client: GraphQLClient, fake_linear: FakeLinear) -> None:
        fake_linear.queue(
            {"viewer": user_node()},
            errors=[{"message": "Rate limited"}, {"message": "Field deprecated"}],
        )
        with pytest.raises(ApiError) as exc_info:
            client.execute(user_ops.VIEWER)
        assert exc_info.value.messages == ["Rate limited", "Field deprecated"]
        assert exc_info.value.message == "Rate limited; Field deprecated"
        assert exc_info.value.kind == "api"

    def test_errors_without_message(self, client: GraphQLClient, fake_linear: FakeLinear) -> None:
        fake_linear.queue(None, errors=[{"extensions": {"code": "X"}}])
        with pytest.raises(ApiError, match="Unknown GraphQL error"):
            client.execute(user_ops.VIEWER)

    def test_missing_data_is_decode_error(self, client: GraphQLClient, fake_linear: FakeLinear) -> None:
        fake_linear.queue(None)
        with pytest.raises(DecodeError, match="no data"):
            client.execute(user_ops.VIEWER)

    def test_shape_mismatch_is_decode_error(self, client: GraphQLClient, fake_linear: FakeLinear) -> None:
        fake_linear.queue({"viewer": {"id": "u1"}})
        with pytest.raises(DecodeError) as exc_info:
            client.execute(user_ops.VIEWER)
        assert exc_info.value.path == "data.viewer.name"

    def test_non_json_body(self, client: GraphQLClient, fake_linear: FakeLinear) -> None:
        fake_linear.queue_raw(200, b"<html>oops</html>")
        with pytest.raises(DecodeError, match="not valid JSON"):
            client.execute(user_ops.VIEWER)

    def test_non_object_envelope(self, client: GraphQLClient, fake_linear: FakeLinear) -> None:
        fake_linear.queue_raw(200, b"[1, 2]")
        with pytest.raises(DecodeError, match="JSON object"):
            client.execute(user_ops.VIEWER)

    def test_http_status_error(self, client: GraphQLClient, fake_linear: FakeLinear) -> None:
        fake_linear.queue_raw(401, b"Authentication required")
        with pytest.raises(HttpStatusError) as exc_info:
            client.execute(user_ops.VIEWER)
        assert exc_info.value.status_code == 401
        assert exc_info.value.body == "Authentication required"
        assert exc_info.value.kind == "transport"
        assert isinstance(exc_info.value, TransportError)

    def test_variables_checked_before_sending(self, client: GraphQLClient, fake_linear: FakeLinear) -> None:
        with pytest.raises(VariablesError):
            client.execute(issue_ops.ISSUE, {})
        assert fake_linear.requests == []


class TestNetworkErrors:
    def _client(self, exc: Exception) -> GraphQLClient:
        def handler(request: httpx.Request) -> httpx.Response:
            raise exc

        return GraphQLClient(TEST_TOKEN, transport=httpx.MockTransport(handler))

    def test_connect_error(self) -> None:
        with self._client(httpx.ConnectError("refused")) as client, pytest.raises(NetworkError, match="request failed"):
            client.execute(user_ops.VIEWER)

    def test_timeout(self) -> None:
        with self._client(httpx.ReadTimeout("slow")) as client, pytest.raises(NetworkError, match="timed out"):
            client.execute(user_ops.VIEWER)


class TestPutFile:
    def test_upload_omits_api_token(self, client: GraphQLClient, fake_linear: FakeLinear) -> None:
        fake_linear.queue_raw(200)
        client.put_file("https://uploads.test/put", b"bytes", {"Content-Type": "image/png"})
        request = fake_linear.requests[0]
        assert request.method == "PUT"
        assert request.content == b"bytes"
        assert request.headers["Content-Type"] == "image/png"
        assert "Authorization" not in request.headers

    def test_upload_failure(self, client: GraphQLClient, fake_linear: FakeLinear) -> None:
        fake_linear.queue_raw(403, b"denied")
        with pytest.raises(HttpStatusError):
            client.put_file("https://uploads.test/put", b"bytes", {})
