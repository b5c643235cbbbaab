"""Blocking GraphQL transport for the Linear API.

``GraphQLClient.execute`` is the single place that talks HTTP. It checks
variables against the operation, POSTs the document, unwraps the
``{data, errors}`` envelope and decodes ``data`` into a typed record.
Every failure surfaces as a ``LinError`` subclass; nothing is retried.
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Mapping
from typing import Any, TypeVar

import httpx

from lin.api.operations import Operation
from lin.errors import ApiError, DecodeError, HttpStatusError, LinError, NetworkError
from lin.models.base import decode

logger = logging.getLogger(__name__)

T = TypeVar("T")

LINEAR_API_URL = "https://api.linear.app/graphql"
DEFAULT_TIMEOUT = 30.0

# Personal API keys start with this prefix and go in the header verbatim;
# anything else is treated as an OAuth access token.
PERSONAL_KEY_PREFIX = "lin_api_"


def api_url_from_env(environ: Mapping[str, str] | None = None) -> str:
    env = os.environ if environ is None else environ
    return env.get("LIN_API_URL") or LINEAR_API_URL


def authorization_header(token: str) -> str:
    if token.startswith(PERSONAL_KEY_PREFIX):
        return token
    return f"Bearer {token}"


class GraphQLClient:
    """One authenticated connection to a GraphQL endpoint.

    Use as a context manager so the underlying ``httpx.Client`` is closed.
    ``transport`` exists for tests (``httpx.MockTransport``).
    """

    def __init__(
        self,
        token: str,
        url: str = LINEAR_API_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.url = url
        self._http = httpx.Client(
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": authorization_header(token),
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> GraphQLClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def execute(
        self,
        operation: Operation,
        variables: Mapping[str, Any] | None = None,
        response_type: type[T] | None = None,
    ) -> T:
        """Run *operation* and return ``data`` decoded into its response type.

        Raises:
            VariablesError: before sending, if variables don't match.
            NetworkError: timeout or connection failure.
            HttpStatusError: non-2xx response.
            ApiError: non-empty ``errors`` in the envelope, even if ``data`` is set.
            DecodeError: body not a JSON object, ``data`` missing, or shape mismatch.
        """
        payload = {"query": operation.document, "variables": operation.check_variables(variables)}
        op_type = "mutation" if operation.is_mutation else "query"
        t0 = time.monotonic()
        try:
            result = self._send(operation, payload, response_type or operation.response)
        except LinError as exc:
            duration_ms = round((time.monotonic() - t0) * 1000, 1)
            logger.warning(
                "graphql_request",
                extra={
                    "operation": operation.name,
                    "operation_type": op_type,
                    "duration_ms": duration_ms,
                    "status": exc.kind,
                    "error": exc.message,
                },
            )
            raise
        duration_ms = round((time.monotonic() - t0) * 1000, 1)
        logger.info(
            "graphql_request",
            extra={"operation": operation.name, "operation_type": op_type, "duration_ms": duration_ms, "status": "ok"},
        )
        return result

    def _send(self, operation: Operation, payload: dict[str, Any], response_type: Any) -> Any:
        try:
            response = self._http.post(self.url, json=payload)
        except httpx.TimeoutException as exc:
            raise NetworkError(f"{operation.name}: request timed out: {exc}") from exc
        except httpx.TransportError as exc:
            raise NetworkError(f"{operation.name}: request failed: {exc}") from exc

        if not response.is_success:
            raise HttpStatusError(response.status_code, response.text, response.reason_phrase)

        try:
            body = response.json()
        except ValueError as exc:
            raise DecodeError(f"response is not valid JSON: {exc}") from exc
        if not isinstance(body, dict):
            raise DecodeError(f"expected a JSON object envelope, got {type(body).__name__}")

        errors = body.get("errors")
        if errors:
            raise ApiError(_error_messages(errors), errors if isinstance(errors, list) else None)

        data = body.get("data")
        if data is None:
            raise DecodeError("GraphQL response contained no data")
        return decode(response_type, data)

    def put_file(self, url: str, content: bytes, headers: Mapping[str, str]) -> None:
        """PUT *content* to a presigned storage URL.

        The request is built by hand so the client's default headers (the
        API token in particular) are not sent to the storage host.
        """
        request = httpx.Request(
            "PUT",
            url,
            content=content,
            headers=dict(headers),
            extensions={"timeout": self._http.timeout.as_dict()},
        )
        t0 = time.monotonic()
        try:
            response = self._http.send(request)
        except httpx.TransportError as exc:
            raise NetworkError(f"File upload failed: {exc}") from exc
        duration_ms = round((time.monotonic() - t0) * 1000, 1)
        logger.info(
            "file_upload",
            extra={"operation": "upload", "duration_ms": duration_ms, "status": response.status_code},
        )
        if not response.is_success:
            raise HttpStatusError(response.status_code, response.text, response.reason_phrase)


def _error_messages(errors: Any) -> list[str]:
    if not isinstance(errors, list):
        return [str(errors)]
    messages = []
    for err in errors:
        if isinstance(err, dict):
            messages.append(str(err.get("message", "Unknown GraphQL error")))
        else:
            messages.append(str(err))
    return messages
