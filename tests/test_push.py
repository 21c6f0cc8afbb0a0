"""Tests for the Expo push client."""

from __future__ import annotations

import json

import httpx
import pytest

from chapterhub.domain.exceptions import PushDeliveryFailedError
from chapterhub.infrastructure.notifications import ExpoPushClient

PUSH_URL = "https://push.example.test/send"


def _client(handler, **kwargs) -> ExpoPushClient:
    transport = httpx.MockTransport(handler)
    return ExpoPushClient(url=PUSH_URL, client=httpx.Client(transport=transport), **kwargs)


def test_send_posts_message_and_returns_ticket_id():
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"data": {"status": "ok", "id": "ticket-123"}})

    client = _client(handler, access_token="secret")

    ticket = client.send("ExponentPushToken[abc]", "Chapter meeting", "Starts soon", data={"eventId": "e1"})

    assert ticket == "ticket-123"
    assert str(requests[0].url) == PUSH_URL
    assert requests[0].headers["Authorization"] == "Bearer secret"
    assert json.loads(requests[0].content) == {
        "to": "ExponentPushToken[abc]",
        "title": "Chapter meeting",
        "body": "Starts soon",
        "sound": "default",
        "data": {"eventId": "e1"},
    }


def test_http_error_status_is_reported_with_details():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            400,
            json={"errors": [{"code": "VALIDATION_ERROR", "message": "bad token"}]},
        )

    with pytest.raises(PushDeliveryFailedError) as exc_info:
        _client(handler).send("bad", "t", "b")

    assert exc_info.value.status_code == 400
    assert "VALIDATION_ERROR: bad token" in str(exc_info.value)


def test_error_ticket_is_a_delivery_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "data": [
                    {
                        "status": "error",
                        "message": "not a registered push token",
                        "details": {"error": "DeviceNotRegistered"},
                    }
                ]
            },
        )

    with pytest.raises(PushDeliveryFailedError, match="DeviceNotRegistered"):
        _client(handler).send("ExponentPushToken[gone]", "t", "b")


def test_transport_errors_are_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(PushDeliveryFailedError, match="Push request failed"):
        _client(handler).send("ExponentPushToken[abc]", "t", "b")


def test_unreadable_response_is_a_delivery_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>gateway</html>")

    with pytest.raises(PushDeliveryFailedError, match="unreadable"):
        _client(handler).send("ExponentPushToken[abc]", "t", "b")
