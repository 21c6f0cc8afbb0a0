"""Client delivering push notifications through the Expo push service."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from chapterhub.config import DEFAULT_EXPO_PUSH_URL
from chapterhub.domain.exceptions import PushDeliveryFailedError

logger = logging.getLogger(__name__)


def _extract_expo_error_details(body: Any) -> str | None:
    """Return a human readable description for an Expo error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, (bytes, str)):
        text = body.decode("utf-8", "replace") if isinstance(body, bytes) else body
        text = text.strip()
        if not text:
            return None
        try:
            body = json.loads(text)
        except json.JSONDecodeError:
            return text

    if not isinstance(body, dict):
        return str(body)

    errors = body.get("errors")
    if isinstance(errors, list):
        messages: list[str] = []
        for item in errors:
            if not isinstance(item, dict):
                continue
            code = item.get("code")
            message = item.get("message")
            if code and message:
                messages.append(f"{code}: {message}")
            elif message:
                messages.append(str(message))
        if messages:
            return "; ".join(messages)

    ticket = body.get("data")
    if isinstance(ticket, list):
        ticket = ticket[0] if ticket else None
    if isinstance(ticket, dict) and ticket.get("status") == "error":
        message = ticket.get("message") or "push ticket rejected"
        details = ticket.get("details")
        if isinstance(details, dict) and details.get("error"):
            return f"{details['error']}: {message}"
        return str(message)

    return None


class ExpoPushClient:
    """Send one push message per device token.

    Every failure is raised as :class:`PushDeliveryFailedError`; delivery
    receipts are not polled.
    """

    def __init__(
        self,
        *,
        url: str = DEFAULT_EXPO_PUSH_URL,
        access_token: str | None = None,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        headers = {"Accept": "application/json", "Content-Type": "application/json"}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        self._client = client or httpx.Client(timeout=timeout)
        self._headers = headers

    def send(
        self,
        token: str,
        title: str,
        body: str,
        *,
        data: dict[str, Any] | None = None,
    ) -> str | None:
        """Deliver a message to ``token`` and return the provider ticket id."""

        message: dict[str, Any] = {
            "to": token,
            "title": title,
            "body": body,
            "sound": "default",
        }
        if data:
            message["data"] = data

        try:
            response = self._client.post(self._url, json=message, headers=self._headers)
        except httpx.HTTPError as exc:
            msg = f"Push request failed: {exc}"
            raise PushDeliveryFailedError(msg) from exc

        if response.status_code >= 400:
            details = _extract_expo_error_details(response.content)
            msg = f"Expo push service responded with status {response.status_code}"
            if details:
                msg = f"{msg}: {details}"
            raise PushDeliveryFailedError(msg, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            msg = "Expo push service returned an unreadable response"
            raise PushDeliveryFailedError(msg, status_code=response.status_code) from exc

        details = _extract_expo_error_details(payload)
        if details:
            raise PushDeliveryFailedError(details, status_code=response.status_code)

        ticket = payload.get("data") if isinstance(payload, dict) else None
        if isinstance(ticket, list):
            ticket = ticket[0] if ticket else None
        ticket_id = ticket.get("id") if isinstance(ticket, dict) else None
        logger.debug("Push accepted by Expo with ticket %s", ticket_id)
        return ticket_id

    def close(self) -> None:
        self._client.close()


__all__ = ["ExpoPushClient"]
