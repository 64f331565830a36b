"""Discord webhook client."""

from __future__ import annotations

from http import HTTPStatus

import requests


class DiscordError(Exception):
    """Raised when a message cannot be delivered to the webhook."""


class DiscordClient:
    """Posts messages to a Discord webhook."""

    def __init__(self, webhook_url: str, timeout: float | None = 10.0) -> None:
        self.webhook_url = webhook_url
        self.timeout = timeout

    def send_message(self, message: str) -> None:
        """Post ``message`` as the webhook content; expects 204 No Content."""
        try:
            response = requests.post(
                self.webhook_url,
                json={"content": message},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise DiscordError(f"failed to send request: {exc}") from exc

        with response:
            if response.status_code != HTTPStatus.NO_CONTENT:
                raise DiscordError(
                    f"unexpected response status: {response.status_code}"
                )