"""Share target adapters."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from dessert_clicker.domain.errors import SharingUnavailableError


class ShareTarget(Protocol):
    """Interface for handing shared text to an external mechanism."""

    async def send(self, text: str) -> None:
        """Deliver the text, raising SharingUnavailableError if it can't."""

    async def close(self) -> None:
        """Release any resources held by the target."""


@dataclass
class UnavailableShareTarget:
    """Share target used when no sharing mechanism is configured."""

    async def send(self, text: str) -> None:
        """Always report that sharing is unavailable."""
        raise SharingUnavailableError("No share target configured.")

    async def close(self) -> None:
        """Nothing to release."""


@dataclass
class HttpxWebhookShareTarget:
    """Share target that posts the text to a webhook with httpx."""

    webhook_url: str
    http_client: httpx.AsyncClient
    timeout: float = 10

    @classmethod
    def create(
        cls, webhook_url: str, timeout: float = 10
    ) -> "HttpxWebhookShareTarget":
        """Create a share target with a managed httpx session."""
        return cls(
            webhook_url=webhook_url,
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def send(self, text: str) -> None:
        """Post the text as JSON to the webhook."""
        try:
            response = await self.http_client.post(
                self.webhook_url, json={"text": text}, timeout=self.timeout
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise SharingUnavailableError(str(exc) or type(exc).__name__) from exc

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()
