"""
Async HTTP client for the contacts API.
"""

from __future__ import annotations

from typing import Any

import httpx

from contactbook.contacts.schemas import (
    ContactCreated,
    ContactListResponse,
    HealthResponse,
)
from contactbook.shared.logging import get_logger

logger = get_logger(__name__)


class ApiError(Exception):
    """A non-2xx response (or transport failure) from the contacts API."""

    def __init__(self, message: str | None, status_code: int | None = None) -> None:
        super().__init__(message or "Request failed")
        self.message = message
        self.status_code = status_code


class ContactApiClient:
    """Thin wrapper over ``httpx.AsyncClient`` for the contacts endpoints.

    Either pass a ready ``client`` (tests hand in one bound to an
    ``ASGITransport``) or a ``base_url`` and let this class own the client.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url)

    async def __aenter__(self) -> "ContactApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning(
                "Contacts API unreachable",
                extra={"method": method, "url": url, "error": str(exc)},
            )
            raise ApiError(None) from exc

        if response.is_error:
            raise ApiError(_error_message(response), status_code=response.status_code)
        return response

    async def create_contact(self, name: str, email: str, phone: str) -> ContactCreated:
        response = await self._request(
            "POST",
            "/api/contacts",
            json={"name": name, "email": email, "phone": phone},
        )
        return ContactCreated.model_validate(response.json())

    async def list_contacts(self, page: int = 1, limit: int = 10) -> ContactListResponse:
        response = await self._request(
            "GET",
            "/api/contacts",
            params={"page": page, "limit": limit},
        )
        return ContactListResponse.model_validate(response.json())

    async def delete_contact(self, contact_id: int) -> None:
        await self._request("DELETE", f"/api/contacts/{contact_id}")

    async def health(self) -> HealthResponse:
        response = await self._request("GET", "/api/health")
        return HealthResponse.model_validate(response.json())


def _error_message(response: httpx.Response) -> str | None:
    """Pull the ``error`` field out of a JSON error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return None
