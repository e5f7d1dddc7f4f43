"""HTTP client for the dashboard classes API."""

import logging
from typing import Any, Optional

import httpx

from .base import BaseClassClient, EnrollmentStatus, Outcome
from .exceptions import ClassApiError
from ..config import config

logger = logging.getLogger(__name__)


class ClassesClient(BaseClassClient):
    """
    Client for the `/classes` endpoints of the dashboard API.

    Error responses are normalised to `Outcome(success=False, error=...)`
    using the server's `error` or `message` field when present.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        base_url = base_url or config.api.base_url
        self.endpoint = f"{base_url.rstrip('/')}/classes"
        self.client = httpx.AsyncClient(
            timeout=timeout if timeout is not None else config.api.timeout,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )

    async def register_membership(self, user_id: str, class_id: str) -> Outcome:
        response = await self._request(
            "register",
            "POST",
            f"{self.endpoint}/register",
            json={"userId": user_id, "classId": class_id},
        )
        if response.is_success:
            return Outcome.ok()
        return Outcome.failed(self._error_message(response, "register"))

    async def unregister_membership(self, user_id: str, class_id: str) -> Outcome:
        response = await self._request(
            "unregister",
            "DELETE",
            f"{self.endpoint}/unregister",
            json={"userId": user_id, "classId": class_id},
        )
        if response.is_success:
            return Outcome.ok()
        return Outcome.failed(self._error_message(response, "unregister"))

    async def delete_resource(self, class_id: str) -> Outcome:
        response = await self._request(
            "delete class",
            "DELETE",
            f"{self.endpoint}/{class_id}",
        )
        if not response.is_success:
            return Outcome.failed(self._error_message(response, "delete class"))

        if not self._json(response).get("success"):
            return Outcome.failed("Invalid response: expected success confirmation")
        return Outcome.ok()

    async def update_enrollment_status(
        self,
        class_id: str,
        user_id: str,
        status: EnrollmentStatus,
    ) -> Outcome:
        response = await self._request(
            "update enrollment status",
            "PUT",
            f"{self.endpoint}/enrollment-status",
            json={"userId": user_id, "classId": class_id, "status": status.value},
        )
        if response.is_success:
            return Outcome.ok()
        return Outcome.failed(
            self._error_message(response, "update enrollment status")
        )

    async def aclose(self):
        await self.client.aclose()

    async def _request(
        self,
        operation: str,
        method: str,
        url: str,
        json: Optional[dict] = None,
    ) -> httpx.Response:
        """Send a request, turning transport failures into ClassApiError."""
        logger.debug("%s %s", method, url)
        try:
            # httpx.delete() takes no body, so go through request()
            return await self.client.request(method, url, json=json)
        except httpx.TransportError as e:
            raise ClassApiError(
                operation=operation,
                message=str(e) or e.__class__.__name__,
                url=url,
            ) from e

    @staticmethod
    def _json(response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    def _error_message(self, response: httpx.Response, verb: str) -> str:
        data = self._json(response)
        message = data.get("error") or data.get("message")
        if message:
            return str(message)
        return f"Failed to {verb}: {response.status_code} {response.reason_phrase}"
