# src/taskboard/remote/http_client.py

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..core.ports import TaskJSON
from ..tasks.errors import RemoteFailure

logger = logging.getLogger(__name__)

TASKS_PATH = "/api/tasks"


def _make_timeout(seconds: float | None) -> httpx.Timeout:
    """
    Build the client timeout.

    None or <= 0 disables it: a stalled call then stays pending.
    """
    if seconds is None or seconds <= 0:
        return httpx.Timeout(None)
    return httpx.Timeout(seconds)


class HttpTaskService:
    """
    TaskService over the REST contract:

        GET    /api/tasks        -> [Task]
        POST   /api/tasks        -> Task
        PUT    /api/tasks/{id}   -> Task
        DELETE /api/tasks/{id}   -> no content

    Any transport error or non-2xx status becomes RemoteFailure.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=_make_timeout(timeout_seconds),
            transport=transport,
            headers={"Accept": "application/json"},
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HttpTaskService:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ---- low-level ----

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        json: TaskJSON | None = None,
    ) -> httpx.Response:
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.TimeoutException as e:
            raise RemoteFailure(operation, f"request timed out: {method} {path}") from e
        except httpx.HTTPError as e:
            raise RemoteFailure(operation, f"request failed: {e}") from e

        if not response.is_success:
            raise RemoteFailure(
                operation,
                f"{method} {path} returned {response.reason_phrase or 'error'}",
                status_code=response.status_code,
            )

        logger.debug("%s %s -> %s", method, path, response.status_code)
        return response

    @staticmethod
    def _decode(operation: str, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise RemoteFailure(operation, "response is not valid JSON", status_code=response.status_code) from e

    def _decode_task(self, operation: str, response: httpx.Response) -> TaskJSON:
        body = self._decode(operation, response)
        if not isinstance(body, dict):
            raise RemoteFailure(
                operation,
                f"expected a task object, got {type(body).__name__}",
                status_code=response.status_code,
            )
        return body

    @staticmethod
    def _item_path(task_id: str | int) -> str:
        return f"{TASKS_PATH}/{task_id}"

    # ---- TaskService ----

    async def list_tasks(self) -> Any:
        response = await self._request("load", "GET", TASKS_PATH)
        if not response.content:
            return []
        return self._decode("load", response)

    async def create_task(self, payload: TaskJSON) -> TaskJSON:
        response = await self._request("add", "POST", TASKS_PATH, json=payload)
        return self._decode_task("add", response)

    async def update_task(self, task_id: str | int, payload: TaskJSON) -> TaskJSON:
        response = await self._request("toggle", "PUT", self._item_path(task_id), json=payload)
        return self._decode_task("toggle", response)

    async def delete_task(self, task_id: str | int) -> None:
        await self._request("remove", "DELETE", self._item_path(task_id))
