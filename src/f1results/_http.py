"""HTTP access to the racing-data service.

The transport returns JSON rows or raises an :class:`F1ResultsError`
subclass; no httpx or JSON exception escapes it.
"""

from __future__ import annotations

from typing import Any

import httpx

from f1results.exceptions import (
    F1APIError,
    F1ConnectionError,
    F1TimeoutError,
)

DEFAULT_BASE_URL = "https://api.openf1.org/v1"
DEFAULT_TIMEOUT = 30.0

Rows = list[dict[str, Any]]


def _decode_rows(response: httpx.Response) -> Rows:
    """Turn a response into a list of rows, rejecting anything but a 2xx JSON body."""
    url = str(response.request.url)
    if not response.is_success:
        raise F1APIError(response.status_code, response.text, url=url)

    try:
        body = response.json()
    except ValueError as exc:
        raise F1APIError(
            response.status_code, f"response body is not JSON ({exc})", url=url,
        ) from exc

    # Single-record endpoints answer with a bare object
    if isinstance(body, dict):
        return [body]
    if isinstance(body, list):
        return body
    raise F1APIError(
        response.status_code,
        f"expected a JSON list or object, got {type(body).__name__}",
        url=url,
    )


class AsyncTransport:
    """GET-only access to the service over one pooled ``httpx.AsyncClient``."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(self, endpoint: str, params: list[tuple[str, str]]) -> Rows:
        """Fetch ``endpoint`` with equality filters and return its rows."""
        try:
            response = await self._client.get(endpoint, params=params)
        except httpx.TimeoutException as exc:
            raise F1TimeoutError(f"{endpoint} timed out: {exc}") from exc
        except httpx.RequestError as exc:
            # Connect, read, write and protocol failures alike
            raise F1ConnectionError(f"{endpoint} unreachable: {exc}") from exc
        return _decode_rows(response)

    async def close(self) -> None:
        await self._client.aclose()
