from functools import lru_cache
from typing import Any, TypeVar

import httpx
from fastapi import HTTPException, status
from pydantic import TypeAdapter, ValidationError

from groupie.log import get_logger
from groupie.models.errors import DecodeError, TransportError

_log = get_logger(__name__)

T = TypeVar("T")

_client: "UpstreamClient | None" = None


@lru_cache
def _adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


class UpstreamClient:
    """Reads JSON documents from the upstream API."""

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def fetch(self, url: str, shape: type[T]) -> T:
        """
        GET ``url`` and decode the body into ``shape``.

        ``shape`` is anything pydantic can build a TypeAdapter for, e.g.
        ``list[Artist]`` or ``Relation``. Unknown fields in the body are
        ignored and missing optional fields take the model defaults.

        Raises
        ------
        TransportError
            Connection, DNS or timeout failure, or a non-2xx status.
        DecodeError
            Body is not JSON or does not match ``shape``.
        """
        _log.debug(f"GET {url}")

        try:
            async with self._http.stream("GET", url) as response:
                if not response.is_success:
                    _log.warning(f"GET {url} answered {response.status_code}")
                    raise TransportError(
                        f"Upstream answered {response.status_code}",
                        url,
                        status_code=response.status_code,
                    )
                body = await response.aread()
        except httpx.HTTPError as e:
            _log.warning(f"GET {url} failed: {e!r}")
            raise TransportError(f"Upstream unreachable: {e}", url) from e

        try:
            return _adapter(shape).validate_json(body)
        except ValidationError as e:
            _log.warning(f"GET {url} returned an unexpected body: {e.error_count()} errors")
            raise DecodeError("Upstream returned an unexpected body", url) from e

    async def aclose(self) -> None:
        await self._http.aclose()


def setup_upstream(timeout: float = 5.0) -> UpstreamClient:
    global _client

    if _client:
        _log.debug("Upstream client already initialized, returning existing instance")
        return _client

    _log.info("Setting up upstream HTTP client")

    _client = UpstreamClient(
        httpx.AsyncClient(timeout=httpx.Timeout(timeout), follow_redirects=True)
    )

    return _client


async def close_upstream() -> None:
    global _client

    if _client is None:
        return

    await _client.aclose()
    _client = None


def with_upstream() -> UpstreamClient:
    if _client is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Upstream Connection Error",
        )

    return _client
