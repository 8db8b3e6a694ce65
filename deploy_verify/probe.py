"""Single-shot HTTP probe for checking a running service."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

import aiohttp
from multidict import CIMultiDict, CIMultiDictProxy

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class ProbeError(Exception):
    """Raised when a probe does not produce a response."""


class ProbeTimeoutError(ProbeError, TimeoutError):
    """Raised when no response completes within the probe timeout."""


class NetworkError(ProbeError):
    """Raised on connection-level failures (DNS, refused connection)."""


@dataclass(frozen=True, kw_only=True)
class ProbeResponse:
    """Fully buffered response of a probe.

    Header lookups are case-insensitive.
    """

    status_code: int
    headers: Mapping[str, str]
    body: str

    @property
    def success(self) -> bool:
        """Whether the status is in the 2xx-3xx range."""
        return 200 <= self.status_code < 400


class Probe(Protocol):
    """Protocol for probe functions."""

    async def __call__(
        self,
        url: str,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        body: str | bytes | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> ProbeResponse:
        """Issue the request and return the buffered response."""


async def probe(
    url: str,
    *,
    method: str = "GET",
    headers: Mapping[str, str] | None = None,
    body: str | bytes | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> ProbeResponse:
    """Issue a single HTTP request and buffer the response.

    A new session is opened for every call and redirects are not followed,
    so callers see the status the server actually returned.

    Args:
        url: Absolute URL; the scheme selects plain or TLS transport
        method: HTTP method
        headers: Request headers
        body: Optional request body
        timeout: Seconds allowed for the whole request, body included

    Returns:
        The buffered response

    Raises:
        ProbeTimeoutError: If the response does not complete within timeout
        NetworkError: If the connection cannot be established

    """
    log.debug("Probing %s %s (timeout=%.1fs)", method, url, timeout)
    try:
        async with aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=timeout)
        ) as session:
            async with session.request(
                method,
                url,
                headers=dict(headers or {}),
                data=body,
                allow_redirects=False,
            ) as response:
                text = await response.text(errors="replace")
                return ProbeResponse(
                    status_code=response.status,
                    headers=CIMultiDictProxy(CIMultiDict(response.headers)),
                    body=text,
                )
    except TimeoutError as exc:
        raise ProbeTimeoutError("Request timeout") from exc
    except aiohttp.ClientError as exc:
        raise NetworkError(f"Request to {url} failed: {exc}") from exc
