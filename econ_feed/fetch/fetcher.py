"""
HTTP page fetching for article extraction.

Pages are requested with a desktop-browser identity and a Korean locale
preference; several Korean portals serve reduced or blocked pages otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from ..config import FetchConfig
from ..errors import FetchError


@dataclass
class FetchResult:
    """Result of a successful HTTP fetch.

    Attributes:
        url: The final URL after redirects
        status_code: HTTP status code
        text: The decoded response body
    """

    url: str
    status_code: int
    text: str


def build_headers(cfg: FetchConfig) -> dict[str, str]:
    return {
        "User-Agent": cfg.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
        "Accept-Language": cfg.accept_language,
        "Accept-Encoding": "gzip, deflate",
        "Connection": "keep-alive",
        "Upgrade-Insecure-Requests": "1",
    }


async def fetch_page(
    url: str,
    cfg: FetchConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FetchResult:
    """Fetch an article page.

    Args:
        url: The URL to fetch
        cfg: Fetch settings (timeout, redirect limit, headers)
        transport: Optional httpx transport, used to stub the network in tests

    Returns:
        FetchResult with the decoded body

    Raises:
        FetchError: On timeout, connection failure, too many redirects or an
            HTTP error status
    """
    try:
        async with httpx.AsyncClient(
            timeout=cfg.timeout_seconds,
            headers=build_headers(cfg),
            follow_redirects=True,
            max_redirects=cfg.max_redirects,
            trust_env=cfg.trust_env,
            transport=transport,
        ) as client:
            resp = await client.get(url)
            resp.raise_for_status()
            return FetchResult(url=str(resp.url), status_code=resp.status_code, text=resp.text)
    except httpx.TimeoutException as exc:
        raise FetchError(url, f"timeout of {cfg.timeout_seconds:g}s exceeded") from exc
    except httpx.HTTPStatusError as exc:
        raise FetchError(
            url,
            f"Request failed with status code {exc.response.status_code}",
            status_code=exc.response.status_code,
        ) from exc
    except httpx.HTTPError as exc:
        raise FetchError(url, f"{type(exc).__name__}: {exc}") from exc
