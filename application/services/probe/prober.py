from __future__ import annotations

import time
from typing import Any, Optional

import httpx

from core.logging.logger import StructuredLogger, get_logger
from domain.entities import ProbeOutcome
from domain.enums import SearchStatus
from .retry_policy import RetryPolicy

SEARCH_PARAM = "wd"


class UnhealthyStatus(Exception):
    """Raised inside the retry loop for non-2xx responses."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"http {status_code}")
        self.status_code = status_code


def is_retryable(exc: BaseException) -> bool:
    return isinstance(exc, (httpx.HTTPError, UnhealthyStatus))


class Prober:
    """Health check for one endpoint: reachability, then optional search.

    Network problems never escape ``probe``; they become negative
    outcome fields.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        retry: RetryPolicy,
        *,
        timeout_ms: int = 10_000,
        logger: Optional[StructuredLogger] = None,
    ) -> None:
        self.client = client
        self.retry = retry
        self.timeout = httpx.Timeout(timeout_ms / 1000.0)
        self.logger = logger or get_logger(__name__, service="prober")

    async def probe(self, endpoint_url: str, keyword: Optional[str] = None) -> ProbeOutcome:
        """Probe ``endpoint_url``; the search check runs only with a keyword."""
        start = time.perf_counter()
        reachable = await self.check_reachable(endpoint_url)
        if not reachable:
            search = SearchStatus.NOT_TESTED
        elif keyword:
            search = await self.check_search(endpoint_url, keyword)
        else:
            search = SearchStatus.NOT_TESTED
        latency_ms = int((time.perf_counter() - start) * 1000.0)
        if reachable:
            self.logger.success(
                lambda: "probe-ok",
                extra={"api": endpoint_url, "latency": latency_ms, "status": search.name},
            )
        else:
            self.logger.warning(lambda: "probe-down", extra={"api": endpoint_url, "latency": latency_ms})
        return ProbeOutcome(endpoint_url=endpoint_url, reachable=reachable, search_status=search)

    async def check_reachable(self, endpoint_url: str) -> bool:
        try:
            await self.retry.run(
                lambda: self._get(endpoint_url),
                is_retryable=is_retryable,
                logger=self.logger,
                context={"api": endpoint_url},
            )
            return True
        except (httpx.HTTPError, UnhealthyStatus) as e:
            self.logger.debug(lambda: "reachability-exhausted", extra={"api": endpoint_url, "error": str(e)})
            return False

    async def check_search(self, endpoint_url: str, keyword: str) -> SearchStatus:
        """Query the endpoint with ``keyword`` and classify the result list."""
        # Keep any query the endpoint already carries (e.g. ?ac=list).
        search_url = httpx.URL(endpoint_url).copy_merge_params({SEARCH_PARAM: keyword})
        try:
            resp: httpx.Response = await self.retry.run(
                lambda: self._get(search_url),
                is_retryable=is_retryable,
                logger=self.logger,
                context={"api": endpoint_url},
            )
        except (httpx.HTTPError, UnhealthyStatus) as e:
            self.logger.debug(lambda: "search-exhausted", extra={"api": endpoint_url, "error": str(e)})
            return SearchStatus.FAILED
        return self._classify_search(endpoint_url, resp)

    def _classify_search(self, endpoint_url: str, resp: httpx.Response) -> SearchStatus:
        try:
            payload: Any = resp.json()
        except ValueError:
            self.logger.info(lambda: "search-bad-payload", extra={"api": endpoint_url, "error": "not json"})
            return SearchStatus.FAILED
        items = payload.get("list") if isinstance(payload, dict) else None
        if not isinstance(items, list):
            self.logger.info(lambda: "search-bad-payload", extra={"api": endpoint_url, "error": "no list"})
            return SearchStatus.FAILED
        if not items:
            self.logger.info(lambda: "search-no-results", extra={"api": endpoint_url})
            return SearchStatus.NO_RESULTS
        return SearchStatus.OK

    async def _get(self, url: str | httpx.URL) -> httpx.Response:
        resp = await self.client.get(url, timeout=self.timeout)
        if not resp.is_success:
            raise UnhealthyStatus(resp.status_code)
        return resp
