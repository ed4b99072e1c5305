"""
HEMI - Async Live Data Fetcher

Only module in hemi that performs network I/O.
FRED for observation-shape series, Financial Modeling Prep for
historical closing prices.
"""

from __future__ import annotations

import asyncio
import logging
import math
from datetime import date
from typing import Any
from urllib.parse import quote, urlencode

import aiohttp

from hemi.config import LiveSourceConfig
from hemi.errors import (
    MalformedSeriesError,
    NetworkError,
    UpstreamAuthError,
    UpstreamRequestError,
)
from hemi.types import (
    HistoricalPoint,
    HistoricalSeries,
    ObservationPoint,
    ObservationSeries,
    RawSeries,
    Role,
)

logger = logging.getLogger(__name__)

MISSING_VALUE = "."


class LiveSeriesFetcher:
    """
    Async fetcher for all five HEMI series.

    Issues one request per role concurrently and waits for all of them.
    Any failure fails the whole fetch; partial data is never returned.
    """

    def __init__(
        self,
        config: LiveSourceConfig | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.config = config or LiveSourceConfig()
        self._session = session

    async def fetch(self, as_of_date: date | None = None) -> dict[Role, RawSeries]:
        """
        Fetch all raw series for the trailing window ending at as_of_date.

        Args:
            as_of_date: Last day of the window (default: today).

        Returns:
            Mapping of role -> raw series, all five roles present.

        Raises:
            UpstreamAuthError, UpstreamRequestError, NetworkError,
            MalformedSeriesError: first failure in role order.
        """
        as_of_date = as_of_date or date.today()
        start = _years_before(as_of_date, self.config.lookback_years).isoformat()
        end = as_of_date.isoformat()
        urls = self.build_urls(start, end)

        if self._session is not None:
            payloads = await self._gather(self._session, urls)
        else:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout_seconds)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                payloads = await self._gather(session, urls)

        series: dict[Role, RawSeries] = {}
        for role in Role:
            if role in self.config.fred_series:
                series[role] = parse_observation_payload(role, payloads[role])
            else:
                series[role] = parse_historical_payload(role, payloads[role])
        logger.info(f"Fetched {len(series)} live series ({start} to {end})")
        return series

    def build_urls(self, start: str, end: str) -> dict[Role, str]:
        """Full request URL per role, wrapped in the proxy prefix when configured."""
        urls: dict[Role, str] = {}
        for role in Role:
            if role in self.config.fred_series:
                query = urlencode(
                    {
                        "api_key": self.config.fred_api_key,
                        "file_type": "json",
                        "series_id": self.config.fred_series[role],
                        "observation_start": start,
                        "observation_end": end,
                    }
                )
                url = f"{self.config.fred_base_url}?{query}"
            else:
                symbol = quote(self.config.fmp_symbols[role], safe="")
                query = urlencode(
                    {"from": start, "to": end, "apikey": self.config.fmp_api_key}
                )
                url = f"{self.config.fmp_base_url}/{symbol}?{query}"

            if self.config.proxy_url:
                url = f"{self.config.proxy_url}{quote(url, safe='')}"
            urls[role] = url
        return urls

    async def _gather(
        self, session: aiohttp.ClientSession, urls: dict[Role, str]
    ) -> dict[Role, Any]:
        roles = list(urls)
        results = await asyncio.gather(
            *(self._get_json(session, role, urls[role]) for role in roles),
            return_exceptions=True,
        )

        for role, result in zip(roles, results):
            if isinstance(result, BaseException):
                logger.error(f"Live fetch failed for {role.value}: {result}")
                raise result
        return dict(zip(roles, results))

    async def _get_json(
        self, session: aiohttp.ClientSession, role: Role, url: str
    ) -> Any:
        """GET one URL and decode JSON, mapping failures onto HEMI errors."""
        try:
            async with session.get(url) as resp:
                if resp.status in (401, 403):
                    raise UpstreamAuthError(resp.status)
                if resp.status < 200 or resp.status >= 300:
                    body = await resp.text()
                    raise UpstreamRequestError(resp.status, body)
                return await resp.json(content_type=None)
        except (aiohttp.ClientConnectionError, asyncio.TimeoutError) as exc:
            raise NetworkError(f"{role.value}: {exc}") from exc
        except aiohttp.ClientResponseError as exc:
            raise UpstreamRequestError(exc.status, exc.message) from exc
        except aiohttp.ClientError as exc:
            # str(exc) may carry the request URL and its API key
            raise NetworkError(f"{role.value}: {type(exc).__name__}") from exc
        except ValueError as exc:
            raise MalformedSeriesError(role, f"response is not JSON ({exc})") from exc


def parse_observation_payload(role: Role, payload: Any) -> ObservationSeries:
    """
    Parse a FRED-style {"observations": [{date, value}]} payload.

    The "." missing-data marker and unparseable or non-finite values
    become None here so nothing downstream has to know about the sentinel.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("observations"), list):
        raise MalformedSeriesError(role, "missing 'observations' list")

    points = []
    for o in payload["observations"]:
        raw = o.get("value", MISSING_VALUE)
        value = None
        if raw != MISSING_VALUE:
            try:
                value = float(raw)
            except (ValueError, TypeError):
                value = None
            if value is not None and not math.isfinite(value):
                value = None
        points.append(ObservationPoint(date=o.get("date", ""), value=value))
    return ObservationSeries(role=role, points=tuple(points))


def parse_historical_payload(role: Role, payload: Any) -> HistoricalSeries:
    """Parse an FMP-style {"historical": [{date, close}]} payload (newest first)."""
    if not isinstance(payload, dict) or not isinstance(payload.get("historical"), list):
        raise MalformedSeriesError(role, "missing 'historical' list")

    try:
        points = tuple(
            HistoricalPoint(date=h["date"], close=float(h["close"]))
            for h in payload["historical"]
        )
    except (KeyError, ValueError, TypeError) as exc:
        raise MalformedSeriesError(role, f"bad historical entry ({exc})") from exc

    if not all(math.isfinite(p.close) for p in points):
        raise MalformedSeriesError(role, "non-finite closing price")
    return HistoricalSeries(role=role, points=points)


def _years_before(d: date, years: int) -> date:
    try:
        return d.replace(year=d.year - years)
    except ValueError:
        # Feb 29 -> Feb 28
        return d.replace(year=d.year - years, day=28)
