"""Connectivity probes."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from locationbook.config.http_resilience import NO_RETRY, ResilienceConfig

from .http_resilience import default_client_factory

if TYPE_CHECKING:
    from locationbook.config.catalog import ConnectivityConfig

    from .http_resilience import ClientFactory

log = getLogger(__name__)


class HttpConnectivityProbe:
    """Report reachability by sending a single ``HEAD`` to a probe URL.

    Any HTTP status counts as reachable; only transport failures (DNS, refused
    connections, timeouts) and an unusable probe URL are reported as offline.
    """

    def __init__(
        self,
        *,
        config: ConnectivityConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config
        self._resilience = ResilienceConfig(
            name="connectivity",
            timeout_seconds=config.timeout_seconds,
            retry=NO_RETRY,
        )
        self._client_factory = client_factory or default_client_factory

    async def is_connected(self) -> bool:
        try:
            async with self._client_factory(self._resilience) as client:
                await client.head(self._config.probe_url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            log.debug("Connectivity probe to %s failed: %s", self._config.probe_url, exc)
            return False
        return True


@dataclass(slots=True)
class StaticConnectivityProbe:
    """Probe with a fixed answer, for forced offline mode."""

    connected: bool = True

    async def is_connected(self) -> bool:
        return self.connected
