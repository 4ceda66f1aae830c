"""Periodic refresh of the documentation snapshot from the remote service.

A refresh fetches the configured endpoint, parses the body, builds a new
snapshot off to the side and only then swaps it into the store and writes the
cache file. Any failure leaves the live snapshot untouched; the next tick
simply tries again.
"""

import asyncio
import logging

import httpx

from docbot.cache import SnapshotCache
from docbot.config import DocbotConfig
from docbot.errors import FetchError, ParseError
from docbot.store import DocStore, Snapshot, load

logger = logging.getLogger(__name__)


class RefreshLoop:
    """Background task keeping a DocStore in sync with the remote endpoint."""

    def __init__(
        self,
        config: DocbotConfig,
        store: DocStore,
        cache: SnapshotCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the refresh loop.

        Args:
            config: Endpoint, module and interval settings.
            store: Store whose snapshot is replaced on each successful refresh.
            cache: Cache file to overwrite after a successful refresh.
            transport: Optional httpx transport (used by tests).
        """
        self.config = config
        self.store = store
        self.cache = cache
        self._transport = transport

    async def fetch(self) -> str:
        """Fetch the raw documentation payload.

        Returns:
            Response body text.

        Raises:
            FetchError: On transport errors or a non-2xx response.
        """
        try:
            url = self.config.endpoint_url
        except (KeyError, IndexError, AttributeError, ValueError) as e:
            raise FetchError(
                f"Invalid documentation endpoint template {self.config.doc_endpoint_template!r}: {e!r}"
            ) from e

        try:
            async with httpx.AsyncClient(transport=self._transport, follow_redirects=True) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"Documentation endpoint returned {e.response.status_code} for {url}"
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Failed to fetch documentation from {url}: {e}") from e

    async def refresh_once(self) -> bool:
        """Fetch, parse and install a new snapshot.

        Returns:
            True if the store now holds the freshly fetched snapshot, False if
            the refresh failed and the previous snapshot was kept.
        """
        try:
            raw = await self.fetch()
            snapshot = Snapshot(load(raw))
        except (FetchError, ParseError) as e:
            logger.warning(f"Documentation refresh failed, keeping previous snapshot: {e}")
            return False

        self.store.replace(snapshot)
        logger.info(f"Fetched docs: {len(snapshot)} entities, {len(snapshot.members)} members")

        if self.cache is not None:
            try:
                self.cache.write(raw)
            except OSError as e:
                # The in-memory snapshot is already current
                logger.warning(f"Could not persist documentation cache: {e}")

        return True

    async def _tick(self) -> None:
        try:
            await self.refresh_once()
        except Exception:
            logger.exception("Unexpected error during documentation refresh, keeping previous snapshot")

    async def run(self) -> None:
        """Refresh on a fixed interval until cancelled."""
        if self.config.eager_fetch:
            await self._tick()

        while True:
            await asyncio.sleep(self.config.refresh_interval_seconds)
            await self._tick()

    def start(self) -> asyncio.Task:
        """Schedule the loop on the running event loop."""
        logger.info(
            f"Starting documentation refresh every {self.config.refresh_interval_seconds:g}s "
            f"from {self.config.doc_endpoint_template} (module {self.config.module})"
        )
        return asyncio.create_task(self.run())
