import asyncio
import logging

from application.services.notifier import RatesUpdatedNotifier
from domain.exceptions.currency import MalformedPayloadError, PersistenceError, ProviderError
from domain.models.exchange_rate import ExchangeRateSource, RateTable
from infrastructure.cache.rate_cache import RateCache
from infrastructure.persistence.snapshot import SnapshotStore
from infrastructure.providers.payload import parse_payload
from infrastructure.providers.rates_endpoint import RatesEndpointClient

logger = logging.getLogger(__name__)


class ExchangeRateService:
    """Keeps the rate cache filled from the network, with the last good
    payload on disk as a fallback.

    Every failure here is recoverable: a failed fetch, parse or write is
    logged and reported as ``False`` while the cache keeps serving what it
    already has.
    """

    def __init__(
        self,
        cache: RateCache,
        client: RatesEndpointClient,
        store: SnapshotStore,
        notifier: RatesUpdatedNotifier | None = None,
        timeout: float = 15.0,
    ):
        self.cache = cache
        self.client = client
        self.store = store
        self.notifier = notifier or RatesUpdatedNotifier()
        self.timeout = timeout
        self._refresh_task: asyncio.Task | None = None

    def exchange_rates(self, source: ExchangeRateSource) -> RateTable | None:
        return self.cache.get(source)

    async def refresh(self) -> bool:
        try:
            raw = await asyncio.wait_for(self.client.fetch(), timeout=self.timeout)
        except ProviderError as e:
            logger.error(f"Error updating exchange rates: {e}")
            return False
        except asyncio.TimeoutError:
            logger.error(f"Error updating exchange rates: no response within {self.timeout}s")
            return False

        if not self.parse(raw):
            return False

        await asyncio.to_thread(self.persist, raw)
        await self.notifier.notify()
        return True

    @property
    def refresh_in_progress(self) -> bool:
        return self._refresh_task is not None and not self._refresh_task.done()

    def update_exchange_rates(self) -> asyncio.Task:
        """Schedule a background refresh, reusing the one already in flight."""
        if self._refresh_task is None or self._refresh_task.done():
            self._refresh_task = asyncio.create_task(self.refresh())
        return self._refresh_task

    def parse(self, raw: bytes) -> bool:
        try:
            tables = parse_payload(raw)
        except MalformedPayloadError as e:
            logger.error(f"Error parsing exchange rates: {e}")
            return False

        for source, table in tables.items():
            self.cache.set(source, table)
            logger.debug(f"Cached {len(table)} rates for {source.name}")

        logger.info(f"Parsed exchange rates for {len(tables)} sources")
        return True

    def persist(self, raw: bytes) -> bool:
        try:
            self.store.write(raw)
        except PersistenceError as e:
            logger.error(f"Failed to persist current exchange rates: {e}")
            return False
        return True

    def load(self) -> bool:
        if not self.store.exists():
            logger.info(f"No persisted exchange rates at {self.store.path}")
            return False
        try:
            raw = self.store.read()
        except PersistenceError as e:
            logger.error(f"Failed to load current exchange rates from disk: {e}")
            return False
        return self.parse(raw)
