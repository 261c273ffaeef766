import logging

from application.services.conversion_service import ConversionService
from application.services.currency_service import CurrencyService
from application.services.notifier import RatesUpdatedNotifier
from application.services.rate_service import ExchangeRateService
from config.settings import Settings
from infrastructure.cache.rate_cache import RateCache
from infrastructure.persistence.snapshot import SnapshotStore
from infrastructure.providers import RatesEndpointClient

logger = logging.getLogger(__name__)


class ServiceFactory:
	"""Wires the cache, endpoint client, snapshot store and services together.

	One factory per process; every service built here shares the same cache
	and notifier.
	"""

	def __init__(self, settings: Settings):
		self.settings = settings
		self.cache = RateCache()
		self.notifier = RatesUpdatedNotifier()
		self.client = RatesEndpointClient(settings.RATES_URL, timeout=settings.FETCH_TIMEOUT)
		self.store = SnapshotStore(settings.SNAPSHOT_PATH)

		self.rate_service = ExchangeRateService(
			cache=self.cache,
			client=self.client,
			store=self.store,
			notifier=self.notifier,
			timeout=settings.FETCH_TIMEOUT,
		)
		self.conversion_service = ConversionService(self.cache, max_hops=settings.MAX_HOPS)
		self.currency_service = CurrencyService()

	def hydrate(self) -> bool:
		"""Fill the cache from the persisted snapshot, if there is one."""
		loaded = self.rate_service.load()
		if loaded:
			logger.info(f'Loaded persisted exchange rates for {len(self.cache.sources())} sources')
		return loaded

	async def close(self) -> None:
		await self.client.close()
