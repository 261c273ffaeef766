import logging
import math

from domain.models.currency import Currency
from domain.models.exchange_rate import ConversionOutcome, ExchangeRateSource, Found, NotFound, RateTable
from infrastructure.cache.rate_cache import RateCache

logger = logging.getLogger(__name__)

DEFAULT_MAX_HOPS = 5


class ConversionService:
	"""Converts amounts using cached rates, hopping through hub currencies and
	canonical sources when the requested source has no usable quote.

	Each search state is ``(amount, from_currency, source, depth)``. A step
	either resolves the state (direct or reversed quote), moves to a hub
	currency on the canonical source, or retries the same pair on the
	canonical source. Hops consume ``depth``; a source without any cached
	table does not, but a repeated state always ends the search.
	"""

	def __init__(self, cache: RateCache, max_hops: int = DEFAULT_MAX_HOPS):
		self.cache = cache
		self.max_hops = max_hops

	def convert(
		self,
		amount: float,
		from_currency: Currency,
		to_currency: Currency,
		source: ExchangeRateSource,
		max_hops: int | None = None,
	) -> float | None:
		outcome = self.find(amount, from_currency, to_currency, source, max_hops)
		if isinstance(outcome, Found):
			if not math.isfinite(outcome.value):
				logger.warning(f'Conversion {from_currency} -> {to_currency} overflowed: {outcome.value}')
				return None
			return outcome.value
		logger.debug(f'No conversion {from_currency} -> {to_currency} via {source.name}: {outcome.reason}')
		return None

	def convert_minor_units(
		self,
		amount: int,
		from_currency: Currency,
		to_currency: Currency,
		source: ExchangeRateSource,
		max_hops: int | None = None,
	) -> int | None:
		try:
			float_amount = amount / 10**from_currency.decimals
		except OverflowError:
			logger.warning(f'Minor-unit amount in {from_currency} is too large to convert')
			return None
		converted = self.convert(float_amount, from_currency, to_currency, source, max_hops)
		if converted is None:
			return None
		scaled = converted * 10**to_currency.decimals
		if not math.isfinite(scaled):
			logger.warning(f'Converted amount in {to_currency} is too large to quantize')
			return None
		return int(scaled)

	def rate(
		self, from_currency: Currency, to_currency: Currency, source: ExchangeRateSource
	) -> float | None:
		return self.convert(1.0, from_currency, to_currency, source)

	def find(
		self,
		amount: float,
		from_currency: Currency,
		to_currency: Currency,
		source: ExchangeRateSource,
		max_hops: int | None = None,
	) -> ConversionOutcome:
		hop_limit = self.max_hops if max_hops is None else max_hops
		visited: set[tuple[Currency, ExchangeRateSource]] = set()
		depth = 0

		while True:
			if from_currency == to_currency:
				return Found(amount)
			if depth >= hop_limit:
				return NotFound(f'hop limit {hop_limit} reached')

			state = (from_currency, source)
			if state in visited:
				return NotFound(f'cycle at {from_currency} on {source.name}')
			visited.add(state)
			fallback = ExchangeRateSource.canonical_for(from_currency, to_currency)

			logger.debug(f'Converting {from_currency} to {to_currency} using {source.name} (hop {depth})')

			table = self.cache.get(source)
			if table is None:
				logger.debug(f'No rates cached for {source.name}, falling back to {fallback.name}')
				source = fallback
				continue

			rate = table.rate(from_currency, to_currency)
			if rate is not None:
				logger.debug('Found direct conversion')
				return Found(amount * rate)

			rate = table.rate(to_currency, from_currency)
			if rate is not None:
				logger.debug('Found reverse conversion')
				return Found(amount * (1.0 / rate))

			hub = self._first_hub(table, from_currency, source)
			if hub is not None:
				hub_currency, hub_rate = hub
				logger.debug(
					f'Found intermediate conversion to {hub_currency}, '
					f'trying {hub_currency} to {to_currency} using {fallback.name}'
				)
				amount = amount * hub_rate
				from_currency = hub_currency
			else:
				logger.debug(f'No usable rate on {source.name}, trying {fallback.name}')

			source = fallback
			depth += 1

	@staticmethod
	def _first_hub(
		table: RateTable, from_currency: Currency, source: ExchangeRateSource
	) -> tuple[Currency, float] | None:
		for hub_currency in source.main_currencies:
			rate = table.rate(from_currency, hub_currency)
			if rate is not None:
				return hub_currency, rate
		return None
