from domain.exceptions.currency import InvalidCurrencyError, UnknownSourceError
from domain.models import currency as registry
from domain.models.currency import Currency
from domain.models.exchange_rate import ExchangeRateSource


class CurrencyService:
	"""Resolves request-level codes and source ids against the static registry."""

	def __init__(self, allow_unknown: bool = False):
		self.allow_unknown = allow_unknown

	def get_supported_currencies(self) -> list[str]:
		return registry.supported_codes()

	def resolve_currency(self, code: str) -> Currency:
		if not code or not code.strip().isalnum():
			raise InvalidCurrencyError(f'Invalid currency code: {code!r}')
		if not self.allow_unknown and not registry.is_known(code):
			raise InvalidCurrencyError(f'Currency {code.upper()} is not supported')
		return registry.lookup(code)

	def resolve_source(self, source_id: int) -> ExchangeRateSource:
		try:
			return ExchangeRateSource(source_id)
		except ValueError as e:
			raise UnknownSourceError(f'Unknown exchange rate source: {source_id}') from e

	def list_sources(self) -> list[ExchangeRateSource]:
		return list(ExchangeRateSource)
