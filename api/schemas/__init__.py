from .responses import (
	ConversionResponse,
	ExchangeRateEntry,
	HealthResponse,
	MinorUnitConversionResponse,
	RateTableResponse,
	RefreshResponse,
	SourceInfo,
	SourcesResponse,
	SupportedCurrenciesResponse,
)

__all__ = [
	'ConversionResponse',
	'ExchangeRateEntry',
	'HealthResponse',
	'MinorUnitConversionResponse',
	'RateTableResponse',
	'RefreshResponse',
	'SourceInfo',
	'SourcesResponse',
	'SupportedCurrenciesResponse',
]
