from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ConversionResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	original_amount: float = Field(..., description='Original amount requested')
	converted_amount: float = Field(..., description='Converted amount')
	source: int = Field(..., description='Preferred exchange rate source id')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'from_currency': 'USD',
				'to_currency': 'EUR',
				'original_amount': 100.00,
				'converted_amount': 90.00,
				'source': 3,
			}
		}
	)


class MinorUnitConversionResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	original_amount: int = Field(..., description='Amount in minor units of the source currency')
	converted_amount: int = Field(..., description='Truncated amount in minor units of the target currency')
	source: int = Field(..., description='Preferred exchange rate source id')


class ExchangeRateEntry(BaseModel):
	from_currency: str
	to_currency: str
	rate: float


class RateTableResponse(BaseModel):
	source: int = Field(..., description='Exchange rate source id')
	name: str = Field(..., description='Exchange rate source name')
	rates: list[ExchangeRateEntry] = Field(description='Cached quotes for the source')


class SourceInfo(BaseModel):
	id: int
	name: str
	main_currencies: list[str]
	cached: bool
	rate_count: int


class SourcesResponse(BaseModel):
	sources: list[SourceInfo]


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[str] = Field(description='List of currency codes')

	model_config = ConfigDict(json_schema_extra={'examples': [{'currencies': ['BTC', 'EUR', 'GBP', 'USD']}]})


class RefreshResponse(BaseModel):
	started: bool = Field(..., description='False when an in-flight refresh was reused')
	in_progress: bool = Field(..., description='Whether the refresh is still running')


class HealthResponse(BaseModel):
	status: str
	timestamp: datetime
	cached_sources: list[str]
	snapshot_present: bool
