from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from api.dependencies import get_conversion_service, get_currency_service, get_rate_service
from api.schemas import (
	ConversionResponse,
	ExchangeRateEntry,
	MinorUnitConversionResponse,
	RateTableResponse,
	RefreshResponse,
	SourceInfo,
	SourcesResponse,
	SupportedCurrenciesResponse,
)
from application.services import ConversionService, CurrencyService, ExchangeRateService
from config.settings import get_settings
from domain.exceptions.currency import ConversionUnavailableError, UnknownSourceError

router = APIRouter(prefix='/api', tags=['rates'])

MAX_AMOUNT = 1e15
MAX_MINOR_AMOUNT = 10**18

CurrencyCode = Annotated[str, Path(min_length=2, max_length=10)]
SourceQuery = Annotated[int | None, Query(description='Preferred exchange rate source id')]


def _source_id(source: int | None) -> int:
	return get_settings().DEFAULT_SOURCE if source is None else source


@router.get(
	'/convert/{from_currency}/{to_currency}/{amount}',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert an amount between two currencies',
)
async def convert_amount(
	from_currency: CurrencyCode,
	to_currency: CurrencyCode,
	amount: Annotated[float, Path(ge=0, le=MAX_AMOUNT)],
	conversion: Annotated[ConversionService, Depends(get_conversion_service)],
	currencies: Annotated[CurrencyService, Depends(get_currency_service)],
	source: SourceQuery = None,
) -> ConversionResponse:
	from_ = currencies.resolve_currency(from_currency)
	to = currencies.resolve_currency(to_currency)
	rate_source = currencies.resolve_source(_source_id(source))

	converted = conversion.convert(amount, from_, to, rate_source)
	if converted is None:
		raise ConversionUnavailableError(from_.code, to.code, rate_source.name)

	return ConversionResponse(
		from_currency=from_.code,
		to_currency=to.code,
		original_amount=amount,
		converted_amount=converted,
		source=rate_source.value,
	)


@router.get(
	'/convert/minor/{from_currency}/{to_currency}/{amount}',
	response_model=MinorUnitConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert an integer minor-unit amount',
)
async def convert_minor_units(
	from_currency: CurrencyCode,
	to_currency: CurrencyCode,
	amount: Annotated[int, Path(ge=0, le=MAX_MINOR_AMOUNT)],
	conversion: Annotated[ConversionService, Depends(get_conversion_service)],
	currencies: Annotated[CurrencyService, Depends(get_currency_service)],
	source: SourceQuery = None,
) -> MinorUnitConversionResponse:
	from_ = currencies.resolve_currency(from_currency)
	to = currencies.resolve_currency(to_currency)
	rate_source = currencies.resolve_source(_source_id(source))

	converted = conversion.convert_minor_units(amount, from_, to, rate_source)
	if converted is None:
		raise ConversionUnavailableError(from_.code, to.code, rate_source.name)

	return MinorUnitConversionResponse(
		from_currency=from_.code,
		to_currency=to.code,
		original_amount=amount,
		converted_amount=converted,
		source=rate_source.value,
	)


@router.get(
	'/rates/{source}',
	response_model=RateTableResponse,
	status_code=status.HTTP_200_OK,
	summary='Cached rate table for a source',
)
async def get_exchange_rates(
	source: int,
	rates: Annotated[ExchangeRateService, Depends(get_rate_service)],
	currencies: Annotated[CurrencyService, Depends(get_currency_service)],
) -> RateTableResponse:
	rate_source = currencies.resolve_source(source)
	table = rates.exchange_rates(rate_source)
	if table is None:
		raise UnknownSourceError(f'No exchange rates cached for {rate_source.name}')

	return RateTableResponse(
		source=rate_source.value,
		name=rate_source.name,
		rates=[
			ExchangeRateEntry(
				from_currency=rate.from_currency.code,
				to_currency=rate.to_currency.code,
				rate=rate.rate,
			)
			for rate in table
		],
	)


@router.post(
	'/rates/refresh',
	response_model=RefreshResponse,
	status_code=status.HTTP_202_ACCEPTED,
	summary='Schedule a background refresh of exchange rates',
)
async def refresh_exchange_rates(
	rates: Annotated[ExchangeRateService, Depends(get_rate_service)],
) -> RefreshResponse:
	already_running = rates.refresh_in_progress
	task = rates.update_exchange_rates()
	return RefreshResponse(started=not already_running, in_progress=not task.done())


@router.get(
	'/sources',
	response_model=SourcesResponse,
	status_code=status.HTTP_200_OK,
	summary='List exchange rate sources',
)
async def list_sources(
	rates: Annotated[ExchangeRateService, Depends(get_rate_service)],
	currencies: Annotated[CurrencyService, Depends(get_currency_service)],
) -> SourcesResponse:
	sources = []
	for rate_source in currencies.list_sources():
		table = rates.exchange_rates(rate_source)
		sources.append(
			SourceInfo(
				id=rate_source.value,
				name=rate_source.name,
				main_currencies=[c.code for c in rate_source.main_currencies],
				cached=table is not None,
				rate_count=len(table) if table is not None else 0,
			)
		)
	return SourcesResponse(sources=sources)


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List supported currencies',
)
async def get_supported_currencies(
	currencies: Annotated[CurrencyService, Depends(get_currency_service)],
) -> SupportedCurrenciesResponse:
	return SupportedCurrenciesResponse(currencies=currencies.get_supported_currencies())
