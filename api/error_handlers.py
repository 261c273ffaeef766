import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.currency import (
	ConversionUnavailableError,
	InvalidCurrencyError,
	UnknownSourceError,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(InvalidCurrencyError)
	async def invalid_currency_handler(request: Request, exc: InvalidCurrencyError):
		return JSONResponse(status_code=400, content={'detail': str(exc)})

	@app.exception_handler(UnknownSourceError)
	async def unknown_source_handler(request: Request, exc: UnknownSourceError):
		return JSONResponse(status_code=404, content={'detail': str(exc)})

	@app.exception_handler(ConversionUnavailableError)
	async def conversion_unavailable_handler(request: Request, exc: ConversionUnavailableError):
		logger.info(f'Conversion unavailable: {exc}')
		return JSONResponse(status_code=404, content={'detail': str(exc)})
