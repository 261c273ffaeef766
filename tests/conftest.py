"""
Shared fixtures for cache, conversion and payload tests.
"""

import pytest

from application.services import ConversionService
from domain.models.exchange_rate import ExchangeRateSource
from helpers import make_payload, quote
from infrastructure.cache.rate_cache import RateCache


@pytest.fixture
def cache():
    return RateCache()


@pytest.fixture
def conversion_service(cache):
    return ConversionService(cache)


@pytest.fixture
def sample_payload():
    return make_payload({
        ExchangeRateSource.FIXER: [quote("USD", "EUR", 0.9), quote("EUR", "JPY", 130.0)],
        ExchangeRateSource.COINBASE_GDAX: [quote("BTC", "USD", 20000.0), quote("ETH", "USD", 1500.0)],
    })
