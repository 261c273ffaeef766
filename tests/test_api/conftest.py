import pytest
from fastapi.testclient import TestClient

from api.dependencies import (
    get_conversion_service,
    get_currency_service,
    get_rate_service,
    get_service_factory,
)
from api.main import app
from application.services.service_factory import ServiceFactory
from config.settings import Settings
from domain.models.exchange_rate import ExchangeRateSource
from helpers import make_table


@pytest.fixture
def factory(tmp_path):
    settings = Settings(
        SNAPSHOT_PATH=str(tmp_path / "currentExchangeRates.data"),
        RATES_URL="https://rates.example.com/exchangeRates",
    )
    return ServiceFactory(settings)


@pytest.fixture
def seeded_factory(factory):
    fixer = ExchangeRateSource.FIXER
    kraken = ExchangeRateSource.KRAKEN
    factory.cache.set(fixer, make_table(fixer, ("USD", "EUR", 0.9), ("EUR", "JPY", 130.0)))
    factory.cache.set(kraken, make_table(kraken, ("USD", "EUR", 0.92)))
    return factory


@pytest.fixture
def client(seeded_factory):
    app.dependency_overrides[get_service_factory] = lambda: seeded_factory
    app.dependency_overrides[get_rate_service] = lambda: seeded_factory.rate_service
    app.dependency_overrides[get_conversion_service] = lambda: seeded_factory.conversion_service
    app.dependency_overrides[get_currency_service] = lambda: seeded_factory.currency_service
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
