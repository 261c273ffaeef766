from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import IntEnum

from domain.models.currency import BTC, ETH, EUR, GBP, USD, USDT, Currency


class ExchangeRateSource(IntEnum):
    """Rate providers, keyed by the numeric id used in the rates payload."""

    COINBASE_GDAX = 1
    POLONIEX = 2
    FIXER = 3
    KRAKEN = 4
    BITFINEX = 5
    BINANCE = 6

    @property
    def main_currencies(self) -> tuple[Currency, ...]:
        return _MAIN_CURRENCIES[self]

    @classmethod
    def canonical_for(cls, from_currency: Currency, to_currency: Currency) -> "ExchangeRateSource":
        if from_currency.is_fiat and to_currency.is_fiat:
            return cls.FIXER
        return cls.COINBASE_GDAX


_MAIN_CURRENCIES: dict[ExchangeRateSource, tuple[Currency, ...]] = {
    ExchangeRateSource.COINBASE_GDAX: (USD, EUR, GBP, BTC),
    ExchangeRateSource.POLONIEX: (BTC, ETH, USDT),
    ExchangeRateSource.FIXER: (USD, EUR),
    ExchangeRateSource.KRAKEN: (USD, EUR, BTC),
    ExchangeRateSource.BITFINEX: (USD, BTC, ETH),
    ExchangeRateSource.BINANCE: (BTC, ETH, USDT),
}


@dataclass(frozen=True)
class ExchangeRate:
    source: ExchangeRateSource
    from_currency: Currency
    to_currency: Currency
    rate: float


class RateTable:
    """Immutable list of quotes published by a single source."""

    __slots__ = ("source", "_rates")

    def __init__(self, source: ExchangeRateSource, rates: Iterable[ExchangeRate]):
        self.source = source
        self._rates = tuple(rates)

    def rate(self, from_currency: Currency, to_currency: Currency) -> float | None:
        # Exact match only; reversing a quote is the converter's job
        for exchange_rate in self._rates:
            if exchange_rate.from_currency == from_currency and exchange_rate.to_currency == to_currency:
                return exchange_rate.rate
        return None

    @property
    def currencies(self) -> set[Currency]:
        found = set()
        for exchange_rate in self._rates:
            found.add(exchange_rate.from_currency)
            found.add(exchange_rate.to_currency)
        return found

    def __iter__(self) -> Iterator[ExchangeRate]:
        return iter(self._rates)

    def __len__(self) -> int:
        return len(self._rates)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RateTable):
            return NotImplemented
        return self.source == other.source and self._rates == other._rates

    def __repr__(self) -> str:
        return f"RateTable(source={self.source.name}, rates={len(self._rates)})"


@dataclass(frozen=True)
class Found:
    value: float


@dataclass(frozen=True)
class NotFound:
    reason: str = "no conversion path"


ConversionOutcome = Found | NotFound
