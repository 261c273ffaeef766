from dataclasses import dataclass
from enum import Enum
from functools import lru_cache


class CurrencyKind(str, Enum):
    FIAT = "fiat"
    CRYPTO = "crypto"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Currency:
    code: str
    decimals: int
    kind: CurrencyKind

    @property
    def is_fiat(self) -> bool:
        return self.kind is CurrencyKind.FIAT

    @property
    def is_crypto(self) -> bool:
        return self.kind is CurrencyKind.CRYPTO

    def __str__(self) -> str:
        return self.code


UNKNOWN_CURRENCY_DECIMALS = 8

_FIAT_DECIMALS = {
    "USD": 2, "EUR": 2, "GBP": 2, "JPY": 0, "CAD": 2, "AUD": 2, "CHF": 2,
    "CNY": 2, "SEK": 2, "NZD": 2, "MXN": 2, "SGD": 2, "HKD": 2, "NOK": 2,
    "KRW": 0, "TRY": 2, "RUB": 2, "INR": 2, "BRL": 2, "ZAR": 2, "DKK": 2,
    "PLN": 2, "TWD": 2, "THB": 2, "IDR": 2, "HUF": 2, "CZK": 2, "ILS": 2,
    "PHP": 2, "AED": 2, "SAR": 2, "MYR": 2, "NGN": 2, "ISK": 0, "CLP": 0,
    "KWD": 3, "BHD": 3,
}

# Crypto amounts are stored with 8 minor-unit decimals across the board
_CRYPTO_CODES = (
    "BTC", "ETH", "LTC", "XRP", "BCH", "ETC", "XMR", "DASH", "ZEC", "XLM",
    "USDT", "EOS", "NEO", "ADA", "DOGE", "TRX", "BNB", "XEM", "OMG", "REP",
)

_REGISTRY: dict[str, Currency] = {
    **{code: Currency(code, decimals, CurrencyKind.FIAT) for code, decimals in _FIAT_DECIMALS.items()},
    **{code: Currency(code, 8, CurrencyKind.CRYPTO) for code in _CRYPTO_CODES},
}

USD = _REGISTRY["USD"]
EUR = _REGISTRY["EUR"]
GBP = _REGISTRY["GBP"]
JPY = _REGISTRY["JPY"]
BTC = _REGISTRY["BTC"]
ETH = _REGISTRY["ETH"]
USDT = _REGISTRY["USDT"]


@lru_cache(maxsize=512)
def lookup(code: str) -> Currency:
    """Return the registered currency for ``code``.

    Unknown codes never fail: they resolve to a placeholder with the
    ``UNKNOWN`` kind so parsed rates for new listings stay addressable.
    """
    normalized = code.strip().upper()
    known = _REGISTRY.get(normalized)
    if known is not None:
        return known
    return Currency(normalized, UNKNOWN_CURRENCY_DECIMALS, CurrencyKind.UNKNOWN)


def is_known(code: str) -> bool:
    return code.strip().upper() in _REGISTRY


def supported_codes() -> list[str]:
    return sorted(_REGISTRY)
