# nosec B101


import json

import pytest

from domain.exceptions.currency import MalformedPayloadError
from domain.models.currency import EUR, USD, CurrencyKind
from domain.models.exchange_rate import ExchangeRateSource
from helpers import make_payload, quote
from infrastructure.providers.payload import RateEntry, decode, parse_payload, parse_source_key

FIXER = ExchangeRateSource.FIXER
KRAKEN = ExchangeRateSource.KRAKEN


def test_parse_payload_builds_table_per_source(sample_payload):
    tables = parse_payload(sample_payload)

    assert set(tables) == {FIXER, ExchangeRateSource.COINBASE_GDAX}
    assert tables[FIXER].rate(USD, EUR) == 0.9
    assert len(tables[FIXER]) == 2


@pytest.mark.parametrize("code", [0, 2, -1, None, True, "1"])
def test_decode_rejects_non_success_code(code):
    with pytest.raises(MalformedPayloadError):
        decode(make_payload({FIXER: [quote("USD", "EUR", 0.9)]}, code=code))


def test_decode_rejects_missing_code():
    with pytest.raises(MalformedPayloadError):
        decode(b'{"3": {"rates": []}}')


@pytest.mark.parametrize("raw", [b"", b"{ invalid json }", b"[1, 2]", b"\x80abc", b'"text"'])
def test_decode_rejects_invalid_documents(raw):
    with pytest.raises(MalformedPayloadError):
        decode(raw)


def test_parse_skips_unknown_source_keys():
    raw = make_payload({FIXER: [quote("USD", "EUR", 0.9)], 999: [quote("USD", "EUR", 0.8)]})

    tables = parse_payload(raw)

    assert list(tables) == [FIXER]


def test_parse_skips_non_numeric_keys():
    raw = b'{"code": 1, "meta": {"rates": []}, "abc": 3, "3": {"rates": [{"from": "USD", "to": "EUR", "rate": 0.9}]}}'

    assert list(parse_payload(raw)) == [FIXER]


@pytest.mark.parametrize("value", [None, [], "rates", {"rates": "USD"}, {"other": []}])
def test_parse_skips_sources_without_rate_list(value):
    raw = b'{"code": 1, "3": %s}' % json.dumps(value).encode()

    assert parse_payload(raw) == {}


@pytest.mark.parametrize(
    "entry",
    [
        quote("USD", "EUR", "0.9"),
        quote("USD", "EUR", 0),
        quote("USD", "EUR", -1.5),
        quote("USD", "EUR", True),
        quote("USD", "EUR", None),
        quote("USD", "USD", 1.0),
        quote("USD", 5, 1.0),
        quote("", "EUR", 1.0),
        {"from": "USD", "rate": 0.9},
        "USD/EUR",
    ],
)
def test_parse_skips_malformed_entries(entry):
    raw = make_payload({FIXER: [entry, quote("GBP", "EUR", 1.15)]})

    table = parse_payload(raw)[FIXER]

    assert len(table) == 1
    assert table.rate(USD, EUR) is None


def test_parse_source_with_only_malformed_entries_is_omitted():
    raw = make_payload({FIXER: [quote("USD", "EUR", -1)], KRAKEN: [quote("USD", "EUR", 0.9)]})

    assert list(parse_payload(raw)) == [KRAKEN]


def test_parse_accepts_integer_rates():
    table = parse_payload(make_payload({FIXER: [quote("USD", "JPY", 150)]}))[FIXER]

    assert [r.rate for r in table] == [150.0]


def test_parse_unknown_currency_codes_become_sentinels():
    table = parse_payload(make_payload({KRAKEN: [quote("newcoin", "usd", 0.5)]}))[KRAKEN]
    rate = next(iter(table))

    assert rate.from_currency.code == "NEWCOIN"
    assert rate.from_currency.kind is CurrencyKind.UNKNOWN
    assert rate.to_currency is USD


def test_parse_source_key():
    assert parse_source_key("3") is FIXER
    assert parse_source_key("code") is None
    assert parse_source_key("42") is None


def test_rate_entry_reads_aliases():
    entry = RateEntry.model_validate({"from": "usd", "to": "eur", "rate": 0.9})

    assert entry.from_currency == "USD"
    assert entry.to_currency == "EUR"
    assert entry.rate == 0.9
