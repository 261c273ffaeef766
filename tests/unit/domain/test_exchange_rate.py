# nosec B101


from domain.models.currency import BTC, EUR, GBP, JPY, USD, lookup
from domain.models.exchange_rate import ExchangeRate, ExchangeRateSource, RateTable


def test_source_ids_match_payload_keys():
    assert ExchangeRateSource(1) is ExchangeRateSource.COINBASE_GDAX
    assert ExchangeRateSource(3) is ExchangeRateSource.FIXER


def test_every_source_declares_main_currencies():
    for source in ExchangeRateSource:
        assert len(source.main_currencies) > 0


def test_canonical_source_for_fiat_pair_is_fixer():
    assert ExchangeRateSource.canonical_for(USD, EUR) is ExchangeRateSource.FIXER


def test_canonical_source_when_crypto_involved():
    assert ExchangeRateSource.canonical_for(BTC, USD) is ExchangeRateSource.COINBASE_GDAX
    assert ExchangeRateSource.canonical_for(USD, BTC) is ExchangeRateSource.COINBASE_GDAX
    assert ExchangeRateSource.canonical_for(lookup("NEWCOIN"), USD) is ExchangeRateSource.COINBASE_GDAX


def test_rate_table_exact_match_only():
    source = ExchangeRateSource.FIXER
    table = RateTable(source, [ExchangeRate(source, USD, EUR, 0.9)])

    assert table.rate(USD, EUR) == 0.9
    assert table.rate(EUR, USD) is None
    assert table.rate(USD, GBP) is None


def test_rate_table_first_match_wins():
    source = ExchangeRateSource.FIXER
    table = RateTable(
        source,
        [ExchangeRate(source, USD, JPY, 140.0), ExchangeRate(source, USD, JPY, 150.0)],
    )

    assert table.rate(USD, JPY) == 140.0


def test_rate_table_len_iter_and_currencies():
    source = ExchangeRateSource.FIXER
    rates = [ExchangeRate(source, USD, EUR, 0.9), ExchangeRate(source, EUR, JPY, 130.0)]
    table = RateTable(source, rates)

    assert len(table) == 2
    assert list(table) == rates
    assert table.currencies == {USD, EUR, JPY}


def test_rate_table_equality():
    source = ExchangeRateSource.FIXER
    rates = [ExchangeRate(source, USD, EUR, 0.9)]

    assert RateTable(source, rates) == RateTable(source, list(rates))
    assert RateTable(source, rates) != RateTable(ExchangeRateSource.KRAKEN, rates)
