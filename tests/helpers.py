import json

from domain.models.currency import lookup
from domain.models.exchange_rate import ExchangeRate, ExchangeRateSource, RateTable


def make_table(source: ExchangeRateSource, *quotes: tuple[str, str, float]) -> RateTable:
    return RateTable(
        source,
        [ExchangeRate(source, lookup(from_), lookup(to), rate) for from_, to, rate in quotes],
    )


def make_payload(sources: dict[int, list[dict]] | None = None, code=1) -> bytes:
    document = {"code": code}
    for source_id, rates in (sources or {}).items():
        document[str(int(source_id))] = {"rates": rates}
    return json.dumps(document).encode()


def quote(from_: str, to: str, rate) -> dict:
    return {"from": from_, "to": to, "rate": rate}
