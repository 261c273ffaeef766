import json
import logging
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from domain.exceptions.currency import MalformedPayloadError
from domain.models.currency import lookup
from domain.models.exchange_rate import ExchangeRate, ExchangeRateSource, RateTable

logger = logging.getLogger(__name__)

SUCCESS_CODE = 1


class RateEntry(BaseModel):
    """One ``{"from", "to", "rate"}`` quote inside a source's ``rates`` list."""

    from_currency: str = Field(..., alias="from", min_length=1)
    to_currency: str = Field(..., alias="to", min_length=1)
    rate: float = Field(..., gt=0, allow_inf_nan=False)

    @field_validator("from_currency", "to_currency", mode="before")
    @classmethod
    def code_must_be_string(cls, v: Any):
        if not isinstance(v, str):
            raise ValueError("currency code must be a string")
        return v.strip().upper()

    @field_validator("rate", mode="before")
    @classmethod
    def rate_must_be_number(cls, v: Any):
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("rate must be a number")
        return v

    @model_validator(mode="after")
    def currencies_must_be_different(self):
        if self.from_currency == self.to_currency:
            raise ValueError("from and to must be different")
        return self


def decode(raw: bytes) -> dict[str, Any]:
    try:
        document = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedPayloadError(f"Rates payload is not valid JSON: {e}") from e

    if not isinstance(document, dict):
        raise MalformedPayloadError("Rates payload must be a JSON object")

    code = document.get("code")
    if isinstance(code, bool) or code != SUCCESS_CODE:
        raise MalformedPayloadError(f"Rates payload reported failure code: {code!r}")

    return document


def parse_source_key(key: str) -> ExchangeRateSource | None:
    try:
        return ExchangeRateSource(int(key))
    except ValueError:
        return None


def parse_rates(source: ExchangeRateSource, value: Any) -> list[ExchangeRate]:
    if not isinstance(value, dict) or not isinstance(value.get("rates"), list):
        logger.debug(f"Skipping {source.name}: no rates list")
        return []

    rates = []
    for raw_entry in value["rates"]:
        try:
            entry = RateEntry.model_validate(raw_entry)
        except ValidationError as e:
            logger.debug(f"Skipping malformed {source.name} rate {raw_entry!r}: {e.error_count()} errors")
            continue
        rates.append(
            ExchangeRate(
                source=source,
                from_currency=lookup(entry.from_currency),
                to_currency=lookup(entry.to_currency),
                rate=entry.rate,
            )
        )
    return rates


def parse_payload(raw: bytes) -> dict[ExchangeRateSource, RateTable]:
    """Decode a rates document into one table per recognised source.

    Raises MalformedPayloadError when the document as a whole is unusable.
    Unknown source keys and malformed entries are skipped; sources without
    any valid entry are left out of the result.
    """
    document = decode(raw)

    tables: dict[ExchangeRateSource, RateTable] = {}
    for key, value in document.items():
        source = parse_source_key(key)
        if source is None:
            continue

        rates = parse_rates(source, value)
        if rates:
            tables[source] = RateTable(source, rates)

    return tables
