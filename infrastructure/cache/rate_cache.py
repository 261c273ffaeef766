import threading

from domain.models.exchange_rate import ExchangeRateSource, RateTable


class RateCache:
    """Latest rate table per source, shared between converters and the refresher.

    Tables are immutable, so the lock only guards the mapping itself and
    is never held across I/O.
    """

    def __init__(self):
        self._tables: dict[ExchangeRateSource, RateTable] = {}
        self._lock = threading.Lock()

    def get(self, source: ExchangeRateSource) -> RateTable | None:
        with self._lock:
            return self._tables.get(source)

    def set(self, source: ExchangeRateSource, table: RateTable) -> None:
        with self._lock:
            self._tables[source] = table

    def sources(self) -> list[ExchangeRateSource]:
        with self._lock:
            return sorted(self._tables)

    def snapshot(self) -> dict[ExchangeRateSource, RateTable]:
        with self._lock:
            return dict(self._tables)

    def clear(self) -> None:
        with self._lock:
            self._tables.clear()
