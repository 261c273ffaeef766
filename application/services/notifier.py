import inspect
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

Observer = Callable[[], Awaitable[None] | None]


class RatesUpdatedNotifier:
    """One-shot "rates updated" broadcast to every registered observer."""

    def __init__(self):
        self._observers: list[Observer] = []

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    async def notify(self) -> None:
        for observer in list(self._observers):
            try:
                result = observer()
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception(f"Rates-updated observer {observer!r} failed")
