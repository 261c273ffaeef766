import asyncio
import logging
import signal

from application.services import ExchangeRateService
from application.services.service_factory import ServiceFactory
from config.logging import setup_logging
from config.settings import get_settings

logger = logging.getLogger(__name__)


class RateRefresherWorker:
    """
    Background loop that refreshes the exchange rate cache on a fixed interval.

    A failed cycle keeps the stale rates and simply waits for the next one.
    """
    def __init__(self, rate_service: ExchangeRateService, update_interval: float = 300):
        """
        Args:
            rate_service: Service whose refresh() is called each cycle
            update_interval: Seconds between refresh cycles
        """
        self.rate_service = rate_service
        self.update_interval = update_interval
        self.cycle_count = 0
        self._stopped = asyncio.Event()

    @property
    def is_running(self) -> bool:
        return not self._stopped.is_set()

    async def update_cycle(self) -> bool:
        self.cycle_count += 1
        logger.info(f"Refresh cycle #{self.cycle_count}")

        updated = await self.rate_service.refresh()
        if not updated:
            logger.warning(f"Refresh cycle #{self.cycle_count} failed, keeping cached rates")
        return updated

    async def run(self) -> None:
        """Main worker loop. Runs until stop() is called or the task is cancelled."""
        logger.info(f"Rate refresher started (interval {self.update_interval}s)")

        while self.is_running:
            try:
                await self.update_cycle()
            except asyncio.CancelledError:
                logger.info("Rate refresher received cancellation signal")
                raise
            except Exception as e:
                logger.error(f"Error in refresh cycle: {e}", exc_info=True)

            try:
                await asyncio.wait_for(self._stopped.wait(), timeout=self.update_interval)
            except asyncio.TimeoutError:
                pass

        logger.info("Rate refresher stopped")

    def stop(self) -> None:
        logger.info("Stopping rate refresher...")
        self._stopped.set()


async def main() -> None:
    settings = get_settings()
    setup_logging(settings)

    factory = ServiceFactory(settings)
    factory.hydrate()

    worker = RateRefresherWorker(factory.rate_service, update_interval=settings.REFRESH_INTERVAL)

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, worker.stop)

    try:
        await worker.run()
    finally:
        await factory.close()
        logger.info("Cleanup completed")


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
