import logging

from application.services import ConversionService, CurrencyService, ExchangeRateService
from application.services.service_factory import ServiceFactory
from config.settings import get_settings

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	factory: ServiceFactory | None = None


deps = AppDependencies()


def init_dependencies() -> ServiceFactory:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	deps.factory = ServiceFactory(get_settings())
	logger.info('Dependencies initialized')
	return deps.factory


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.factory:
		await deps.factory.close()
		deps.factory = None

	logger.info('Cleanup complete')


def get_service_factory() -> ServiceFactory:
	if deps.factory is None:
		raise RuntimeError('Dependencies not initialized. Call init_dependencies() first.')
	return deps.factory


def get_rate_service() -> ExchangeRateService:
	return get_service_factory().rate_service


def get_conversion_service() -> ConversionService:
	return get_service_factory().conversion_service


def get_currency_service() -> CurrencyService:
	return get_service_factory().currency_service
