import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.dependencies import cleanup_dependencies, init_dependencies
from api.error_handlers import register_exception_handlers
from api.routes import health, rates, websockets
from config.logging import setup_logging
from config.settings import get_settings
from workers.rate_refresher import RateRefresherWorker

logger = logging.getLogger(__name__)


settings = get_settings()
setup_logging(settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
	logger.info('Starting Exchange Rate Engine...')

	factory = init_dependencies()
	unsubscribe = factory.notifier.subscribe(websockets.manager.rates_updated)

	factory.hydrate()

	# The first refresh cycle runs immediately inside the worker loop
	worker = RateRefresherWorker(factory.rate_service, update_interval=settings.REFRESH_INTERVAL)
	worker_task = asyncio.create_task(worker.run())

	logger.info('Application ready')

	yield

	logger.info('Shutting down...')
	worker.stop()
	worker_task.cancel()
	with contextlib.suppress(asyncio.CancelledError):
		await worker_task
	unsubscribe()
	await cleanup_dependencies()


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
	logger.error(f'Unhandled exception: {exc}', exc_info=True)
	return JSONResponse(status_code=500, content={'detail': 'Internal server error'})


app.include_router(rates.router)
app.include_router(websockets.router)
app.include_router(health.router)
register_exception_handlers(app)
