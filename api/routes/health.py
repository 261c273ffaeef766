from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_service_factory
from api.schemas import HealthResponse
from application.services.service_factory import ServiceFactory

router = APIRouter(tags=['health'])


@router.get(
	'/health',
	response_model=HealthResponse,
	status_code=status.HTTP_200_OK,
	summary='Service health check',
)
async def health_check(
	factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> HealthResponse:
	cached = factory.cache.sources()
	return HealthResponse(
		status='healthy' if cached else 'degraded',
		timestamp=datetime.now(),
		cached_sources=[source.name for source in cached],
		snapshot_present=factory.store.exists(),
	)
