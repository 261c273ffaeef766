import httpx

from domain.exceptions.currency import ProviderError


class RatesEndpointClient:
	"""Fetches the combined multi-source rates document as raw bytes."""

	def __init__(self, url: str, client: httpx.AsyncClient | None = None, timeout: float = 15.0):
		self.url = url
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'rates-endpoint'

	async def fetch(self) -> bytes:
		try:
			response = await self._client.get(self.url)
			response.raise_for_status()
		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'Rates endpoint HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderError(f'Rates endpoint request failed: {e.__class__.__name__}') from e

		if not response.content:
			raise ProviderError('Rates endpoint returned an empty body')

		return response.content

	async def close(self) -> None:
		await self._client.aclose()
